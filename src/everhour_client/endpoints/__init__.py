"""Endpoint wrappers for the Everhour API.

Each function takes an ``EverhourApiClient`` plus the endpoint's parameters,
builds the URL, sends the request, and returns the decoded JSON body.
Functions are grouped by resource:

- users, projects, sections, tasks
- time_records, timers, timecards
- clients, invoices, expenses, attachments
- assignments (resource planner), webhooks, reports
"""

from everhour_client.endpoints.assignments import (
    create_assignment,
    delete_assignment,
    get_all_assignments,
    update_assignment,
)
from everhour_client.endpoints.attachments import (
    create_attachment,
    delete_attachment,
    download_attachment,
)
from everhour_client.endpoints.clients import (
    create_client,
    delete_budget,
    get_all_clients,
    get_client,
    update_budget,
    update_client,
)
from everhour_client.endpoints.expenses import (
    add_attachment_to_expense,
    create_category,
    create_expense,
    delete_category,
    delete_expense,
    get_all_categories,
    get_all_expenses,
    update_category,
    update_expense,
)
from everhour_client.endpoints.invoices import (
    create_invoice,
    delete_invoice,
    export_invoice,
    get_all_invoices,
    get_invoice,
    mark_invoice_as,
    refresh_invoice_line_items,
    update_invoice,
)
from everhour_client.endpoints.projects import (
    create_project,
    delete_project,
    get_all_projects,
    get_project,
    update_project,
    update_project_billing_budget,
)
from everhour_client.endpoints.reports import (
    clients_report,
    estimates_report,
    projects_report,
    time_report,
    users_report,
)
from everhour_client.endpoints.sections import (
    create_section,
    delete_section,
    get_project_sections,
    get_section,
    update_section,
)
from everhour_client.endpoints.tasks import (
    create_task,
    delete_task,
    delete_task_estimate,
    get_project_tasks,
    get_task,
    search_project_tasks,
    search_tasks,
    update_task,
    update_task_estimate,
)
from everhour_client.endpoints.time_records import (
    add_time,
    delete_time_record,
    get_all_time_records,
    get_project_time_records,
    get_task_time_records,
    get_user_time_records,
    update_time_record,
)
from everhour_client.endpoints.timecards import (
    clock_in,
    clock_out,
    delete_timecard,
    get_all_timecards,
    get_timecard,
    get_user_timecards,
    update_timecard,
)
from everhour_client.endpoints.timers import (
    get_all_team_timers,
    get_running_timer,
    start_timer,
    stop_timer,
)
from everhour_client.endpoints.users import (
    get_all_users,
    get_current_user,
)
from everhour_client.endpoints.webhooks import (
    create_webhook,
    delete_webhook,
    get_webhook,
    update_webhook,
)

__all__ = [
    "get_all_assignments",
    "create_assignment",
    "update_assignment",
    "delete_assignment",
    "create_attachment",
    "delete_attachment",
    "download_attachment",
    "get_all_clients",
    "get_client",
    "create_client",
    "update_client",
    "update_budget",
    "delete_budget",
    "get_all_expenses",
    "create_expense",
    "update_expense",
    "delete_expense",
    "add_attachment_to_expense",
    "get_all_categories",
    "create_category",
    "update_category",
    "delete_category",
    "get_all_invoices",
    "get_invoice",
    "create_invoice",
    "update_invoice",
    "delete_invoice",
    "refresh_invoice_line_items",
    "mark_invoice_as",
    "export_invoice",
    "get_all_projects",
    "get_project",
    "create_project",
    "update_project",
    "delete_project",
    "update_project_billing_budget",
    "clients_report",
    "projects_report",
    "users_report",
    "estimates_report",
    "time_report",
    "get_project_sections",
    "get_section",
    "create_section",
    "update_section",
    "delete_section",
    "get_project_tasks",
    "search_project_tasks",
    "search_tasks",
    "get_task",
    "create_task",
    "update_task",
    "delete_task",
    "update_task_estimate",
    "delete_task_estimate",
    "get_all_time_records",
    "get_project_time_records",
    "get_task_time_records",
    "get_user_time_records",
    "add_time",
    "update_time_record",
    "delete_time_record",
    "get_all_timecards",
    "get_user_timecards",
    "get_timecard",
    "update_timecard",
    "delete_timecard",
    "clock_in",
    "clock_out",
    "get_running_timer",
    "get_all_team_timers",
    "start_timer",
    "stop_timer",
    "get_current_user",
    "get_all_users",
    "get_webhook",
    "create_webhook",
    "update_webhook",
    "delete_webhook",
]
