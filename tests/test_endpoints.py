"""Tests for endpoint wrappers."""

import json
from typing import Any, Callable

import httpx
import pytest  # type: ignore[import-not-found]

from everhour_client.core.client import BASE_URL, EverhourApiClient
from everhour_client.core.exceptions import RequestFailedError, RequiredError
from everhour_client.endpoints import (
    add_time,
    clients_report,
    clock_in,
    create_project,
    create_task,
    create_webhook,
    delete_category,
    delete_task,
    delete_time_record,
    get_all_assignments,
    get_all_projects,
    get_all_time_records,
    get_current_user,
    get_project_tasks,
    get_running_timer,
    get_task,
    get_timecard,
    mark_invoice_as,
    search_tasks,
    start_timer,
    stop_timer,
    time_report,
    update_budget,
    update_project,
    update_project_billing_budget,
    update_task_estimate,
    users_report,
)
from everhour_client.models import (
    BudgetRequest,
    ExpenseCategoryDeleteRequest,
    ProjectBilling,
    ProjectBillingBudgetRequest,
    ProjectRequest,
    RemoveTimeRecordRequest,
    TaskEstimateRequest,
    TaskRequest,
    TimeRecordRequest,
    TimerRequest,
    WebhookRequest,
)

ClientFactory = Callable[..., EverhourApiClient]


def body_of(request: httpx.Request) -> Any:
    """Decode a recorded request body."""
    return json.loads(request.content) if request.content else None


class TestUserAndProjectEndpoints:
    """Test user, project and task wrappers."""

    @pytest.mark.asyncio
    async def test_get_current_user(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test fetching the current user."""
        user = {"id": 42, "name": "Jane", "role": "admin", "status": "active"}
        client = make_client(200, user)

        result = await get_current_user(client)

        assert result == user
        assert sent_requests[0].method == "GET"
        assert str(sent_requests[0].url) == f"{BASE_URL}/users/me"

    @pytest.mark.asyncio
    async def test_get_all_projects_filters(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test listing projects with a search query and limit."""
        client = make_client(200, [])

        await get_all_projects(client, limit=10, query="web")

        assert str(sent_requests[0].url) == f"{BASE_URL}/projects?limit=10&query=web"

    @pytest.mark.asyncio
    async def test_create_project(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test creating a project."""
        client = make_client(201, {"id": "ev:1", "name": "Website"})

        await create_project(client, ProjectRequest(name="Website", users=[1, 2]))

        request = sent_requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/projects"
        assert body_of(request) == {"name": "Website", "users": [1, 2]}

    @pytest.mark.asyncio
    async def test_get_project_tasks_query(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that task listing options map to the service's query names."""
        client = make_client(200, [])

        await get_project_tasks(client, "ev:1", page=2, exclude_closed=True)

        assert str(sent_requests[0].url) == (
            f"{BASE_URL}/projects/ev%3A1/tasks?page=2&excludeClosed=true"
        )

    @pytest.mark.asyncio
    async def test_search_tasks(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test searching tasks across projects."""
        client = make_client(200, [])

        await search_tasks(client, query="bug", search_in_closed=False)

        assert str(sent_requests[0].url) == (
            f"{BASE_URL}/tasks/search?query=bug&searchInClosed=false"
        )

    @pytest.mark.asyncio
    async def test_get_task_uses_task_id(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that get_task puts the task id in the path."""
        client = make_client(200, {"id": "ev:9", "name": "Task", "projects": []})

        await get_task(client, "ev:9")

        assert str(sent_requests[0].url) == f"{BASE_URL}/tasks/ev%3A9"

    @pytest.mark.asyncio
    async def test_create_task(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test creating a task with camelCase fields."""
        client = make_client(201, {})
        payload = TaskRequest(name="Design", section=3, due_on="2024-04-01")

        await create_task(client, "ev:1", payload)

        request = sent_requests[0]
        assert str(request.url) == f"{BASE_URL}/projects/ev%3A1/tasks"
        assert body_of(request) == {"name": "Design", "section": 3, "dueOn": "2024-04-01"}

    @pytest.mark.asyncio
    async def test_update_task_estimate(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test setting a task estimate."""
        client = make_client(200, {})

        await update_task_estimate(client, "ev:9", TaskEstimateRequest(total=7200))

        request = sent_requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{BASE_URL}/tasks/ev%3A9/estimate"
        assert body_of(request) == {"total": 7200}

    @pytest.mark.asyncio
    async def test_partial_project_update(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that a rename sends only the name."""
        client = make_client(200, {"id": "ev:1", "name": "Renamed"})

        await update_project(client, "ev:1", ProjectRequest(name="Renamed"))

        request = sent_requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{BASE_URL}/projects/ev%3A1"
        assert body_of(request) == {"name": "Renamed"}

    @pytest.mark.asyncio
    async def test_update_project_billing_budget(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test the billing update with its example label."""
        client = make_client(200, {"id": "ev:1"})
        payload = ProjectBillingBudgetRequest(billing=ProjectBilling(type="hourly"))

        await update_project_billing_budget(client, "ev:1", payload, example="Hourly project")
        await update_project_billing_budget(client, "ev:1", payload)

        first, second = sent_requests
        assert first.method == "PUT"
        assert str(first.url) == f"{BASE_URL}/projects/ev%3A1/billing?example=Hourly%20project"
        assert str(second.url) == f"{BASE_URL}/projects/ev%3A1/billing"
        assert body_of(first) == {"billing": {"type": "hourly"}}

    @pytest.mark.asyncio
    async def test_dot_ids_stay_in_path(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that an id of ".." cannot climb out of the resource path."""
        client = make_client(204)

        await delete_task(client, "..")

        request = sent_requests[0]
        assert request.method == "DELETE"
        assert str(request.url) == f"{BASE_URL}/tasks/%2E%2E"

    @pytest.mark.asyncio
    async def test_missing_id_never_sends(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that a missing path id fails before any request is made."""
        client = make_client(200, {})

        with pytest.raises(RequiredError):
            await get_task(client, None)  # type: ignore[arg-type]

        assert sent_requests == []


class TestTimeEndpoints:
    """Test time record, timer and timecard wrappers."""

    @pytest.mark.asyncio
    async def test_get_all_time_records_range(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that date_from and date_to are sent as from and to."""
        client = make_client(200, [])

        await get_all_time_records(client, date_from="2024-03-01", date_to="2024-03-31")

        assert str(sent_requests[0].url) == (
            f"{BASE_URL}/team/time?from=2024-03-01&to=2024-03-31"
        )

    @pytest.mark.asyncio
    async def test_add_time(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test adding time to a task."""
        record = {"id": 1, "date": "2024-03-01", "time": 5400, "user": 42}
        client = make_client(201, record)

        result = await add_time(
            client, "ev:9", TimeRecordRequest(date="2024-03-01", time=5400, comment="Review")
        )

        assert result == record
        request = sent_requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/tasks/ev%3A9/time"
        assert body_of(request) == {"date": "2024-03-01", "time": 5400, "comment": "Review"}

    @pytest.mark.asyncio
    async def test_delete_time_record_sends_body(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that removing time sends the day and user in the body."""
        client = make_client(204)

        result = await delete_time_record(
            client, "ev:9", RemoveTimeRecordRequest(date="2024-03-01", user=42)
        )

        assert result is None
        request = sent_requests[0]
        assert request.method == "DELETE"
        assert body_of(request) == {"date": "2024-03-01", "user": 42}

    @pytest.mark.asyncio
    async def test_timer_lifecycle(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test starting, reading and stopping the timer."""
        client = make_client(200, {"status": "active"})

        await start_timer(client, TimerRequest(task="ev:9", comment="Focus"))
        await get_running_timer(client)
        await stop_timer(client)

        calls = [(r.method, str(r.url)) for r in sent_requests]
        assert calls == [
            ("POST", f"{BASE_URL}/timers"),
            ("GET", f"{BASE_URL}/timers/current"),
            ("DELETE", f"{BASE_URL}/timers/current"),
        ]
        assert body_of(sent_requests[0]) == {"task": "ev:9", "comment": "Focus"}

    @pytest.mark.asyncio
    async def test_get_timecard(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test fetching a user's timecard for one day."""
        client = make_client(200, {"user": 4096})

        await get_timecard(client, 4096, "2020-12-31")

        assert str(sent_requests[0].url) == f"{BASE_URL}/users/4096/timecards/2020-12-31"

    @pytest.mark.asyncio
    async def test_clock_in_sends_empty_object(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that clocking in without a date sends an empty JSON object."""
        client = make_client(200, {})

        await clock_in(client, 4096)

        request = sent_requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/users/4096/timecards/clock-in"
        assert body_of(request) == {}


class TestBillingEndpoints:
    """Test client, invoice and expense wrappers."""

    @pytest.mark.asyncio
    async def test_update_budget(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test setting a client budget."""
        client = make_client(200, {})
        payload = BudgetRequest(type="money", budget=500000, threshold=80)

        await update_budget(client, 7, payload)

        request = sent_requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{BASE_URL}/clients/7/budget"
        assert body_of(request) == {
            "type": "money",
            "budget": 500000,
            "threshold": 80,
        }

    @pytest.mark.asyncio
    async def test_mark_invoice_as(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that the invoice status is part of the path."""
        client = make_client(200, {})

        await mark_invoice_as(client, 15, "paid")

        request = sent_requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/invoices/15/paid"
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_delete_category_with_options(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test deleting an expense category and moving its expenses."""
        client = make_client(204)

        await delete_category(client, 3, ExpenseCategoryDeleteRequest(target_category=4))

        request = sent_requests[0]
        assert str(request.url) == f"{BASE_URL}/expenses/categories/3"
        assert body_of(request) == {"targetCategory": 4}

    @pytest.mark.asyncio
    async def test_delete_category_without_body(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test deleting an expense category with no options."""
        client = make_client(204)

        await delete_category(client, 3)

        assert sent_requests[0].content == b""


class TestPlanningAndReportEndpoints:
    """Test assignment, webhook and report wrappers."""

    @pytest.mark.asyncio
    async def test_get_all_assignments(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test that assignment filters map to the service's query names."""
        client = make_client(200, [])

        await get_all_assignments(client, type="time-off", client_id=5, date_from="2024-01-01")

        assert str(sent_requests[0].url) == (
            f"{BASE_URL}/resource-planner/assignments?type=time-off&client=5&from=2024-01-01"
        )

    @pytest.mark.asyncio
    async def test_create_webhook(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test registering a webhook."""
        client = make_client(201, {})
        payload = WebhookRequest(
            target_url="https://example.com/hook", events=["api:timer:started"]
        )

        await create_webhook(client, payload)

        request = sent_requests[0]
        assert str(request.url) == f"{BASE_URL}/hooks"
        assert body_of(request) == {
            "targetUrl": "https://example.com/hook",
            "events": ["api:timer:started"],
        }

    @pytest.mark.asyncio
    async def test_dashboard_reports(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test dashboard report filters."""
        client = make_client(200, [])

        await users_report(client, date_gte="2024-03-01", date_lte="2024-03-31")
        await clients_report(client, member_id=42)

        assert str(sent_requests[0].url) == (
            f"{BASE_URL}/dashboards/users?date_gte=2024-03-01&date_lte=2024-03-31"
        )
        assert str(sent_requests[1].url) == f"{BASE_URL}/dashboards/clients?memberId=42"

    @pytest.mark.asyncio
    async def test_time_report(
        self, make_client: ClientFactory, sent_requests: list[httpx.Request]
    ) -> None:
        """Test the team time export."""
        client = make_client(200, [])

        await time_report(client, date_from="2024-03-01", fields="date,user")

        assert str(sent_requests[0].url) == (
            f"{BASE_URL}/team/time/export?from=2024-03-01&fields=date%2Cuser"
        )

    @pytest.mark.asyncio
    async def test_errors_propagate(self, make_client: ClientFactory) -> None:
        """Test that wrappers surface RequestFailedError unchanged."""
        client = make_client(403, content=b"forbidden")

        with pytest.raises(RequestFailedError) as exc_info:
            await users_report(client)

        assert exc_info.value.status == 403
        assert exc_info.value.text == "forbidden"
