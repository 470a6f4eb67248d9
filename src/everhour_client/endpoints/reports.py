"""Report endpoints.

The dashboard reports aggregate time, costs and billing by client, project or
team member over a date range. Money amounts are in cents and time in seconds.
"""

from typing import Literal, Optional

from everhour_client.core.client import EverhourApiClient, QueryParams
from everhour_client.models.resources import (
    ClientsDashboardItem,
    EstimateExportObject,
    ProjectsDashboardItem,
    TimeExportObject,
    UsersDashboardItem,
)


def _dashboard_filters(
    date_gte: Optional[str],
    date_lte: Optional[str],
    project_id: Optional[str],
    client_id: Optional[int],
    member_id: Optional[int],
) -> QueryParams:
    return {
        "date_gte": date_gte,
        "date_lte": date_lte,
        "projectId": project_id,
        "clientId": client_id,
        "memberId": member_id,
    }


async def clients_report(
    client: EverhourApiClient,
    date_gte: Optional[str] = None,
    date_lte: Optional[str] = None,
    project_id: Optional[str] = None,
    client_id: Optional[int] = None,
    member_id: Optional[int] = None,
) -> list[ClientsDashboardItem]:
    """Summarize time and billing per client.

    Args:
        client: API client
        date_gte: First day to include
        date_lte: Last day to include
        project_id: Only include this project
        client_id: Only include this client
        member_id: Only include this team member

    Returns:
        One row per client
    """
    url = client.create_url(
        "/dashboards/clients",
        {},
        _dashboard_filters(date_gte, date_lte, project_id, client_id, member_id),
    )
    return await client.api_request("GET", url)


async def projects_report(
    client: EverhourApiClient,
    date_gte: Optional[str] = None,
    date_lte: Optional[str] = None,
    project_id: Optional[str] = None,
    client_id: Optional[int] = None,
    member_id: Optional[int] = None,
) -> list[ProjectsDashboardItem]:
    """Summarize time and billing per project. Filters as in ``clients_report``."""
    url = client.create_url(
        "/dashboards/projects",
        {},
        _dashboard_filters(date_gte, date_lte, project_id, client_id, member_id),
    )
    return await client.api_request("GET", url)


async def users_report(
    client: EverhourApiClient,
    date_gte: Optional[str] = None,
    date_lte: Optional[str] = None,
    project_id: Optional[str] = None,
    client_id: Optional[int] = None,
    member_id: Optional[int] = None,
) -> list[UsersDashboardItem]:
    """Summarize time and billing per team member. Filters as in ``clients_report``."""
    url = client.create_url(
        "/dashboards/users",
        {},
        _dashboard_filters(date_gte, date_lte, project_id, client_id, member_id),
    )
    return await client.api_request("GET", url)


async def estimates_report(
    client: EverhourApiClient,
    due_from: Optional[str] = None,
    due_to: Optional[str] = None,
    status: Optional[Literal["open", "completed"]] = None,
) -> list[EstimateExportObject]:
    """Export task estimates (deprecated by the service in favour of dashboards)."""
    url = client.create_url(
        "/team/estimate/export", {}, {"dueFrom": due_from, "dueTo": due_to, "status": status}
    )
    return await client.api_request("GET", url)


async def time_report(
    client: EverhourApiClient,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    fields: Optional[str] = None,
) -> list[TimeExportObject]:
    """Export team time (deprecated by the service in favour of dashboards).

    ``fields`` is a comma-separated list of the groupings to include, e.g.
    ``"date,user,project,task"``.
    """
    url = client.create_url(
        "/team/time/export", {}, {"from": date_from, "to": date_to, "fields": fields}
    )
    return await client.api_request("GET", url)
