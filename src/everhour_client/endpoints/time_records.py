"""Time record endpoints.

Dates are ``YYYY-MM-DD`` strings; time is always in seconds. Time is recorded
per task, user and day, so adding time to a day that already has a record
adds to it.
"""

from typing import Optional

from everhour_client.core.client import EverhourApiClient, QueryParams
from everhour_client.models.requests import RemoveTimeRecordRequest, TimeRecordRequest
from everhour_client.models.resources import TimeRecord, UserTimeRecord


def _range(
    date_from: Optional[str], date_to: Optional[str], limit: Optional[int], page: Optional[int]
) -> QueryParams:
    return {"from": date_from, "to": date_to, "limit": limit, "page": page}


async def get_all_time_records(
    client: EverhourApiClient,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
) -> list[TimeRecord]:
    """List time records of the whole team.

    Args:
        client: API client
        date_from: First day to include
        date_to: Last day to include
        limit: Records per page
        page: Page number, starting at 1

    Returns:
        List of time records
    """
    url = client.create_url("/team/time", {}, _range(date_from, date_to, limit, page))
    return await client.api_request("GET", url)


async def get_project_time_records(
    client: EverhourApiClient,
    project_id: str,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
) -> list[TimeRecord]:
    url = client.create_url(
        "/projects/{projectId}/time",
        {"projectId": project_id},
        _range(date_from, date_to, limit, page),
    )
    return await client.api_request("GET", url)


async def get_task_time_records(
    client: EverhourApiClient,
    task_id: str,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
) -> list[TimeRecord]:
    url = client.create_url(
        "/tasks/{taskId}/time", {"taskId": task_id}, _range(date_from, date_to, limit, page)
    )
    return await client.api_request("GET", url)


async def get_user_time_records(
    client: EverhourApiClient,
    user_id: int,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
) -> list[UserTimeRecord]:
    """List time records of one user, without edit history."""
    url = client.create_url(
        "/users/{userId}/time", {"userId": user_id}, _range(date_from, date_to, limit, page)
    )
    return await client.api_request("GET", url)


async def add_time(
    client: EverhourApiClient, task_id: str, payload: TimeRecordRequest
) -> TimeRecord:
    """Add time to a task."""
    url = client.create_url("/tasks/{taskId}/time", {"taskId": task_id})
    return await client.api_request("POST", url, payload)


async def update_time_record(
    client: EverhourApiClient, task_id: str, payload: TimeRecordRequest
) -> TimeRecord:
    """Replace the time recorded on a task for the payload's user and date."""
    url = client.create_url("/tasks/{taskId}/time", {"taskId": task_id})
    return await client.api_request("PUT", url, payload)


async def delete_time_record(
    client: EverhourApiClient, task_id: str, payload: RemoveTimeRecordRequest
) -> TimeRecord:
    url = client.create_url("/tasks/{taskId}/time", {"taskId": task_id})
    return await client.api_request("DELETE", url, payload)
