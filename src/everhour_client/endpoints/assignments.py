"""Resource planner endpoints."""

from typing import Any, Optional

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import AssignmentRequest
from everhour_client.models.resources import Assignment, AssignmentType


async def get_all_assignments(
    client: EverhourApiClient,
    type: Optional[AssignmentType] = None,
    project: Optional[str] = None,
    task: Optional[str] = None,
    client_id: Optional[int] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> list[Assignment]:
    """List resource planner assignments.

    Args:
        client: API client
        type: "project" or "time-off"
        project: Only assignments of this project
        task: Only assignments of this task
        client_id: Only assignments of this client's projects
        date_from: First day to include
        date_to: Last day to include

    Returns:
        List of assignments
    """
    url = client.create_url(
        "/resource-planner/assignments",
        {},
        {
            "type": type,
            "project": project,
            "task": task,
            "client": client_id,
            "from": date_from,
            "to": date_to,
        },
    )
    return await client.api_request("GET", url)


async def create_assignment(client: EverhourApiClient, payload: AssignmentRequest) -> Assignment:
    url = client.create_url("/resource-planner/assignments")
    return await client.api_request("POST", url, payload)


async def update_assignment(
    client: EverhourApiClient, assignment_id: int, payload: AssignmentRequest
) -> Assignment:
    url = client.create_url(
        "/resource-planner/assignments/{assignmentId}", {"assignmentId": assignment_id}
    )
    return await client.api_request("PUT", url, payload)


async def delete_assignment(client: EverhourApiClient, assignment_id: int) -> Any:
    url = client.create_url(
        "/resource-planner/assignments/{assignmentId}", {"assignmentId": assignment_id}
    )
    return await client.api_request("DELETE", url)
