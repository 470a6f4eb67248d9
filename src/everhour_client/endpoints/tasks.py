"""Task endpoints.

Task ids carry their integration prefix, e.g. ``ev:123456789`` for native
Everhour tasks.
"""

from typing import Any, Optional

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import TaskEstimateRequest, TaskRequest
from everhour_client.models.resources import Task


async def get_project_tasks(
    client: EverhourApiClient,
    project_id: str,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    exclude_closed: Optional[bool] = None,
    query: Optional[str] = None,
) -> list[Task]:
    """List tasks of a project.

    Args:
        client: API client
        project_id: Project identifier
        page: Page number, starting at 1
        limit: Tasks per page
        exclude_closed: Leave out closed tasks
        query: Search tasks by name

    Returns:
        List of tasks
    """
    url = client.create_url(
        "/projects/{projectId}/tasks",
        {"projectId": project_id},
        {"page": page, "limit": limit, "excludeClosed": exclude_closed, "query": query},
    )
    return await client.api_request("GET", url)


async def search_project_tasks(
    client: EverhourApiClient,
    project_id: str,
    query: Optional[str] = None,
    limit: Optional[int] = None,
    search_in_closed: Optional[bool] = None,
) -> list[Task]:
    url = client.create_url(
        "/projects/{projectId}/tasks/search",
        {"projectId": project_id},
        {"query": query, "limit": limit, "searchInClosed": search_in_closed},
    )
    return await client.api_request("GET", url)


async def search_tasks(
    client: EverhourApiClient,
    query: Optional[str] = None,
    limit: Optional[int] = None,
    search_in_closed: Optional[bool] = None,
) -> list[Task]:
    """Search tasks across all projects."""
    url = client.create_url(
        "/tasks/search",
        {},
        {"query": query, "limit": limit, "searchInClosed": search_in_closed},
    )
    return await client.api_request("GET", url)


async def get_task(client: EverhourApiClient, task_id: str) -> Task:
    url = client.create_url("/tasks/{taskId}", {"taskId": task_id})
    return await client.api_request("GET", url)


async def create_task(client: EverhourApiClient, project_id: str, payload: TaskRequest) -> Task:
    url = client.create_url("/projects/{projectId}/tasks", {"projectId": project_id})
    return await client.api_request("POST", url, payload)


async def update_task(client: EverhourApiClient, task_id: str, payload: TaskRequest) -> Task:
    url = client.create_url("/tasks/{taskId}", {"taskId": task_id})
    return await client.api_request("PUT", url, payload)


async def delete_task(client: EverhourApiClient, task_id: str) -> Any:
    url = client.create_url("/tasks/{taskId}", {"taskId": task_id})
    return await client.api_request("DELETE", url)


async def update_task_estimate(
    client: EverhourApiClient, task_id: str, payload: TaskEstimateRequest
) -> Task:
    url = client.create_url("/tasks/{taskId}/estimate", {"taskId": task_id})
    return await client.api_request("PUT", url, payload)


async def delete_task_estimate(client: EverhourApiClient, task_id: str) -> Any:
    url = client.create_url("/tasks/{taskId}/estimate", {"taskId": task_id})
    return await client.api_request("DELETE", url)
