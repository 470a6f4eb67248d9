"""Project endpoints."""

from typing import Any, Literal, Optional

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import ProjectBillingBudgetRequest, ProjectRequest
from everhour_client.models.resources import Project

# Integration a project was imported from, "ev" for native Everhour projects
Platform = Literal["as", "ev", "b3", "b2", "pv", "gh", "in", "tr", "jr"]


async def get_all_projects(
    client: EverhourApiClient,
    limit: Optional[int] = None,
    query: Optional[str] = None,
    platform: Optional[Platform] = None,
) -> list[Project]:
    """List projects.

    Args:
        client: API client
        limit: Maximum number of projects to return
        query: Search projects by name
        platform: Only return projects from this integration

    Returns:
        List of projects
    """
    url = client.create_url(
        "/projects", {}, {"limit": limit, "query": query, "platform": platform}
    )
    return await client.api_request("GET", url)


async def get_project(client: EverhourApiClient, project_id: str) -> Project:
    url = client.create_url("/projects/{projectId}", {"projectId": project_id})
    return await client.api_request("GET", url)


async def create_project(client: EverhourApiClient, payload: ProjectRequest) -> Project:
    url = client.create_url("/projects")
    return await client.api_request("POST", url, payload)


async def update_project(
    client: EverhourApiClient, project_id: str, payload: ProjectRequest
) -> Project:
    url = client.create_url("/projects/{projectId}", {"projectId": project_id})
    return await client.api_request("PUT", url, payload)


async def delete_project(client: EverhourApiClient, project_id: str) -> Any:
    url = client.create_url("/projects/{projectId}", {"projectId": project_id})
    return await client.api_request("DELETE", url)


async def update_project_billing_budget(
    client: EverhourApiClient,
    project_id: str,
    payload: ProjectBillingBudgetRequest,
    example: Optional[str] = None,
) -> Project:
    """Update billing type, budget and rates of a project in one call.

    Args:
        client: API client
        project_id: Project identifier
        payload: Billing, budget and rate settings
        example: Free-form label sent as the ``example`` query parameter,
            e.g. "Hourly project"

    Returns:
        The updated project
    """
    url = client.create_url(
        "/projects/{projectId}/billing", {"projectId": project_id}, {"example": example}
    )
    return await client.api_request("PUT", url, payload)
