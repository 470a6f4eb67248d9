"""Section endpoints."""

from typing import Any

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import SectionRequest
from everhour_client.models.resources import Section


async def get_project_sections(client: EverhourApiClient, project_id: str) -> list[Section]:
    url = client.create_url("/projects/{projectId}/sections", {"projectId": project_id})
    return await client.api_request("GET", url)


async def get_section(client: EverhourApiClient, section_id: int) -> Section:
    url = client.create_url("/sections/{sectionId}", {"sectionId": section_id})
    return await client.api_request("GET", url)


async def create_section(
    client: EverhourApiClient, project_id: str, payload: SectionRequest
) -> Section:
    url = client.create_url("/projects/{projectId}/sections", {"projectId": project_id})
    return await client.api_request("POST", url, payload)


async def update_section(
    client: EverhourApiClient, section_id: int, payload: SectionRequest
) -> Section:
    url = client.create_url("/sections/{sectionId}", {"sectionId": section_id})
    return await client.api_request("PUT", url, payload)


async def delete_section(client: EverhourApiClient, section_id: int) -> Any:
    url = client.create_url("/sections/{sectionId}", {"sectionId": section_id})
    return await client.api_request("DELETE", url)
