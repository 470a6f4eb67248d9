"""Attachment endpoints."""

from typing import Any

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import AttachmentRequest
from everhour_client.models.resources import AttachmentDetails


async def create_attachment(
    client: EverhourApiClient, payload: AttachmentRequest
) -> AttachmentDetails:
    """Upload a file that can later be linked to an expense."""
    url = client.create_url("/attachments")
    return await client.api_request("POST", url, payload)


async def delete_attachment(client: EverhourApiClient, attachment_id: int) -> Any:
    url = client.create_url("/attachments/{attachmentId}", {"attachmentId": attachment_id})
    return await client.api_request("DELETE", url)


async def download_attachment(client: EverhourApiClient, attachment_token: str) -> Any:
    url = client.create_url(
        "/attachments/{attachmentToken}/download", {"attachmentToken": attachment_token}
    )
    return await client.api_request("GET", url)
