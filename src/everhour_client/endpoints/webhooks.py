"""Webhook endpoints."""

from typing import Any

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import WebhookRequest
from everhour_client.models.resources import Webhook


async def get_webhook(client: EverhourApiClient, hook_id: int) -> Webhook:
    url = client.create_url("/hooks/{hookId}", {"hookId": hook_id})
    return await client.api_request("GET", url)


async def create_webhook(client: EverhourApiClient, payload: WebhookRequest) -> Webhook:
    """Register a webhook.

    The service verifies the target URL before the hook becomes active, so
    the endpoint must be reachable when this is called.
    """
    url = client.create_url("/hooks")
    return await client.api_request("POST", url, payload)


async def update_webhook(
    client: EverhourApiClient, hook_id: int, payload: WebhookRequest
) -> Webhook:
    url = client.create_url("/hooks/{hookId}", {"hookId": hook_id})
    return await client.api_request("PUT", url, payload)


async def delete_webhook(client: EverhourApiClient, hook_id: int) -> Any:
    url = client.create_url("/hooks/{hookId}", {"hookId": hook_id})
    return await client.api_request("DELETE", url)
