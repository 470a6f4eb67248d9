"""Client endpoints, including client budgets."""

from typing import Any, Optional

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import BudgetRequest, ClientRequest
from everhour_client.models.resources import Client


async def get_all_clients(client: EverhourApiClient, query: Optional[str] = None) -> list[Client]:
    """List clients, optionally filtered by name."""
    url = client.create_url("/clients", {}, {"query": query})
    return await client.api_request("GET", url)


async def get_client(client: EverhourApiClient, client_id: int) -> Client:
    url = client.create_url("/clients/{clientId}", {"clientId": client_id})
    return await client.api_request("GET", url)


async def create_client(client: EverhourApiClient, payload: ClientRequest) -> Client:
    url = client.create_url("/clients")
    return await client.api_request("POST", url, payload)


async def update_client(
    client: EverhourApiClient, client_id: int, payload: ClientRequest
) -> Client:
    url = client.create_url("/clients/{clientId}", {"clientId": client_id})
    return await client.api_request("PUT", url, payload)


async def update_budget(
    client: EverhourApiClient, client_id: int, payload: BudgetRequest
) -> Client:
    url = client.create_url("/clients/{clientId}/budget", {"clientId": client_id})
    return await client.api_request("PUT", url, payload)


async def delete_budget(client: EverhourApiClient, client_id: int) -> Any:
    url = client.create_url("/clients/{clientId}/budget", {"clientId": client_id})
    return await client.api_request("DELETE", url)
