"""User endpoints."""

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.resources import User


async def get_current_user(client: EverhourApiClient) -> User:
    """Get the user the API key belongs to."""
    url = client.create_url("/users/me")
    return await client.api_request("GET", url)


async def get_all_users(client: EverhourApiClient) -> list[User]:
    """Get all members of the team."""
    url = client.create_url("/team/users")
    return await client.api_request("GET", url)
