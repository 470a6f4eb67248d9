"""Timer endpoints."""

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import TimerRequest
from everhour_client.models.resources import Timer


async def get_running_timer(client: EverhourApiClient) -> Timer:
    """Get the current user's timer. Its status is "stopped" when none is running."""
    url = client.create_url("/timers/current")
    return await client.api_request("GET", url)


async def get_all_team_timers(client: EverhourApiClient) -> list[Timer]:
    url = client.create_url("/team/timers")
    return await client.api_request("GET", url)


async def start_timer(client: EverhourApiClient, payload: TimerRequest) -> Timer:
    """Start a timer on a task, stopping any timer already running."""
    url = client.create_url("/timers")
    return await client.api_request("POST", url, payload)


async def stop_timer(client: EverhourApiClient) -> Timer:
    url = client.create_url("/timers/current")
    return await client.api_request("DELETE", url)
