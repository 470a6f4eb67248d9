"""Timecard endpoints (clock in / clock out)."""

from typing import Any, Optional

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import TimecardActionRequest, TimecardRequest
from everhour_client.models.resources import Timecard


async def get_all_timecards(
    client: EverhourApiClient,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> list[Timecard]:
    url = client.create_url("/timecards", {}, {"from": date_from, "to": date_to})
    return await client.api_request("GET", url)


async def get_user_timecards(
    client: EverhourApiClient,
    user_id: int,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> list[Timecard]:
    url = client.create_url(
        "/users/{userId}/timecards", {"userId": user_id}, {"from": date_from, "to": date_to}
    )
    return await client.api_request("GET", url)


async def get_timecard(client: EverhourApiClient, user_id: int, date: str) -> Timecard:
    url = client.create_url("/users/{userId}/timecards/{date}", {"userId": user_id, "date": date})
    return await client.api_request("GET", url)


async def update_timecard(
    client: EverhourApiClient, user_id: int, date: str, payload: TimecardRequest
) -> Timecard:
    url = client.create_url("/users/{userId}/timecards/{date}", {"userId": user_id, "date": date})
    return await client.api_request("PUT", url, payload)


async def delete_timecard(client: EverhourApiClient, user_id: int, date: str) -> Any:
    url = client.create_url("/users/{userId}/timecards/{date}", {"userId": user_id, "date": date})
    return await client.api_request("DELETE", url)


async def clock_in(
    client: EverhourApiClient,
    user_id: int,
    payload: Optional[TimecardActionRequest] = None,
) -> Timecard:
    url = client.create_url("/users/{userId}/timecards/clock-in", {"userId": user_id})
    return await client.api_request("POST", url, payload or TimecardActionRequest())


async def clock_out(
    client: EverhourApiClient,
    user_id: int,
    payload: Optional[TimecardActionRequest] = None,
) -> Timecard:
    url = client.create_url("/users/{userId}/timecards/clock-out", {"userId": user_id})
    return await client.api_request("POST", url, payload or TimecardActionRequest())
