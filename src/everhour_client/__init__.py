"""Everhour API client.

Async client for the Everhour time-tracking REST API.

Usage:
    from everhour_client import EverhourApiClient
    from everhour_client.endpoints import get_all_users

    async with EverhourApiClient(api_key) as client:
        users = await get_all_users(client)
"""

__version__ = "0.1.0"

__all__ = [
    "EverhourApiClient",
    "HttpMethod",
    "EverhourError",
    "RequestFailedError",
    "RequiredError",
    "__version__",
]

from everhour_client.core.client import EverhourApiClient, HttpMethod  # noqa: E402
from everhour_client.core.exceptions import (  # noqa: E402
    EverhourError,
    RequestFailedError,
    RequiredError,
)
