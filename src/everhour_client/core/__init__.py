"""Core functionality: the API client, its errors, and configuration."""

from everhour_client.core.client import EverhourApiClient, HttpMethod
from everhour_client.core.config import ConfigManager
from everhour_client.core.exceptions import EverhourError, RequestFailedError, RequiredError

__all__ = [
    "EverhourApiClient",
    "HttpMethod",
    "ConfigManager",
    "EverhourError",
    "RequestFailedError",
    "RequiredError",
]
