"""Everhour API client: URL building and request dispatch.

Every endpoint wrapper in ``everhour_client.endpoints`` is a composition of
the two operations defined here:

- ``create_url`` substitutes path parameters into a template, validates that
  every placeholder is supplied, and appends the query string.
- ``api_request`` sends the call with the fixed headers and maps the response
  to decoded JSON or a ``RequestFailedError``.

Example:
    async with EverhourApiClient(api_key) as client:
        url = client.create_url("/users/{userId}/time", {"userId": 42}, {"limit": 10})
        records = await client.api_request("GET", url)
"""

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType, TracebackType
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote, urljoin

import httpx
from pydantic import BaseModel

from everhour_client.core.exceptions import RequestFailedError, RequiredError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.everhour.com"
API_VERSION = "1.2"

PathParams = Mapping[str, Union[str, int, float]]
QueryParams = Mapping[str, Union[str, int, float, bool, None]]


class HttpMethod(str, Enum):
    """HTTP methods supported by the Everhour API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ClientSettings:
    """Fixed client settings.

    Attributes:
        base_url: Root address every built URL resolves against
        version: Value of the X-Accept-Version header
        extract_params: Pattern matching placeholder names in path templates
    """

    base_url: str = BASE_URL
    version: str = API_VERSION
    extract_params: re.Pattern[str] = field(default=re.compile(r"\{([^}]+)\}"))


def _stringify(value: Union[str, int, float, bool]) -> str:
    """Render a parameter value the way the service expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _encode(value: Union[str, int, float, bool]) -> str:
    return quote(_stringify(value), safe="")


def _encode_segment(value: Union[str, int, float]) -> str:
    """Encode a path value so it always stays a single path segment."""
    encoded = _encode(value)
    # "." and ".." would otherwise be resolved away by urljoin
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


class EverhourApiClient:
    """Async client for the Everhour REST API.

    Args:
        api_key: Everhour API key, sent as X-Api-Key on every request
        http_client: Transport to send requests with. When omitted the client
            creates its own ``httpx.AsyncClient`` and closes it in ``aclose``.

    Raises:
        ValueError: If api_key is empty or not a string
    """

    def __init__(self, api_key: str, http_client: Optional[httpx.AsyncClient] = None) -> None:
        if not isinstance(api_key, str) or not api_key:
            raise ValueError("API key must be a non-empty string")

        self._settings = ClientSettings()
        self._headers: Mapping[str, str] = MappingProxyType(
            {
                "Content-Type": "application/json",
                "X-Api-Key": api_key,
                "X-Accept-Version": self._settings.version,
            }
        )
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else httpx.AsyncClient()

    @property
    def settings(self) -> ClientSettings:
        """Fixed client settings."""
        return self._settings

    @property
    def headers(self) -> Mapping[str, str]:
        """Read-only view of the headers sent with every request."""
        return self._headers

    async def aclose(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "EverhourApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    def create_url(
        self,
        path: str,
        path_params: Optional[PathParams] = None,
        query_params: Optional[QueryParams] = None,
    ) -> httpx.URL:
        """Create an API URL for the given path template and parameters.

        Args:
            path: Path template with placeholders, e.g. ``'/users/{userId}/timecards'``
            path_params: Values for the placeholders, e.g. ``{"userId": 4096}``
            query_params: Optional query parameters, e.g. ``{"from": "2020-12-31"}``.
                Entries whose value is None are left out.

        Returns:
            Absolute URL resolved against the Everhour base address

        Raises:
            RequiredError: If a placeholder has no str or number value
        """
        path_params = path_params or {}
        query_params = query_params or {}

        required = self._settings.extract_params.findall(path)
        for param in required:
            value = path_params.get(param)
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise RequiredError(
                    param,
                    f"Required parameter {param} was undefined or had the wrong type: "
                    f"{type(value).__name__}.",
                )

        path = self._settings.extract_params.sub(
            lambda match: _encode_segment(path_params[match.group(1)]), path
        )

        query = "&".join(
            f"{quote(key, safe='')}={_encode(value)}"
            for key, value in query_params.items()
            if value is not None
        )
        if query:
            path = f"{path}?{query}"

        return httpx.URL(urljoin(self._settings.base_url, path))

    async def api_request(
        self,
        method: Union[HttpMethod, str],
        url: httpx.URL,
        payload: Any = None,
    ) -> Any:
        """Make an API request and return its decoded JSON body.

        Args:
            method: GET, POST, PUT or DELETE
            url: URL built with ``create_url``
            payload: Optional request body; pydantic models are serialized by
                alias without None fields. Not accepted for GET.

        Returns:
            Decoded JSON body, or None if a successful response has no body

        Raises:
            ValueError: If the method is unsupported or a payload is given with GET
            RequestFailedError: If the response status is outside [200, 300)
        """
        try:
            method = HttpMethod(method)
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {method}") from None

        if method is HttpMethod.GET and payload is not None:
            raise ValueError("GET requests do not accept a payload")

        content: Optional[str] = None
        if payload is not None:
            if isinstance(payload, BaseModel):
                content = payload.model_dump_json(by_alias=True, exclude_none=True)
            else:
                content = json.dumps(payload)

        logger.debug("%s %s", method.value, url)
        response = await self._http_client.request(
            method.value, url, headers=self._headers, content=content
        )
        logger.debug("%s %s -> %s", method.value, url, response.status_code)

        if 200 <= response.status_code < 300:
            if not response.content:
                return None
            return response.json()

        raise RequestFailedError(response.status_code, response.text)
