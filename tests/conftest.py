"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Optional

import httpx
import pytest  # type: ignore[import-not-found]

from everhour_client.core.client import EverhourApiClient

TEST_API_KEY = "test-api-key"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(
    sent_requests: list[httpx.Request],
) -> Callable[..., EverhourApiClient]:
    """Build clients whose transport records requests and returns a canned response.

    With neither ``json_body`` nor ``content`` the response has an empty body.
    """

    def factory(
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
    ) -> EverhourApiClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return EverhourApiClient(TEST_API_KEY, http_client)

    return factory
