"""Exception classes for the Everhour API client.

All errors raised on purpose by the library inherit from EverhourError, so a
single except clause is enough to handle anything the client reports.
"""

from typing import Optional


class EverhourError(Exception):
    """Base exception for all Everhour client errors."""

    pass


class RequiredError(EverhourError):
    """Raised when a path template placeholder has no usable value.

    The check runs while the URL is being built, so a call that raises this
    error never reaches the network.

    Attributes:
        field: Name of the placeholder that was missing or had the wrong type.

    Example:
        try:
            client.create_url("/tasks/{taskId}")
        except RequiredError as e:
            print(f"Missing parameter: {e.field}")
    """

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Required parameter {field} was not provided.")
        self.field = field


class RequestFailedError(EverhourError):
    """Raised when the service answers with a status outside [200, 300).

    Attributes:
        status: HTTP status code of the response.
        text: Raw response body, unparsed.

    Example:
        try:
            await delete_task(client, "ev:123")
        except RequestFailedError as e:
            if e.status == 404:
                ...
    """

    def __init__(self, status: int, text: str):
        super().__init__(f"Status: {status}, Text: '{text}'")
        self.status = status
        self.text = text
