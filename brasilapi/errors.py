"""Error types and the shared HTTP plumbing used by every endpoint module."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

BRASIL_API_URL = "https://brasilapi.com.br"


@dataclass(frozen=True)
class BrasilAPIError:
    """Structured error body returned by the API."""

    message: str
    kind: str
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BrasilAPIError:
        """Build from a decoded JSON object; raise ValueError if it does not fit."""
        if not isinstance(data, Mapping):
            raise ValueError("API error body must be a JSON object")
        message = data.get("message")
        kind = data.get("type")
        name = data.get("name")
        if not isinstance(message, str):
            raise ValueError("API error body lacks a string 'message'")
        if not isinstance(kind, str):
            raise ValueError("API error body lacks a string 'type'")
        if name is not None and not isinstance(name, str):
            raise ValueError("API error 'name' must be a string")
        return cls(message=message, kind=kind, name=name)


class Errored(enum.Enum):
    """Broad category of a failed request."""

    NOT_FOUND = "NotFound"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    BAD_REQUEST = "BadRequest"
    UNEXPECTED = "Unexpected"

    @classmethod
    def from_status(cls, status: int | None) -> Errored:
        """Map an HTTP status code (or None) to a category."""
        return _STATUS_CATEGORIES.get(status, cls.UNEXPECTED)


_STATUS_CATEGORIES = {
    404: Errored.NOT_FOUND,
    500: Errored.INTERNAL_SERVER_ERROR,
    400: Errored.BAD_REQUEST,
}


class APIError(Exception):
    """Raised when a request fails or the API answers with a non-200 status."""

    def __init__(
        self,
        message: str,
        error: Errored,
        code: int | None = None,
        api_error: BrasilAPIError | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error = error
        self.code = code
        self.api_error = api_error

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, error={self.error!r}, "
            f"code={self.code!r}, api_error={self.api_error!r})"
        )


def _parse_api_error(text: str) -> BrasilAPIError | None:
    try:
        return BrasilAPIError.from_dict(json.loads(text))
    except (ValueError, TypeError):
        return None


def check_response(response: httpx.Response) -> httpx.Response:
    """Return the response if its status is 200, otherwise raise APIError."""
    status = response.status_code
    if status == 200:
        return response
    body = response.text
    raise APIError(
        message=body,
        error=Errored.from_status(status),
        code=status,
        api_error=_parse_api_error(body),
    )


def from_transport_error(exc: httpx.HTTPError) -> APIError:
    """Convert an httpx failure into an APIError."""
    status: int | None = None
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
    message = str(exc)
    return APIError(
        message=message,
        error=Errored.from_status(status),
        code=status,
        api_error=_parse_api_error(message),
    )


async def fetch(url: str) -> httpx.Response:
    """GET the URL and return the response, raising APIError on any failure."""
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url)
        except httpx.HTTPError as exc:
            raise from_transport_error(exc) from exc
    return check_response(response)