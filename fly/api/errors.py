# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

"""
Exceptions raised by the platform API client.
"""

from typing import TYPE_CHECKING, Any

import httpx


if TYPE_CHECKING:
    from .graphql.models import GraphQLError


class FlyAPIError(Exception):
    """Base class for all client errors."""


class MissingAccessTokenError(FlyAPIError):
    """No access token is available to authenticate requests."""

    def __init__(self, message: str = "No api access token available. Please login"):
        super().__init__(message)


class FlyTransportError(FlyAPIError):
    """The HTTP request could not be completed."""


class DecodeError(FlyAPIError):
    """The response body could not be decoded into the expected shape."""


class GraphQLResponseError(FlyAPIError):
    """The GraphQL response reported one or more errors."""

    def __init__(self, errors: list["GraphQLError"]):
        self.errors = errors
        super().__init__("; ".join(error.message for error in errors))


class NotFoundError(FlyAPIError):
    """The requested resource does not exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class UnauthorizedError(FlyAPIError):
    """The credentials were rejected."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class UnknownServerError(FlyAPIError):
    """The server failed in an unexpected way."""

    def __init__(self, message: str = "An unknown server error occurred, please try again"):
        super().__init__(message)


def error_from_response(response: httpx.Response) -> FlyAPIError:
    """
    Map a non-successful REST response to a client error.

    Args:
        response: The HTTP response with an error status

    Returns:
        The error to raise; its message comes from the body when one is provided
    """
    detail = _error_detail(response)
    status = response.status_code
    if status == 404:
        return NotFoundError(detail or "Not found")
    if status in (401, 403):
        return UnauthorizedError(detail or "Unauthorized")
    if status >= 500:
        return UnknownServerError()
    return UnknownServerError(detail or f"Unexpected response status {status}")


def _error_detail(response: httpx.Response) -> str | None:
    # REST endpoints use {"errors": [{"detail": ...}]} when they explain themselves.
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        detail = errors[0].get("detail")
        if isinstance(detail, str) and detail:
            return detail
    return None
