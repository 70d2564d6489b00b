"""
Transport client for the platform GraphQL and REST APIs.
"""

import logging
import re

from typing import Any, Self, TypeVar, cast

import httpx

from graphql import GraphQLSyntaxError, OperationDefinitionNode, parse
from pydantic import BaseModel, ValidationError

from ..errors import (
    DecodeError,
    FlyTransportError,
    GraphQLResponseError,
    MissingAccessTokenError,
    error_from_response,
)
from ..settings import Settings
from .models import GraphQLError, GraphQLQueryResult


logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

_COMPACT_PATTERN = re.compile(r"\s+")


def compact_query(query: str) -> str:
    """Trim a GraphQL document and collapse whitespace runs to single spaces."""
    return _COMPACT_PATTERN.sub(" ", query.strip())


def operation_info(query: str) -> tuple[str, str | None]:
    """
    Return the operation type and name of the first operation in a document.

    Args:
        query: The GraphQL document

    Returns:
        Tuple of operation type ("query", "mutation", ...) and optional name
    """
    document = parse(query)
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            name = definition.name.value if definition.name else None
            return definition.operation.value, name
    raise ValueError("GraphQL document contains no operation")


class GraphQLClient:
    """Client for the platform GraphQL API, with access to authenticated REST endpoints."""

    def __init__(self, access_token: str, settings: Settings | None = None):
        """
        Initialize the transport with an access token.

        Args:
            access_token: Bearer token for the platform API
            settings: Client settings; loaded from the environment when omitted
        """
        if not access_token:
            raise MissingAccessTokenError()

        self.settings = settings if settings is not None else Settings()
        self.endpoint = self.settings.api_url("v2/graphql")
        self.session = httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {access_token}",
            },
            timeout=self.settings.timeout,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.session.aclose()

    async def query(self, query: str, variables: dict[str, Any]) -> GraphQLQueryResult:
        """
        Execute a GraphQL document against the platform API.

        Args:
            query: The GraphQL document; compacted before sending
            variables: Variables for the document

        Returns:
            Structured GraphQL query result
        """
        query = compact_query(query)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Executing GraphQL %s %s", *_describe(query))

        request_data = {"query": query, "variables": variables}
        try:
            response = await self.session.post(self.endpoint, json=request_data)
        except httpx.TransportError as err:
            raise FlyTransportError(f"Request to {self.endpoint} failed: {err}") from err

        # Try to parse as a valid GraphQL response, because the backend
        # sometimes sets 4xx/5xx error codes on valid graphql responses.
        try:
            raw_result = cast(dict[str, Any], response.json())
            errors = None
            if raw_errors := raw_result.get("errors"):
                errors = [GraphQLError(**error) for error in raw_errors]

            return GraphQLQueryResult(
                query=query,
                variables=variables,
                data=raw_result.get("data"),
                errors=errors,
            )
        except (ValueError, TypeError, AttributeError) as err:
            # JSON parsing and validation failures -> unexpected response
            raise DecodeError(f"Unexpected response: {response.text}") from err

    async def execute(
        self, query: str, variables: dict[str, Any], result_type: type[ResultT]
    ) -> ResultT:
        """
        Execute a GraphQL document and decode its data into an operation result type.

        Args:
            query: The GraphQL document
            variables: Variables for the document
            result_type: Model describing the response shape of this document

        Returns:
            The decoded result
        """
        result = await self.query(query, variables)
        if result.errors:
            raise GraphQLResponseError(result.errors)

        try:
            return result_type.model_validate(result.data)
        except ValidationError as err:
            raise DecodeError(f"Unexpected {result_type.__name__} data: {result.data}") from err

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Make an authenticated request to a REST endpoint under /api/v1.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Endpoint path relative to /api/v1
            **kwargs: Additional arguments for httpx

        Returns:
            The successful response
        """
        url = self.settings.api_url(f"v1/{path.lstrip('/')}")
        try:
            response = await self.session.request(method, url, **kwargs)
        except httpx.TransportError as err:
            raise FlyTransportError(f"Request to {url} failed: {err}") from err

        if not 200 <= response.status_code < 300:
            raise error_from_response(response)
        return response


def decode_response(response: httpx.Response, result_type: type[ResultT]) -> ResultT:
    """Decode a REST response body into a result type."""
    try:
        return result_type.model_validate(response.json())
    except ValueError as err:
        raise DecodeError(f"Unexpected response: {response.text}") from err


def _describe(query: str) -> tuple[str, str]:
    try:
        operation, name = operation_info(query)
    except (GraphQLSyntaxError, ValueError):
        return "document", "(unparsed)"
    return operation, name or "(anonymous)"
