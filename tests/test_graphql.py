"""
Tests for the GraphQL and REST transport.
"""

import asyncio

import httpx
import pytest

from graphql import GraphQLSyntaxError, parse
from pydantic import BaseModel

from fly.api.apps.client import AppsClient
from fly.api.builds.client import BuildsClient
from fly.api.config.client import ConfigClient
from fly.api.dns.client import DNSClient
from fly.api.errors import (
    DecodeError,
    FlyAPIError,
    FlyTransportError,
    GraphQLResponseError,
    MissingAccessTokenError,
    NotFoundError,
    UnauthorizedError,
    UnknownServerError,
)
from fly.api.graphql.client import GraphQLClient, compact_query, operation_info
from fly.api.platform.client import PlatformClient
from fly.api.secrets.client import SecretsClient
from fly.api.settings import Settings
from fly.api.ssh.client import SSHClient
from fly.api.wireguard.client import WireGuardClient

from .testing.http import ACCESS_TOKEN, API_URL, GRAPHQL_URL, ExpectRequest, expect_graphql


OPERATION_CLASSES = [
    AppsClient,
    BuildsClient,
    ConfigClient,
    DNSClient,
    PlatformClient,
    SecretsClient,
    SSHClient,
    WireGuardClient,
]


def all_documents():
    return [
        pytest.param(value, id=f"{cls.__name__}.{name}")
        for cls in OPERATION_CLASSES
        for name, value in vars(cls).items()
        if name.startswith("Q_")
    ]


class Answer(BaseModel):
    answer: int


@pytest.fixture
async def graphql_client(default_settings):
    async with GraphQLClient(ACCESS_TOKEN, default_settings) as client:
        yield client


class TestCompactQuery:
    def test_collapses_whitespace(self):
        query = """
            query ($name: String!) {
                app(name: $name) {
                    id
                }
            }
        """
        assert compact_query(query) == "query ($name: String!) { app(name: $name) { id } }"

    def test_single_line_unchanged(self):
        assert compact_query("query { a }") == "query { a }"


class TestOperationInfo:
    def test_named_mutation(self):
        assert operation_info("mutation CreateThing { a }") == ("mutation", "CreateThing")

    def test_anonymous_query(self):
        assert operation_info("query ($a: ID!) { b(id: $a) }") == ("query", None)

    def test_shorthand_query(self):
        assert operation_info("{ a }") == ("query", None)

    def test_no_operation(self):
        with pytest.raises(ValueError, match="contains no operation"):
            operation_info("fragment F on App { id }")

    def test_syntax_error(self):
        with pytest.raises(GraphQLSyntaxError):
            operation_info("query {")


class TestOperationDocuments:
    @pytest.mark.parametrize("document", all_documents())
    def test_document_parses(self, document):
        """Every operation document is valid GraphQL with a single operation."""
        parse(document)
        operation, _ = operation_info(document)
        assert operation in ("query", "mutation")

    @pytest.mark.parametrize("document", all_documents())
    def test_compaction_is_stable(self, document):
        compacted = compact_query(document)
        assert compact_query(compacted) == compacted
        assert "\n" not in compacted


class TestGraphQLClient:
    def test_missing_access_token(self, default_settings):
        with pytest.raises(MissingAccessTokenError, match="Please login"):
            GraphQLClient("", default_settings)

    async def test_endpoint_from_settings(self):
        async with GraphQLClient(ACCESS_TOKEN, Settings(base_url="https://fly.test/")) as client:
            assert client.endpoint == "https://fly.test/api/v2/graphql"

    async def test_query_success(self, graphql_client, mock_http):
        """A successful response is returned as data, with the document compacted."""
        with mock_http.expect(
            expect_graphql("query ($id: ID!) {\n  a(id: $id)\n}", {"id": "x"}, data={"a": 1})
        ):
            result = await graphql_client.query(
                """
                query ($id: ID!) {
                  a(id: $id)
                }
                """,
                {"id": "x"},
            )

        assert result.data == {"a": 1}
        assert result.errors is None
        assert result.query == "query ($id: ID!) { a(id: $id) }"

    async def test_query_errors_with_error_status(self, graphql_client, mock_http):
        """GraphQL errors are parsed even when the HTTP status is an error."""
        with mock_http.expect(
            expect_graphql(
                "query { a }",
                data=None,
                errors=[{"message": "boom", "path": ["a"]}],
                status_code=400,
            )
        ):
            result = await graphql_client.query("query { a }", {})

        assert result.data is None
        assert [error.message for error in result.errors] == ["boom"]
        assert result.errors[0].path == ["a"]

    async def test_execute_decodes_result(self, graphql_client, mock_http):
        with mock_http.expect(expect_graphql("query { answer }", data={"answer": 42})):
            result = await graphql_client.execute("query { answer }", {}, Answer)

        assert result == Answer(answer=42)

    async def test_execute_aggregates_errors(self, graphql_client, mock_http):
        """All reported error messages end up in the raised error, in order."""
        errors = [{"message": "first problem"}, {"message": "second problem"}]
        with mock_http.expect(
            expect_graphql("query { answer }", data={"answer": None}, errors=errors)
        ):
            with pytest.raises(GraphQLResponseError) as exc_info:
                await graphql_client.execute("query { answer }", {}, Answer)

        assert str(exc_info.value) == "first problem; second problem"
        assert [error.message for error in exc_info.value.errors] == [
            "first problem",
            "second problem",
        ]

    async def test_execute_unexpected_data_shape(self, graphql_client, mock_http):
        with mock_http.expect(expect_graphql("query { answer }", data={"answer": "lots"})):
            with pytest.raises(DecodeError, match="Unexpected Answer data"):
                await graphql_client.execute("query { answer }", {}, Answer)

    @pytest.mark.parametrize(
        "response,status_code",
        [
            ("<html>Bad Gateway</html>", 502),
            ("not json at all", 200),
            ({}, 200),
            ({"errors": "nope"}, 200),
            ([1, 2, 3], 200),
        ],
    )
    async def test_unexpected_response(self, graphql_client, mock_http, response, status_code):
        """Bodies that aren't GraphQL responses raise a decode error with the body text."""
        with mock_http.expect(
            expect_graphql("query { a }", response=response, status_code=status_code)
        ):
            with pytest.raises(DecodeError, match="Unexpected response: "):
                await graphql_client.query("query { a }", {})

    async def test_transport_error(self, graphql_client, mock_http):
        with mock_http.expect(
            expect_graphql("query { a }", raises=httpx.ConnectError("connection refused"))
        ):
            with pytest.raises(FlyTransportError, match="connection refused") as exc_info:
                await graphql_client.query("query { a }", {})

        assert isinstance(exc_info.value, FlyAPIError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_cancellation_propagates(self, graphql_client, monkeypatch):
        """Cancelling a pending query cancels the request rather than raising a client error."""
        started = asyncio.Event()

        async def hang(self, method, url, **kwargs):
            started.set()
            await asyncio.Event().wait()

        monkeypatch.setattr("httpx.AsyncClient.request", hang)

        task = asyncio.create_task(graphql_client.query("query { a }", {}))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task


class TestRESTRequest:
    URL = f"{API_URL}/api/v1/things/1"

    async def test_success(self, graphql_client, mock_http):
        with mock_http.expect(ExpectRequest(self.URL, response={"id": 1})):
            response = await graphql_client.request("GET", "/things/1")

        assert response.json() == {"id": 1}

    @pytest.mark.parametrize(
        "status_code,response,error,message",
        [
            (404, {"errors": [{"detail": "Thing not found"}]}, NotFoundError, "Thing not found"),
            (404, "", NotFoundError, "Not found"),
            (401, "", UnauthorizedError, "Unauthorized"),
            (403, {"errors": [{"detail": "Forbidden"}]}, UnauthorizedError, "Forbidden"),
            (503, "", UnknownServerError, "An unknown server error occurred"),
            (422, {"errors": [{"detail": "Bad thing"}]}, UnknownServerError, "Bad thing"),
            (409, "", UnknownServerError, "Unexpected response status 409"),
        ],
    )
    async def test_error_status(
        self, graphql_client, mock_http, status_code, response, error, message
    ):
        with mock_http.expect(
            ExpectRequest(self.URL, status_code=status_code, response=response)
        ):
            with pytest.raises(error, match=message):
                await graphql_client.request("GET", "things/1")

    async def test_transport_error(self, graphql_client, mock_http):
        with mock_http.expect(ExpectRequest(self.URL, raises=httpx.ReadTimeout("timed out"))):
            with pytest.raises(FlyTransportError, match="timed out"):
                await graphql_client.request("GET", "things/1")


def test_graphql_url_matches_settings(default_settings):
    assert default_settings.api_url("v2/graphql") == GRAPHQL_URL
