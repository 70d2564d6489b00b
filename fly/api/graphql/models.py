# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from typing import Any, Self

from pydantic import BaseModel, Field, model_validator


class GraphQLError(BaseModel):
    """GraphQL error information from query execution."""

    message: str = Field(..., description="Error message describing what went wrong")
    locations: list[dict[str, int]] | None = Field(
        None, description="Source locations where the error occurred (line/column)"
    )
    path: list[str | int] | None = Field(
        None, description="Path to the field in the query that caused the error"
    )
    extensions: dict[str, Any] | None = Field(
        None, description="Additional error metadata, such as an error code"
    )


class GraphQLQueryResult(BaseModel):
    """Result of executing a GraphQL document against the platform."""

    query: str = Field(..., description="The GraphQL document that was executed")
    variables: dict[str, Any] = Field(..., description="Variables that were passed to the query")
    data: dict[str, Any] | None = Field(
        None, description="Query result data (null if query failed)"
    )
    errors: list[GraphQLError] | None = Field(
        None, description="List of errors that occurred during query execution"
    )

    @model_validator(mode="after")
    def validate_graphql_structure(self) -> Self:
        """Ensure this looks like a valid GraphQL response with either data or errors."""
        if self.data is None and not self.errors:
            raise ValueError("GraphQL response must contain either 'data' or 'errors' field")
        return self
