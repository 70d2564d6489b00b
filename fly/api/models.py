# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from datetime import datetime
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


ItemT = TypeVar("ItemT")


class FlyModel(BaseModel):
    """Base for models decoded from camelCase API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def unwrap_nodes(value: Any) -> Any:
    """Unwrap a `{nodes: [...]}` connection into its node list; null means empty."""
    if value is None:
        return []
    if isinstance(value, dict):
        return value.get("nodes") or []
    return value


# A list delivered by the API inside a `{nodes: [...]}` wrapper, in server order.
NodeList = Annotated[list[ItemT], BeforeValidator(unwrap_nodes)]


def empty_if_none(value: Any) -> Any:
    return [] if value is None else value


# A plain list the API may send as null.
MaybeList = Annotated[list[ItemT], BeforeValidator(empty_if_none)]

# Identifying parameters the API schema marks as required.
NonEmptyStr = Annotated[str, Field(min_length=1)]


class User(FlyModel):
    """A platform user."""

    id: str | None = Field(None, description="User ID")
    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Email address")


class Organization(FlyModel):
    """An organization owning apps and networks."""

    id: str | None = Field(None, description="Organization ID")
    slug: str | None = Field(None, description="URL-safe organization identifier")
    name: str | None = Field(None, description="Organization name")
    type: str | None = Field(None, description="Organization type, e.g. PERSONAL or SHARED")


class Region(FlyModel):
    """A platform region."""

    code: str = Field(..., description="Three letter region code")
    name: str | None = Field(None, description="Human readable region name")
    latitude: float | None = Field(None, description="Region latitude")
    longitude: float | None = Field(None, description="Region longitude")
    gateway_available: bool | None = Field(
        None, description="Whether a WireGuard gateway is available in the region"
    )


class Release(FlyModel):
    """An app release."""

    id: str
    version: int | None = None
    reason: str | None = None
    description: str | None = None
    user: User | None = None
    created_at: datetime | None = None


class ReleasePayload(FlyModel):
    """Mutation payload carrying the resulting release."""

    release: Release


# Fragment shared by every operation that returns a release.
RELEASE_FIELDS = """
    id
    version
    reason
    description
    user {
        id
        email
        name
    }
    createdAt
"""


class GraphQLInput(FlyModel):
    """Base for mutation input objects."""

    def for_graphql(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
