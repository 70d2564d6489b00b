# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from pydantic import Field

from ..models import FlyModel


class CLISessionAuth(FlyModel):
    """A CLI login session linked through the browser."""

    id: str = Field(..., description="Session ID to poll")
    auth_url: str | None = Field(
        None, alias="auth_url", description="URL the user opens to approve the session"
    )
    access_token: str | None = Field(
        None, alias="access_token", description="Token, populated once the session is approved"
    )


class _SessionAttributes(FlyModel):
    access_token: str = Field(..., alias="access_token", min_length=1)


class _SessionData(FlyModel):
    attributes: _SessionAttributes


class SessionResponse(FlyModel):
    """REST response of the sessions endpoint."""

    data: _SessionData
