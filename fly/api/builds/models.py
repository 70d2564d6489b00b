# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from datetime import datetime

from pydantic import Field

from ..models import FlyModel, NodeList, User


class SignedUrls(FlyModel):
    """Presigned URLs for uploading and fetching a build source archive."""

    get_url: str = Field(..., description="URL to download the uploaded file")
    put_url: str = Field(..., description="URL to upload the file to")


class Build(FlyModel):
    """A remote image build."""

    id: str
    typename: str | None = Field(None, alias="__typename")
    in_progress: bool | None = None
    status: str | None = None
    logs: str | None = None
    user: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Operation results


class CreateSignedUrlMutation(FlyModel):
    create_signed_url: SignedUrls


class _BuildPayload(FlyModel):
    build: Build


class CreateBuildMutation(FlyModel):
    create_build: _BuildPayload


class _AppBuilds(FlyModel):
    builds: NodeList[Build] = Field(default_factory=list)


class AppBuildsQuery(FlyModel):
    app: _AppBuilds | None = None


class BuildQuery(FlyModel):
    build: Build | None = None
