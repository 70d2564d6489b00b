# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from datetime import datetime

from pydantic import Field

from ..models import FlyModel, GraphQLInput, MaybeList, ReleasePayload


class Secret(FlyModel):
    """An app secret; only its digest is ever returned."""

    name: str = Field(..., description="Secret name")
    digest: str | None = Field(None, description="Digest of the secret value")
    created_at: datetime | None = Field(None, description="When the secret was set")


class SecretValue(FlyModel):
    key: str = Field(..., min_length=1)
    value: str


class SetSecretsInput(GraphQLInput):
    app_id: str = Field(..., min_length=1)
    secrets: list[SecretValue] = Field(..., min_length=1)


class UnsetSecretsInput(GraphQLInput):
    app_id: str = Field(..., min_length=1)
    keys: list[str] = Field(..., min_length=1)


# Operation results


class SetSecretsMutation(FlyModel):
    set_secrets: ReleasePayload


class UnsetSecretsMutation(FlyModel):
    unset_secrets: ReleasePayload


class _AppSecrets(FlyModel):
    secrets: MaybeList[Secret] = Field(default_factory=list)


class AppSecretsQuery(FlyModel):
    app: _AppSecrets | None = None
