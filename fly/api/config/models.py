# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from typing import Any

from pydantic import Field

from ..models import FlyModel, MaybeList


class ServiceDescription(FlyModel):
    description: str | None = None


class AppConfig(FlyModel):
    """An app configuration, as stored or as parsed and validated by the platform."""

    definition: dict[str, Any] | None = Field(None, description="Configuration definition")
    valid: bool | None = Field(None, description="Whether the definition is valid")
    errors: MaybeList[str] = Field(default_factory=list, description="Validation errors")
    services: MaybeList[ServiceDescription] = Field(
        default_factory=list, description="Services described by the definition"
    )


# Operation results


class _AppConfig(FlyModel):
    config: AppConfig


class AppConfigQuery(FlyModel):
    app: _AppConfig | None = None


class _AppParsedConfig(FlyModel):
    parse_config: AppConfig


class ParseConfigQuery(FlyModel):
    app: _AppParsedConfig | None = None


class ValidateConfigQuery(FlyModel):
    validate_config: AppConfig
