from datetime import datetime
from typing import Any

from pydantic import Field

from ..models import (
    FlyModel,
    GraphQLInput,
    MaybeList,
    NodeList,
    Organization,
    Release,
    ReleasePayload,
    User,
)


class Service(FlyModel):
    """A service exposed by an app task."""

    protocol: str | None = None
    port: int | None = None
    internal_port: int | None = None
    filters: MaybeList[str] = Field(default_factory=list)


class Allocation(FlyModel):
    """A task allocation placed in a region."""

    id: str
    version: int | None = None
    status: str | None = None
    desired_status: str | None = None
    region: str | None = None
    created_at: datetime | None = None


class Task(FlyModel):
    """A task group of an app."""

    id: str | None = None
    name: str | None = None
    status: str | None = None
    services_summary: str | None = None
    services: MaybeList[Service] = Field(default_factory=list)
    allocations: MaybeList[Allocation] = Field(default_factory=list)


class IPAddress(FlyModel):
    """An IP address allocated to an app."""

    id: str
    address: str
    type: str | None = None


class App(FlyModel):
    """A platform application."""

    id: str | None = Field(None, description="App ID")
    name: str | None = Field(None, description="App name, unique across the platform")
    deployed: bool | None = Field(None, description="Whether the app has been deployed")
    status: str | None = Field(None, description="Current app status")
    version: int | None = Field(None, description="Current release version")
    app_url: str | None = Field(None, description="Public URL of the app")
    organization: Organization | None = Field(None, description="Owning organization")
    tasks: MaybeList[Task] = Field(default_factory=list, description="Task groups")
    ip_addresses: NodeList[IPAddress] = Field(
        default_factory=list, description="Allocated IP addresses"
    )


class CheckState(FlyModel):
    name: str | None = None
    service_name: str | None = None
    status: str | None = None
    output: str | None = None


class AllocationEvent(FlyModel):
    timestamp: datetime | None = None
    type: str | None = None
    message: str | None = None


class AllocationStatus(FlyModel):
    """Allocation state reported while a deployment progresses."""

    id: str
    id_short: str | None = None
    status: str | None = None
    region: str | None = None
    desired_status: str | None = None
    version: int | None = None
    healthy: bool | None = None
    failed: bool | None = None
    canary: bool | None = None
    checks: MaybeList[CheckState] = Field(default_factory=list)
    events: MaybeList[AllocationEvent] = Field(default_factory=list)


class DeploymentStatus(FlyModel):
    """Progress of a deployment."""

    id: str
    in_progress: bool | None = None
    status: str | None = None
    successful: bool | None = None
    description: str | None = None
    version: int | None = None
    desired_count: int | None = None
    placed_count: int | None = None
    healthy_count: int | None = None
    unhealthy_count: int | None = None
    allocations: MaybeList[AllocationStatus] = Field(default_factory=list)


class LogMeta(FlyModel):
    instance: str | None = None
    region: str | None = None


class LogEntry(FlyModel):
    """A single app log line."""

    timestamp: str | None = None
    message: str | None = None
    level: str | None = None
    meta: LogMeta = Field(default_factory=LogMeta)


class AppLogs(FlyModel):
    """A page of app logs."""

    entries: list[LogEntry] = Field(..., description="Log entries in the order received")
    next_token: str = Field("", description="Token to pass back to fetch the following page")


# Mutation inputs


class CreateAppInput(GraphQLInput):
    organization_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    runtime: str = "FIRECRACKER"


class DeployImageInput(GraphQLInput):
    """Input for deploying a container image to an app."""

    app_id: str = Field(..., min_length=1, description="Name or ID of the app")
    image: str = Field(..., min_length=1, description="Image reference to deploy")
    strategy: str | None = Field(None, description="Deployment strategy, e.g. ROLLING or CANARY")
    definition: dict[str, Any] | None = Field(None, description="App configuration definition")


# Operation results


class CurrentUserQuery(FlyModel):
    current_user: User


class OrganizationsQuery(FlyModel):
    organizations: NodeList[Organization]


class AppsQuery(FlyModel):
    apps: NodeList[App]


class AppQuery(FlyModel):
    app: App | None = None


class _AppReleases(FlyModel):
    releases: NodeList[Release] = Field(default_factory=list)


class AppReleasesQuery(FlyModel):
    app: _AppReleases | None = None


class _CreateAppPayload(FlyModel):
    app: App


class CreateAppMutation(FlyModel):
    create_app: _CreateAppPayload


class DeployImageMutation(FlyModel):
    deploy_image: ReleasePayload


class _AppDeploymentStatus(FlyModel):
    deployment_status: DeploymentStatus | None = None


class DeploymentStatusQuery(FlyModel):
    app: _AppDeploymentStatus | None = None


class _LogRecord(FlyModel):
    id: str | None = None
    attributes: LogEntry


class _LogsMeta(FlyModel):
    next_token: str | None = Field(None, alias="next_token")


class LogsResponse(FlyModel):
    """REST response of the app logs endpoint."""

    data: MaybeList[_LogRecord] = Field(default_factory=list)
    meta: _LogsMeta = Field(default_factory=_LogsMeta)
