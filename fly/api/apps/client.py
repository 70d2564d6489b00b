"""
Application, release and deployment operations.
"""

from typing import Annotated, Any

from pydantic import Field, validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient, decode_response
from ..models import RELEASE_FIELDS, NonEmptyStr, Organization, Release, User
from .models import (
    App,
    AppLogs,
    AppQuery,
    AppReleasesQuery,
    AppsQuery,
    CreateAppInput,
    CreateAppMutation,
    CurrentUserQuery,
    DeployImageInput,
    DeployImageMutation,
    DeploymentStatus,
    DeploymentStatusQuery,
    LogsResponse,
    OrganizationsQuery,
)


class AppsClient:
    """Operations on apps and their releases and deployments."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    async def get_current_user(self) -> User:
        """Return the user the access token belongs to."""
        result = await self.graphql.execute(self.Q_CURRENT_USER, {}, CurrentUserQuery)
        return result.current_user

    Q_CURRENT_USER = """
        query {
            currentUser {
                email
            }
        }
    """

    async def get_organizations(self) -> list[Organization]:
        """List organizations the user belongs to."""
        result = await self.graphql.execute(self.Q_ORGANIZATIONS, {}, OrganizationsQuery)
        return result.organizations

    Q_ORGANIZATIONS = """
        query {
            organizations {
                nodes {
                    id
                    slug
                    name
                    type
                }
            }
        }
    """

    async def get_apps(self) -> list[App]:
        """List container apps visible to the user, in server order."""
        result = await self.graphql.execute(self.Q_APPS, {}, AppsQuery)
        return result.apps

    Q_APPS = """
        query {
            apps(type: "container") {
                nodes {
                    id
                    name
                    organization {
                        slug
                    }
                }
            }
        }
    """

    @validate_call
    async def get_app(self, app_name: NonEmptyStr) -> App:
        """
        Get an app with its services and IP addresses.

        Args:
            app_name: Name of the app

        Returns:
            The app
        """
        result = await self.graphql.execute(self.Q_APP, {"appName": app_name}, AppQuery)
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app

    Q_APP = """
        query ($appName: String!) {
            app(name: $appName) {
                id
                name
                deployed
                status
                appUrl
                organization {
                    slug
                }
                tasks {
                    id
                    name
                    services {
                        protocol
                        port
                        internalPort
                        filters
                    }
                }
                ipAddresses {
                    nodes {
                        id
                        address
                        type
                    }
                }
            }
        }
    """

    @validate_call
    async def get_app_releases(
        self, app_name: NonEmptyStr, limit: Annotated[int, Field(ge=1)]
    ) -> list[Release]:
        """
        List the most recent releases of an app.

        Args:
            app_name: Name of the app
            limit: Maximum number of releases to return

        Returns:
            Releases in server order, newest first
        """
        variables = {"appName": app_name, "limit": limit}
        result = await self.graphql.execute(self.Q_APP_RELEASES, variables, AppReleasesQuery)
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app.releases

    Q_APP_RELEASES = f"""
        query ($appName: String!, $limit: Int!) {{
            app(name: $appName) {{
                releases(first: $limit) {{
                    nodes {{
                        {RELEASE_FIELDS}
                    }}
                }}
            }}
        }}
    """

    @validate_call
    async def create_app(self, name: NonEmptyStr, organization_id: NonEmptyStr) -> App:
        """
        Create an app in an organization.

        Args:
            name: Name of the new app
            organization_id: ID of the owning organization

        Returns:
            The created app
        """
        app_input = CreateAppInput(name=name, organization_id=organization_id)
        result = await self.graphql.execute(
            self.Q_CREATE_APP, {"input": app_input.for_graphql()}, CreateAppMutation
        )
        return result.create_app.app

    Q_CREATE_APP = """
        mutation ($input: CreateAppInput!) {
            createApp(input: $input) {
                app {
                    id
                    name
                    organization {
                        slug
                    }
                }
            }
        }
    """

    @validate_call
    async def get_app_with_tasks(self, app_name: NonEmptyStr) -> App:
        """
        Get an app's task groups and their allocations.

        Args:
            app_name: Name of the app

        Returns:
            The app, with deployment state and tasks populated
        """
        result = await self.graphql.execute(
            self.Q_APP_WITH_TASKS, {"appName": app_name}, AppQuery
        )
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app

    Q_APP_WITH_TASKS = """
        query ($appName: String!) {
            app(name: $appName) {
                deployed
                tasks {
                    id
                    name
                    status
                    servicesSummary
                    allocations {
                        id
                        version
                        status
                        desiredStatus
                        region
                        createdAt
                    }
                }
            }
        }
    """

    async def deploy_image(self, deploy_input: DeployImageInput) -> Release:
        """
        Deploy a container image.

        Args:
            deploy_input: Validated deployment input

        Returns:
            The release created by the deployment
        """
        result = await self.graphql.execute(
            self.Q_DEPLOY_IMAGE, {"input": deploy_input.for_graphql()}, DeployImageMutation
        )
        return result.deploy_image.release

    Q_DEPLOY_IMAGE = f"""
        mutation ($input: DeployImageInput!) {{
            deployImage(input: $input) {{
                release {{
                    {RELEASE_FIELDS}
                }}
            }}
        }}
    """

    async def deploy_image_tag(self, app_name: str, image: str) -> Release:
        """Deploy an image tag to an app with default options."""
        return await self.deploy_image(DeployImageInput(app_id=app_name, image=image))

    @validate_call
    async def get_deployment_status(
        self, app_name: NonEmptyStr, deployment_id: NonEmptyStr
    ) -> DeploymentStatus | None:
        """
        Get the progress of a deployment.

        Args:
            app_name: Name of the app
            deployment_id: ID of the deployment

        Returns:
            Deployment status, or None if the app has no such deployment
        """
        variables = {"appName": app_name, "deploymentId": deployment_id}
        result = await self.graphql.execute(
            self.Q_DEPLOYMENT_STATUS, variables, DeploymentStatusQuery
        )
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app.deployment_status

    Q_DEPLOYMENT_STATUS = """
        query ($appName: String!, $deploymentId: ID!) {
            app(name: $appName) {
                deploymentStatus(id: $deploymentId) {
                    id
                    inProgress
                    status
                    successful
                    description
                    version
                    desiredCount
                    placedCount
                    healthyCount
                    unhealthyCount
                    allocations {
                        id
                        idShort
                        status
                        region
                        desiredStatus
                        version
                        healthy
                        failed
                        canary
                        checks {
                            status
                            output
                            name
                            serviceName
                        }
                        events {
                            timestamp
                            type
                            message
                        }
                    }
                }
            }
        }
    """

    @validate_call
    async def get_app_logs(
        self,
        app_name: NonEmptyStr,
        next_token: str = "",
        region: str | None = None,
        instance_id: str | None = None,
    ) -> AppLogs:
        """
        Fetch a page of app logs.

        Args:
            app_name: Name of the app
            next_token: Token returned by the previous page, empty for the first
            region: Only return logs from this region
            instance_id: Only return logs from this instance

        Returns:
            Log entries and the token for the next page
        """
        params: dict[str, Any] = {"next_token": next_token}
        if instance_id:
            params["instance"] = instance_id
        if region:
            params["region"] = region

        response = await self.graphql.request("GET", f"apps/{app_name}/logs", params=params)
        result = decode_response(response, LogsResponse)
        return AppLogs(
            entries=[record.attributes for record in result.data],
            next_token=result.meta.next_token or "",
        )
