from pydantic import validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient
from ..models import NonEmptyStr
from .models import (
    AppBuildsQuery,
    Build,
    BuildQuery,
    CreateBuildMutation,
    CreateSignedUrlMutation,
    SignedUrls,
)


class BuildsClient:
    """Operations on remote builds and their source uploads."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    @validate_call
    async def create_signed_urls(self, app_id: NonEmptyStr, filename: NonEmptyStr) -> SignedUrls:
        """
        Create presigned URLs for a build source upload.

        Args:
            app_id: ID of the app
            filename: Name of the file to upload

        Returns:
            URLs to upload (PUT) and later fetch (GET) the file
        """
        variables = {"appId": app_id, "filename": filename}
        result = await self.graphql.execute(
            self.Q_CREATE_SIGNED_URL, variables, CreateSignedUrlMutation
        )
        return result.create_signed_url

    Q_CREATE_SIGNED_URL = """
        mutation ($appId: ID!, $filename: String!) {
            createSignedUrl(appId: $appId, filename: $filename) {
                getUrl
                putUrl
            }
        }
    """

    @validate_call
    async def create_build(
        self, app_id: NonEmptyStr, source_url: NonEmptyStr, source_type: NonEmptyStr
    ) -> Build:
        """
        Start a build from an uploaded source.

        Args:
            app_id: ID of the app
            source_url: URL the builder fetches the source from
            source_type: Kind of source at the URL (a UrlSource enum value)

        Returns:
            The started build
        """
        variables = {"appId": app_id, "sourceUrl": source_url, "sourceType": source_type}
        result = await self.graphql.execute(self.Q_CREATE_BUILD, variables, CreateBuildMutation)
        return result.create_build.build

    Q_CREATE_BUILD = """
        mutation ($appId: ID!, $sourceUrl: String!, $sourceType: UrlSource!) {
            createBuild(appId: $appId, sourceUrl: $sourceUrl, sourceType: $sourceType) {
                build {
                    id
                    inProgress
                    status
                    user {
                        id
                        name
                        email
                    }
                    createdAt
                    updatedAt
                }
            }
        }
    """

    @validate_call
    async def list_builds(self, app_name: NonEmptyStr) -> list[Build]:
        """List the builds of an app."""
        result = await self.graphql.execute(
            self.Q_LIST_BUILDS, {"appName": app_name}, AppBuildsQuery
        )
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app.builds

    Q_LIST_BUILDS = """
        query ($appName: String!) {
            app(name: $appName) {
                builds {
                    nodes {
                        id
                        inProgress
                        status
                        user {
                            id
                            name
                            email
                        }
                        createdAt
                        updatedAt
                    }
                }
            }
        }
    """

    @validate_call
    async def get_build(self, build_id: NonEmptyStr) -> Build:
        """Get a build, including its logs."""
        result = await self.graphql.execute(self.Q_GET_BUILD, {"id": build_id}, BuildQuery)
        if result.build is None:
            raise NotFoundError(f"Build {build_id} not found")
        return result.build

    Q_GET_BUILD = """
        query ($id: ID!) {
            build: node(id: $id) {
                id
                __typename
                ... on Build {
                    inProgress
                    status
                    logs
                    user {
                        id
                        name
                        email
                    }
                    createdAt
                    updatedAt
                }
            }
        }
    """
