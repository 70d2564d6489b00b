from pydantic import validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient
from ..models import RELEASE_FIELDS, NonEmptyStr, Release
from .models import (
    AppSecretsQuery,
    Secret,
    SecretValue,
    SetSecretsInput,
    SetSecretsMutation,
    UnsetSecretsInput,
    UnsetSecretsMutation,
)


class SecretsClient:
    """Operations on app secrets."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    @validate_call
    async def set_secrets(self, app_name: NonEmptyStr, secrets: dict[str, str]) -> Release:
        """
        Set secrets on an app, creating a new release.

        Args:
            app_name: Name of the app
            secrets: Mapping of secret names to values

        Returns:
            The release created by the change
        """
        secrets_input = SetSecretsInput(
            app_id=app_name,
            secrets=[SecretValue(key=key, value=value) for key, value in secrets.items()],
        )
        result = await self.graphql.execute(
            self.Q_SET_SECRETS, {"input": secrets_input.for_graphql()}, SetSecretsMutation
        )
        return result.set_secrets.release

    Q_SET_SECRETS = f"""
        mutation ($input: SetSecretsInput!) {{
            setSecrets(input: $input) {{
                release {{
                    {RELEASE_FIELDS}
                }}
            }}
        }}
    """

    @validate_call
    async def unset_secrets(self, app_name: NonEmptyStr, keys: list[str]) -> Release:
        """
        Remove secrets from an app, creating a new release.

        Args:
            app_name: Name of the app
            keys: Names of the secrets to remove

        Returns:
            The release created by the change
        """
        secrets_input = UnsetSecretsInput(app_id=app_name, keys=keys)
        result = await self.graphql.execute(
            self.Q_UNSET_SECRETS, {"input": secrets_input.for_graphql()}, UnsetSecretsMutation
        )
        return result.unset_secrets.release

    Q_UNSET_SECRETS = f"""
        mutation ($input: UnsetSecretsInput!) {{
            unsetSecrets(input: $input) {{
                release {{
                    {RELEASE_FIELDS}
                }}
            }}
        }}
    """

    @validate_call
    async def get_app_secrets(self, app_name: NonEmptyStr) -> list[Secret]:
        """List the secrets set on an app."""
        result = await self.graphql.execute(
            self.Q_APP_SECRETS, {"appName": app_name}, AppSecretsQuery
        )
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app.secrets

    Q_APP_SECRETS = """
        query ($appName: String!) {
            app(name: $appName) {
                secrets {
                    name
                    digest
                    createdAt
                }
            }
        }
    """
