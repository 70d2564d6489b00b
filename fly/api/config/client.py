from typing import Any

from pydantic import validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient
from ..models import NonEmptyStr
from .models import AppConfig, AppConfigQuery, ParseConfigQuery, ValidateConfigQuery


class ConfigClient:
    """Operations on app configuration."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    @validate_call
    async def get_config(self, app_name: NonEmptyStr) -> AppConfig:
        """Get the current configuration of an app."""
        result = await self.graphql.execute(
            self.Q_GET_CONFIG, {"appName": app_name}, AppConfigQuery
        )
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app.config

    Q_GET_CONFIG = """
        query ($appName: String!) {
            app(name: $appName) {
                config {
                    definition
                }
            }
        }
    """

    @validate_call
    async def parse_config(self, app_name: NonEmptyStr, definition: dict[str, Any]) -> AppConfig:
        """
        Parse a configuration definition in the context of an app.

        Args:
            app_name: Name of the app
            definition: Configuration definition

        Returns:
            The normalized definition, validity, errors and described services
        """
        variables = {"appName": app_name, "definition": definition}
        result = await self.graphql.execute(self.Q_PARSE_CONFIG, variables, ParseConfigQuery)
        if result.app is None:
            raise NotFoundError(f"App {app_name} not found")
        return result.app.parse_config

    Q_PARSE_CONFIG = """
        query ($appName: String!, $definition: JSON!) {
            app(name: $appName) {
                parseConfig(definition: $definition) {
                    definition
                    valid
                    errors
                    services {
                        description
                    }
                }
            }
        }
    """

    @validate_call
    async def validate_config(self, definition: dict[str, Any]) -> AppConfig:
        """Validate a configuration definition without reference to an app."""
        result = await self.graphql.execute(
            self.Q_VALIDATE_CONFIG, {"definition": definition}, ValidateConfigQuery
        )
        return result.validate_config

    Q_VALIDATE_CONFIG = """
        query ($definition: JSON!) {
            validateConfig(definition: $definition) {
                definition
                valid
                errors
            }
        }
    """
