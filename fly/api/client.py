from typing import Any, Self

from .apps.client import AppsClient
from .builds.client import BuildsClient
from .config.client import ConfigClient
from .dns.client import DNSClient
from .fly_auth import FlyCredentials, load_fly_auth
from .graphql.client import GraphQLClient
from .platform.client import PlatformClient
from .secrets.client import SecretsClient
from .settings import Settings
from .ssh.client import SSHClient
from .wireguard.client import WireGuardClient


class FlyClient:
    """Client for the platform API, grouping operations by resource."""

    def __init__(self, access_token: str, settings: Settings | None = None):
        """
        Initialize the client with an access token.

        Args:
            access_token: Bearer token for the platform API
            settings: Client settings; loaded from the environment when omitted
        """
        self.graphql = GraphQLClient(access_token, settings)

        self.apps = AppsClient(self.graphql)
        self.builds = BuildsClient(self.graphql)
        self.config = ConfigClient(self.graphql)
        self.dns = DNSClient(self.graphql)
        self.platform = PlatformClient(self.graphql)
        self.secrets = SecretsClient(self.graphql)
        self.ssh = SSHClient(self.graphql)
        self.wireguard = WireGuardClient(self.graphql)

    @classmethod
    def from_credentials(
        cls, credentials: FlyCredentials, settings: Settings | None = None
    ) -> Self:
        """Create a client for loaded credentials, using their base URL."""
        settings = (settings or Settings()).model_copy(update={"base_url": credentials.base_url})
        return cls(credentials.access_token, settings)

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> Self:
        """Create a client with credentials from the environment or CLI config."""
        settings = settings or Settings()
        return cls.from_credentials(load_fly_auth(settings), settings)

    @property
    def settings(self) -> Settings:
        return self.graphql.settings

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.graphql.aclose()
