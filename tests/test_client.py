import pytest

from fly.api.apps.client import AppsClient
from fly.api.client import FlyClient
from fly.api.errors import MissingAccessTokenError
from fly.api.fly_auth import FlyCredentials
from fly.api.settings import Settings

from . import factory
from .testing.http import ACCESS_TOKEN, expect_graphql


class TestFlyClient:
    async def test_operation_groups_share_transport(self, fly_client):
        groups = [
            fly_client.apps,
            fly_client.builds,
            fly_client.config,
            fly_client.dns,
            fly_client.platform,
            fly_client.secrets,
            fly_client.ssh,
            fly_client.wireguard,
        ]
        assert all(group.graphql is fly_client.graphql for group in groups)

    def test_missing_access_token(self, default_settings):
        with pytest.raises(MissingAccessTokenError):
            FlyClient("", default_settings)

    async def test_from_credentials(self, default_settings):
        credentials = FlyCredentials(base_url="https://api.other.example.com", access_token="t")
        async with FlyClient.from_credentials(credentials, default_settings) as client:
            assert client.settings.base_url == "https://api.other.example.com"
            assert client.graphql.endpoint == "https://api.other.example.com/api/v2/graphql"

        # the passed settings are left untouched
        assert default_settings.base_url != "https://api.other.example.com"

    async def test_from_env(self, mock_fly_credentials, mock_http):
        with mock_http.expect(
            expect_graphql(AppsClient.Q_APPS, data={"apps": factory.nodes(factory.app())})
        ):
            async with FlyClient.from_env() as client:
                apps = await client.apps.get_apps()

        assert [app.name for app in apps] == ["test-app"]
        assert client.graphql.session.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"

    async def test_settings_shared(self):
        settings = Settings(wireguard_via_nats=True)
        async with FlyClient(ACCESS_TOKEN, settings) as client:
            assert client.settings is settings
