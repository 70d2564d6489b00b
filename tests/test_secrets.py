import pytest

from pydantic import ValidationError

from fly.api.errors import NotFoundError
from fly.api.secrets.client import SecretsClient

from . import factory
from .testing.client import ClientTest


class TestSetSecrets(ClientTest):
    async def test_set_secrets(self):
        with self.expect_graphql(
            SecretsClient.Q_SET_SECRETS,
            {
                "input": {
                    "appId": "test-app",
                    "secrets": [
                        {"key": "DATABASE_URL", "value": "postgres://db"},
                        {"key": "API_KEY", "value": "s3cr3t"},
                    ],
                }
            },
            data={"setSecrets": {"release": factory.release(version=8)}},
        ):
            release = await self.client.secrets.set_secrets(
                "test-app", {"DATABASE_URL": "postgres://db", "API_KEY": "s3cr3t"}
            )

        assert release.version == 8

    async def test_no_secrets_rejected(self):
        with self.http.expect():
            with pytest.raises(ValidationError):
                await self.client.secrets.set_secrets("test-app", {})


class TestUnsetSecrets(ClientTest):
    async def test_unset_secrets(self):
        with self.expect_graphql(
            SecretsClient.Q_UNSET_SECRETS,
            {"input": {"appId": "test-app", "keys": ["API_KEY"]}},
            data={"unsetSecrets": {"release": factory.release(version=9)}},
        ):
            release = await self.client.secrets.unset_secrets("test-app", ["API_KEY"])

        assert release.version == 9


class TestGetAppSecrets(ClientTest):
    async def test_get_app_secrets(self):
        secrets = [
            {"name": "DATABASE_URL", "digest": "abc", "createdAt": "2024-01-01T00:00:00Z"},
            {"name": "API_KEY", "digest": "def", "createdAt": None},
        ]
        with self.expect_graphql(
            SecretsClient.Q_APP_SECRETS,
            {"appName": "test-app"},
            data={"app": {"secrets": secrets}},
        ):
            result = await self.client.secrets.get_app_secrets("test-app")

        assert [(secret.name, secret.digest) for secret in result] == [
            ("DATABASE_URL", "abc"),
            ("API_KEY", "def"),
        ]
        assert result[1].created_at is None

    async def test_app_not_found(self):
        with self.expect_graphql(
            SecretsClient.Q_APP_SECRETS, {"appName": "missing"}, data={"app": None}
        ):
            with pytest.raises(NotFoundError):
                await self.client.secrets.get_app_secrets("missing")
