# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

import pytest

from fly.api.apps.client import AppsClient
from fly.api.cmdline import CLIArguments
from fly.api.errors import MissingAccessTokenError
from fly.api.main import main
from fly.api.platform.client import PlatformClient

from . import factory
from .testing.http import API_URL, ExpectRequest, expect_graphql


@pytest.fixture
def run_cli(monkeypatch):
    def run(*args):
        monkeypatch.setattr("sys.argv", ["fly-api", *args])
        args = CLIArguments()
        args.cli_cmd()

    yield run


class TestCLIArguments:
    def test_apps(self, capsys, run_cli, mock_fly_credentials, mock_http):
        apps = [factory.app(name="web"), factory.app(name="worker", org_slug="team")]
        with mock_http.expect(
            expect_graphql(AppsClient.Q_APPS, data={"apps": factory.nodes(*apps)})
        ):
            run_cli("apps")

        out, err = capsys.readouterr()
        assert out == "web\tpersonal\nworker\tteam\n"
        assert err == ""

    def test_regions(self, capsys, run_cli, mock_fly_credentials, mock_http):
        regions = [factory.region("ams", "Amsterdam"), factory.region("ord", "Chicago")]
        with mock_http.expect(
            expect_graphql(
                PlatformClient.Q_REGIONS,
                data={"platform": {"requestRegion": "ord", "regions": regions}},
            )
        ):
            run_cli("regions")

        out, _ = capsys.readouterr()
        assert out == "  ams\tAmsterdam\n* ord\tChicago\n"

    def test_login(self, capsys, run_cli, mock_http):
        with mock_http.expect(
            ExpectRequest(
                f"{API_URL}/api/v1/sessions",
                method="POST",
                data={
                    "data": {"attributes": {"email": "me@example.com", "password": "pw", "otp": ""}}
                },
                status_code=201,
                response={"data": {"attributes": {"access_token": "new-token"}}},
                token=None,
            )
        ):
            run_cli("login", "--email", "me@example.com", "--password", "pw")

        out, _ = capsys.readouterr()
        assert out == "new-token\n"


class TestMain:
    def test_client_error_exits(self, capsys, monkeypatch):
        def no_credentials(settings=None):
            raise MissingAccessTokenError()

        monkeypatch.setattr("fly.api.client.load_fly_auth", no_credentials)
        monkeypatch.setattr("sys.argv", ["fly-api", "apps"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        _, err = capsys.readouterr()
        assert err == "Error: No api access token available. Please login\n"
