import asyncio

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, CliApp, CliSubCommand

from .client import FlyClient
from .sessions.client import SessionsClient
from .settings import Settings


class LoginCommand(BaseModel):
    """Exchange email and password for an access token"""

    email: str = Field(description="account email")
    password: str = Field(description="account password")
    otp: str = Field(default="", description="one-time password, if two-factor auth is enabled")

    def cli_cmd(self) -> None:
        print(asyncio.run(self._login()))

    async def _login(self) -> str:
        async with SessionsClient(Settings()) as sessions:
            return await sessions.get_access_token(self.email, self.password, self.otp)


class AppsCommand(BaseModel):
    """List apps"""

    def cli_cmd(self) -> None:
        for app in asyncio.run(self._apps()):
            org = app.organization.slug if app.organization else ""
            print(f"{app.name}\t{org}")

    async def _apps(self):
        async with FlyClient.from_env() as client:
            return await client.apps.get_apps()


class RegionsCommand(BaseModel):
    """List platform regions"""

    def cli_cmd(self) -> None:
        result = asyncio.run(self._regions())
        for region in result.regions:
            marker = "*" if region == result.request_region else " "
            print(f"{marker} {region.code}\t{region.name}")

    async def _regions(self):
        async with FlyClient.from_env() as client:
            return await client.platform.platform_regions()


class CLIArguments(
    BaseSettings, cli_parse_args=True, cli_kebab_case=True, cli_use_class_docs_for_groups=True
):
    """Command line arguments."""

    login: CliSubCommand[LoginCommand]
    apps: CliSubCommand[AppsCommand]
    regions: CliSubCommand[RegionsCommand]

    def cli_cmd(self) -> None:
        CliApp.run_subcommand(self)
