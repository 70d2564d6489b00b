import os

from pathlib import Path
from typing import NamedTuple

import yaml

from .errors import MissingAccessTokenError
from .settings import Settings


class FlyCredentials(NamedTuple):
    """Platform authentication credentials."""

    base_url: str
    access_token: str


def get_fly_dir() -> Path:
    """
    Get the CLI configuration directory (~/.fly).

    Returns:
        Path to the .fly directory
    """
    return Path.home() / ".fly"


def load_fly_auth(settings: Settings | None = None) -> FlyCredentials:
    """
    Load platform credentials from:

    1. Environment variables (FLY_ACCESS_TOKEN, then FLY_API_TOKEN)
    2. CLI configuration file (~/.fly/config.yml)

    The base URL always comes from settings.

    Returns:
        FlyCredentials with base_url and access_token
    """
    if settings is None:
        settings = Settings()

    # Lookup environment variables first
    access_token = os.getenv("FLY_ACCESS_TOKEN") or os.getenv("FLY_API_TOKEN")

    # Load access token from the CLI config if still needed
    if not access_token:
        config_file = get_fly_dir() / "config.yml"
        if config_file.exists():
            with open(config_file) as f:
                try:
                    config = yaml.safe_load(f)
                except yaml.YAMLError as err:
                    raise MissingAccessTokenError(f"Could not parse {config_file}: {err}") from err
            # Anything but a mapping holds no token
            if isinstance(config, dict):
                access_token = config.get("access_token")

    if access_token:
        return FlyCredentials(base_url=settings.base_url, access_token=access_token)

    raise MissingAccessTokenError(
        "Missing access token. Set FLY_ACCESS_TOKEN or FLY_API_TOKEN (`fly-api login` "
        "prints one), or add access_token to ~/.fly/config.yml."
    )
