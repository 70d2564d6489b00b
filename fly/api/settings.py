from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_prefix="fly_api_",
        validate_assignment=True,
    )

    base_url: str = Field(
        default="https://api.fly.io",
        description="Base URL of the platform API",
    )
    timeout: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (none by default, rely on task cancellation)",
    )
    wireguard_via_nats: bool = Field(
        default=False,
        description="Request NATS delivery when creating WireGuard peers",
    )

    def api_url(self, path: str) -> str:
        """Return the full URL for an API path."""
        return f"{self.base_url.rstrip('/')}/api/{path.lstrip('/')}"
