"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic import AliasChoices, AnyHttpUrl, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = Field(30000, validation_alias=AliasChoices("ntfy_bridge_port", "port"))
    log_level: str = "info"
    json_logs: bool = True

    # ntfy sink (NTFY_SERVER_ADDRESS is kept for existing deployments)
    ntfy_server: AnyHttpUrl = Field(
        "http://localhost:30001",
        validation_alias=AliasChoices("ntfy_bridge_ntfy_server", "ntfy_server_address"),
    )
    delivery_timeout: float = Field(10.0, gt=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NTFY_BRIDGE_",
        "extra": "ignore",
        "populate_by_name": True,
        "validate_default": True,
    }

    @property
    def ntfy_url(self) -> str:
        """Return the sink base URL as a plain string."""
        return str(self.ntfy_server)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build the process settings once and reuse them."""
    return Settings()
