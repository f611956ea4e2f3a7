"""Configuration for the Sauce build-agent plugin."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_SAUCE_CONNECT_PORT, FEATURE_TYPE

DATA_CENTERS = {
    "US_WEST": "https://api.us-west-1.saucelabs.com/",
    "US_EAST": "https://api.us-east-4.saucelabs.com/",
    "EU_CENTRAL": "https://api.eu-central-1.saucelabs.com/",
}


class AgentSettings(BaseSettings):
    """Runtime settings for the plugin, read from the agent's environment."""

    # ``SAUCE_AGENT_DATA_CENTER=EU_CENTRAL`` and friends override the defaults.
    model_config = SettingsConfigDict(env_prefix="SAUCE_AGENT_", env_file=".env")

    # Build feature type the adapter reacts to.
    feature_type: str = FEATURE_TYPE
    # Port handed to the tunnel manager when the feature does not set one.
    default_tunnel_port: Annotated[int, Field(ge=1, le=65535)] = DEFAULT_SAUCE_CONNECT_PORT
    # Compatibility switch: render absent URI values as the text ``null``
    # instead of rejecting missing credentials and omitting optional segments.
    render_missing_as_null: bool = False
    # Mirror tunnel and configuration failures into the build's own log.
    report_to_build_log: bool = True

    # Sauce REST API used to look up browser metadata.
    data_center: Literal["US_WEST", "US_EAST", "EU_CENTRAL", "OTHER"] = "US_WEST"
    alternate_api_url: str | None = None
    catalog_timeout_seconds: Annotated[float, Field(gt=0.0, le=120.0)] = 30.0
    # After a failed catalog download, browser lookups resolve to nothing
    # until this many seconds have passed.
    catalog_retry_seconds: Annotated[float, Field(ge=0.0, le=3600.0)] = 300.0

    @model_validator(mode="after")
    def _validate_data_center(self) -> "AgentSettings":
        if self.data_center == "OTHER" and not self.alternate_api_url:
            raise ValueError("data_center is 'OTHER' but alternate_api_url has not been set")
        return self

    def api_base_url(self) -> str:
        """Return the Sauce REST API base URL with a trailing slash."""

        if self.data_center == "OTHER":
            assert self.alternate_api_url is not None  # pragma: no cover - guarded by validator
            return self.alternate_api_url.rstrip("/") + "/"
        return DATA_CENTERS[self.data_center]


@lru_cache
def load_settings() -> AgentSettings:
    """Return cached settings instance."""

    return AgentSettings()


__all__ = ["AgentSettings", "DATA_CENTERS", "load_settings"]
