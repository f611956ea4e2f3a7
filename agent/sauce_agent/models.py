"""Typed views over build feature parameters and browser metadata."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DEFAULT_SAUCE_CONNECT_PORT,
    SAUCE_CONNECT_KEY,
    SAUCE_CONNECT_OPTIONS,
    SAUCE_HTTPS_PROTOCOL,
    SAUCE_PLUGIN_ACCESS_KEY,
    SAUCE_USER_ID_KEY,
    SELENIUM_HOST_KEY,
    SELENIUM_IDLE_TIMEOUT_KEY,
    SELENIUM_MAX_DURATION_KEY,
    SELENIUM_PORT_KEY,
    SELENIUM_SELECTED_BROWSER,
    SELENIUM_STARTING_URL_KEY,
    TUNNEL_ENABLED_VALUE,
)

_KEY_SEPARATORS = re.compile(r"[,\r\n]+")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


class FeatureConfigurationError(ValueError):
    """Raised when a build feature cannot be used as configured."""


class Browser(BaseModel):
    """OS, browser and version triple resolved from a browser key."""

    model_config = ConfigDict(frozen=True)

    key: str
    os: str
    browser_name: str
    version: str
    long_name: str | None = None

    @classmethod
    def from_platform(cls, payload: Mapping[str, Any]) -> "Browser":
        """Build a browser from one entry of the Sauce platform catalog."""

        os_name = str(payload["os"])
        api_name = str(payload["api_name"])
        version = str(payload["short_version"])
        return cls(
            key=browser_key(os_name, api_name, version),
            os=os_name,
            browser_name=api_name,
            version=version,
            long_name=payload.get("long_name"),
        )


def browser_key(os_name: str, browser_name: str, version: str) -> str:
    """Return the key the feature editor stores for a browser selection."""

    return _NON_ALNUM.sub("", f"{os_name}{browser_name}{version}")


def _single_selection(raw: str | None) -> str | None:
    # The editor renders a multi-select, but only one browser is supported.
    if raw is None:
        return None
    keys = [item.strip() for item in _KEY_SEPARATORS.split(raw) if item.strip()]
    if len(keys) != 1:
        return None
    return keys[0]


class FeatureConfig(BaseModel):
    """Read-only view of one ``sauce`` build feature."""

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    access_key: str | None = None
    sauce_connect: str | None = None
    sauce_connect_options: str | None = None
    https_protocol: str | None = None
    selenium_host: str | None = None
    selenium_port: str | None = None
    starting_url: str | None = None
    max_duration: str | None = None
    idle_timeout: str | None = None
    selected_browser: str | None = None
    parameters: dict[str, str] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, str]) -> "FeatureConfig":
        get = parameters.get
        return cls(
            username=get(SAUCE_USER_ID_KEY),
            access_key=get(SAUCE_PLUGIN_ACCESS_KEY),
            sauce_connect=get(SAUCE_CONNECT_KEY),
            sauce_connect_options=get(SAUCE_CONNECT_OPTIONS),
            https_protocol=get(SAUCE_HTTPS_PROTOCOL),
            selenium_host=get(SELENIUM_HOST_KEY),
            selenium_port=get(SELENIUM_PORT_KEY),
            starting_url=get(SELENIUM_STARTING_URL_KEY),
            max_duration=get(SELENIUM_MAX_DURATION_KEY),
            idle_timeout=get(SELENIUM_IDLE_TIMEOUT_KEY),
            selected_browser=_single_selection(get(SELENIUM_SELECTED_BROWSER)),
            parameters=dict(parameters),
        )

    @property
    def tunnel_enabled(self) -> bool:
        """Only the exact string ``"true"`` enables Sauce Connect."""

        return self.sauce_connect == TUNNEL_ENABLED_VALUE

    def sauce_connect_port(self, default: int = DEFAULT_SAUCE_CONNECT_PORT) -> int:
        """Return the tunnel port, raising ``ValueError`` for non-numeric values."""

        if self.selenium_port is None:
            return default
        if not _PORT_PATTERN.fullmatch(self.selenium_port):
            raise ValueError(f"Invalid Sauce Connect port: {self.selenium_port!r}")
        return int(self.selenium_port)


__all__ = [
    "Browser",
    "FeatureConfig",
    "FeatureConfigurationError",
    "browser_key",
]
