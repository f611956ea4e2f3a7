"""Environment variables exported to the build for a ``sauce`` feature."""

from __future__ import annotations

from .constants import (
    SAUCE_API_KEY,
    SAUCE_USER_NAME,
    SELENIUM_BROWSER_ENV,
    SELENIUM_DRIVER_ENV,
    SELENIUM_HOST_ENV,
    SELENIUM_IDLE_TIMEOUT_ENV,
    SELENIUM_MAX_DURATION_ENV,
    SELENIUM_PLATFORM_ENV,
    SELENIUM_PORT_ENV,
    SELENIUM_STARTING_URL_ENV,
    SELENIUM_VERSION_ENV,
)
from .models import Browser, FeatureConfig


def feature_environment(
    feature: FeatureConfig, driver_uri: str | None, browser: Browser | None = None
) -> dict[str, str]:
    """Return the variables to share with the build, skipping absent values."""

    candidates: list[tuple[str, str | None]] = [
        (SAUCE_USER_NAME, feature.username),
        (SAUCE_API_KEY, feature.access_key),
        (SELENIUM_DRIVER_ENV, driver_uri),
        (SELENIUM_HOST_ENV, feature.selenium_host),
        (SELENIUM_PORT_ENV, feature.selenium_port),
        (SELENIUM_STARTING_URL_ENV, feature.starting_url),
        (SELENIUM_MAX_DURATION_ENV, feature.max_duration),
        (SELENIUM_IDLE_TIMEOUT_ENV, feature.idle_timeout),
    ]
    if browser is not None:
        candidates += [
            (SELENIUM_BROWSER_ENV, browser.browser_name),
            (SELENIUM_VERSION_ENV, browser.version),
            (SELENIUM_PLATFORM_ENV, browser.os),
        ]
    return {key: value for key, value in candidates if value is not None}


__all__ = ["feature_environment"]
