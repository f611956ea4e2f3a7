"""Construction of the ``SELENIUM_DRIVER`` connection string."""

from __future__ import annotations

from .constants import DRIVER_URI_SCHEME
from .models import Browser, FeatureConfig, FeatureConfigurationError

_NULL = "null"


def build_driver_uri(
    username: str | None,
    access_key: str | None,
    browser: Browser | None = None,
    max_duration: str | None = None,
    idle_timeout: str | None = None,
    *,
    render_missing_as_null: bool = False,
) -> str:
    """Return the Sauce OnDemand driver URI consumed by selenium-client-factory.

    Values are appended verbatim, without URL encoding, so an OS such as
    ``Windows 10`` keeps its space. With ``render_missing_as_null`` every
    absent value is written as the text ``null``. Otherwise missing
    credentials raise :class:`FeatureConfigurationError` and absent
    ``max-duration``/``idle-timeout`` segments are left out.
    """

    if not render_missing_as_null:
        missing = [
            name
            for name, value in (("username", username), ("access key", access_key))
            if value is None
        ]
        if missing:
            raise FeatureConfigurationError(
                f"Sauce feature is missing required {' and '.join(missing)}"
            )

    segments: list[tuple[str, str | None]] = [
        ("username", username),
        ("access-key", access_key),
    ]
    if browser is not None:
        segments += [
            ("os", browser.os),
            ("browser", browser.browser_name),
            ("browser-version", browser.version),
        ]
    segments += [("max-duration", max_duration), ("idle-timeout", idle_timeout)]

    parts = []
    for name, value in segments:
        if value is None:
            if not render_missing_as_null:
                continue
            value = _NULL
        parts.append(f"{name}={value}")
    return f"{DRIVER_URI_SCHEME}?" + "&".join(parts)


def driver_uri_for(
    feature: FeatureConfig, browser: Browser | None, *, render_missing_as_null: bool = False
) -> str:
    """Shortcut for :func:`build_driver_uri` using a feature's parameters."""

    return build_driver_uri(
        feature.username,
        feature.access_key,
        browser,
        feature.max_duration,
        feature.idle_timeout,
        render_missing_as_null=render_missing_as_null,
    )


__all__ = ["build_driver_uri", "driver_uri_for"]
