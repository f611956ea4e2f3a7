"""Browser lookup by the key stored in the build feature."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

import httpx

from .config import AgentSettings
from .models import Browser

LOGGER = logging.getLogger(__name__)

PLATFORMS_ENDPOINT = "rest/v1/info/platforms/webdriver"


@runtime_checkable
class BrowserFactory(Protocol):
    """Looks up browser metadata by the key stored in a build feature."""

    def resolve_browser(self, key: str | None) -> Browser | None:
        """Return the browser for ``key`` or ``None`` when it is unknown."""


class StaticBrowserFactory:
    """Resolve browsers from a fixed in-memory list."""

    def __init__(self, browsers: Iterable[Browser] = ()) -> None:
        self._browsers = {browser.key: browser for browser in browsers}

    def resolve_browser(self, key: str | None) -> Browser | None:
        if key is None:
            return None
        return self._browsers.get(key)

    def __len__(self) -> int:
        return len(self._browsers)


class SauceBrowserFactory:
    """Resolve browsers against the WebDriver platform catalog of Sauce Labs.

    The catalog is downloaded on first use and kept for the lifetime of the
    factory; call :meth:`refresh` to reload it. Lookup failures never fail a
    build: an unreachable API behaves like an unknown browser key, and no new
    download is attempted until ``catalog_retry_seconds`` have passed.
    """

    def __init__(
        self,
        settings: AgentSettings,
        *,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger or LOGGER
        self._clock = clock
        self._retry_seconds = settings.catalog_retry_seconds
        if http_client is None:
            self._client = httpx.Client(
                base_url=settings.api_base_url(),
                timeout=settings.catalog_timeout_seconds,
            )
            self._owns_client = True
        else:
            self._client = http_client
            self._owns_client = False
        self._catalog: StaticBrowserFactory | None = None
        self._retry_at: float | None = None

    def close(self) -> None:
        """Close the underlying HTTP client if this factory created it."""

        if self._owns_client:
            self._client.close()

    def fetch_platforms(self) -> list[Browser]:
        """Download the catalog, skipping entries without browser metadata."""

        response = self._client.get(PLATFORMS_ENDPOINT)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of platforms, got {type(payload).__name__}")
        browsers: list[Browser] = []
        for entry in payload:
            try:
                browsers.append(Browser.from_platform(entry))
            except (KeyError, TypeError, ValueError) as exc:
                self._logger.debug("Skipping malformed platform entry %r: %s", entry, exc)
        return browsers

    def refresh(self) -> None:
        self._catalog = StaticBrowserFactory(self.fetch_platforms())
        self._retry_at = None
        self._logger.info("Loaded %s browsers from the Sauce platform catalog", len(self._catalog))

    def resolve_browser(self, key: str | None) -> Browser | None:
        if key is None:
            return None
        if self._catalog is None:
            if self._retry_at is not None and self._clock() < self._retry_at:
                return None
            try:
                self.refresh()
            except (httpx.HTTPError, ValueError) as exc:
                self._retry_at = self._clock() + self._retry_seconds
                self._logger.warning(
                    "Unable to load the Sauce platform catalog, retrying in %ss: %s",
                    self._retry_seconds,
                    exc,
                )
                return None
        assert self._catalog is not None  # pragma: no cover - set by refresh
        return self._catalog.resolve_browser(key)


__all__ = ["BrowserFactory", "PLATFORMS_ENDPOINT", "SauceBrowserFactory", "StaticBrowserFactory"]
