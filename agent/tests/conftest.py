"""Shared fixtures and fake collaborators for the agent tests."""

from __future__ import annotations

from typing import Any

import pytest

from sauce_agent.browsers import StaticBrowserFactory
from sauce_agent.config import AgentSettings
from sauce_agent.host import AgentEventDispatcher
from sauce_agent.models import Browser, browser_key


class RecordingTunnelManager:
    def __init__(self, *, open_error: Exception | None = None, close_error: Exception | None = None) -> None:
        self.opened: list[dict[str, Any]] = []
        self.closed: list[str | None] = []
        self._open_error = open_error
        self._close_error = close_error

    def open_connection(
        self,
        username: str | None,
        access_key: str | None,
        port: int,
        options: str | None,
        protocol: str | None,
    ) -> object:
        self.opened.append(
            {
                "username": username,
                "access_key": access_key,
                "port": port,
                "options": options,
                "protocol": protocol,
            }
        )
        if self._open_error is not None:
            raise self._open_error
        return object()

    def close_tunnels_for_plan(self, username: str | None) -> None:
        self.closed.append(username)
        if self._close_error is not None:
            raise self._close_error


CHROME_70 = Browser(
    key=browser_key("Windows 10", "chrome", "70"),
    os="Windows 10",
    browser_name="chrome",
    version="70",
)


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> AgentSettings:
    for name in ("SAUCE_AGENT_RENDER_MISSING_AS_NULL", "SAUCE_AGENT_DATA_CENTER"):
        monkeypatch.delenv(name, raising=False)
    return AgentSettings(_env_file=None)


@pytest.fixture()
def dispatcher() -> AgentEventDispatcher:
    return AgentEventDispatcher()


@pytest.fixture()
def tunnels() -> RecordingTunnelManager:
    return RecordingTunnelManager()


@pytest.fixture()
def browsers() -> StaticBrowserFactory:
    return StaticBrowserFactory([CHROME_70])


@pytest.fixture()
def make_tunnels():
    def factory(**kwargs: Any) -> RecordingTunnelManager:
        return RecordingTunnelManager(**kwargs)

    return factory
