"""Tunnel manager collaborator.

Starting, supervising and tearing down Sauce Connect processes is left to an
external manager; the plugin only issues open and close requests keyed by the
Sauce username.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TunnelManager(Protocol):
    """Opens Sauce Connect tunnels and closes them by Sauce username."""

    def open_connection(
        self,
        username: str | None,
        access_key: str | None,
        port: int,
        options: str | None,
        protocol: str | None,
    ) -> object:
        """Open a tunnel; raises ``OSError`` when the process cannot be launched."""

    def close_tunnels_for_plan(self, username: str | None) -> None:
        """Close every tunnel opened for ``username``; a no-op when none is open."""


__all__ = ["TunnelManager"]
