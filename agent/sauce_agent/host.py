"""Interfaces of the build agent that hosts the plugin.

The agent owns the build lifecycle. Plugins register an
:class:`AgentLifeCycleListener` with the :class:`AgentEventDispatcher` and
receive one ``build_started`` and one ``before_build_finish`` call per build.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)


class BuildFinishedStatus(str, Enum):
    """Outcome reported by the agent when a build is about to finish."""

    FINISHED_SUCCESS = "FINISHED_SUCCESS"
    FINISHED_FAILED = "FINISHED_FAILED"
    FINISHED_WITH_PROBLEMS = "FINISHED_WITH_PROBLEMS"
    INTERRUPTED = "INTERRUPTED"


@runtime_checkable
class AgentBuildFeature(Protocol):
    """A configured build feature with its string parameters."""

    @property
    def type(self) -> str: ...

    @property
    def parameters(self) -> Mapping[str, str]: ...


class BuildProgressLogger(Protocol):
    """The build's own log, visible to the people running the build."""

    def message(self, text: str) -> None: ...

    def warning(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...


@runtime_checkable
class AgentRunningBuild(Protocol):
    """Handle to the build currently executing on the agent."""

    @property
    def build_id(self) -> str: ...

    @property
    def build_logger(self) -> BuildProgressLogger: ...

    def get_build_features_of_type(self, feature_type: str) -> list[AgentBuildFeature]: ...

    def add_shared_environment_variable(self, key: str, value: str) -> None: ...


class AgentLifeCycleListener:
    """Base class for lifecycle listeners; every hook defaults to a no-op."""

    def build_started(self, build: AgentRunningBuild) -> None:
        return None

    def before_build_finish(self, build: AgentRunningBuild, status: BuildFinishedStatus) -> None:
        return None


class AgentEventDispatcher:
    """Fan lifecycle events out to registered listeners in order.

    A failing listener is logged and skipped so one plugin cannot stop the
    others or take the agent down.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._listeners: list[AgentLifeCycleListener] = []
        self._logger = logger or LOGGER

    @property
    def listeners(self) -> tuple[AgentLifeCycleListener, ...]:
        return tuple(self._listeners)

    def add_listener(self, listener: AgentLifeCycleListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: AgentLifeCycleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch_build_started(self, build: AgentRunningBuild) -> None:
        for listener in list(self._listeners):
            try:
                listener.build_started(build)
            except Exception:
                self._logger.exception(
                    "Listener %s failed in build_started for build %s",
                    type(listener).__name__,
                    build.build_id,
                )

    def dispatch_before_build_finish(
        self, build: AgentRunningBuild, status: BuildFinishedStatus
    ) -> None:
        for listener in list(self._listeners):
            try:
                listener.before_build_finish(build, status)
            except Exception:
                self._logger.exception(
                    "Listener %s failed in before_build_finish for build %s",
                    type(listener).__name__,
                    build.build_id,
                )


__all__ = [
    "AgentBuildFeature",
    "AgentEventDispatcher",
    "AgentLifeCycleListener",
    "AgentRunningBuild",
    "BuildFinishedStatus",
    "BuildProgressLogger",
]
