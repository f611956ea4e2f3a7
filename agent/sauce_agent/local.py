"""In-process build host used by the command line and by tests."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .constants import FEATURE_TYPE
from .host import AgentBuildFeature

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class LocalBuildFeature:
    """Build feature backed by a plain parameter mapping."""

    parameters: Mapping[str, str]
    type: str = FEATURE_TYPE


@dataclass(slots=True)
class RecordingBuildLogger:
    """Build log that keeps ``(level, text)`` pairs in memory."""

    lines: list[tuple[str, str]] = field(default_factory=list)

    def message(self, text: str) -> None:
        self.lines.append(("message", text))

    def warning(self, text: str) -> None:
        self.lines.append(("warning", text))

    def error(self, text: str) -> None:
        self.lines.append(("error", text))


class LocalBuild:
    """Running build whose shared environment is a dictionary."""

    def __init__(
        self,
        features: Iterable[AgentBuildFeature] = (),
        *,
        build_id: str | None = None,
        build_logger: RecordingBuildLogger | None = None,
    ) -> None:
        self._features = list(features)
        self._build_id = build_id or uuid.uuid4().hex[:12]
        self._build_logger = build_logger or RecordingBuildLogger()
        self.environment: dict[str, str] = {}

    @classmethod
    def from_parameters(cls, *parameter_sets: Mapping[str, str], **kwargs) -> "LocalBuild":
        """Create a build carrying one ``sauce`` feature per parameter mapping."""

        return cls([LocalBuildFeature(dict(parameters)) for parameters in parameter_sets], **kwargs)

    @property
    def build_id(self) -> str:
        return self._build_id

    @property
    def build_logger(self) -> RecordingBuildLogger:
        return self._build_logger

    def get_build_features_of_type(self, feature_type: str) -> list[AgentBuildFeature]:
        return [feature for feature in self._features if feature.type == feature_type]

    def add_shared_environment_variable(self, key: str, value: str) -> None:
        if value is None:
            raise ValueError(f"Environment variable {key} must not be None")
        LOGGER.debug("Build %s: %s set", self._build_id, key)
        self.environment[key] = value


__all__ = ["LocalBuild", "LocalBuildFeature", "RecordingBuildLogger"]
