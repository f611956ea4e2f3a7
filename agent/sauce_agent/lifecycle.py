"""Build lifecycle listener wiring ``sauce`` build features into builds."""

from __future__ import annotations

import logging

from .browsers import BrowserFactory
from .config import AgentSettings, load_settings
from .driver_uri import driver_uri_for
from .environment import feature_environment
from .host import AgentEventDispatcher, AgentLifeCycleListener, AgentRunningBuild, BuildFinishedStatus
from .models import Browser, FeatureConfig, FeatureConfigurationError
from .tunnels import TunnelManager

LOGGER = logging.getLogger(__name__)


class SauceLifeCycleAdapter(AgentLifeCycleListener):
    """Export Sauce OnDemand settings to builds and manage their tunnels.

    On build start every ``sauce`` feature contributes its credentials, the
    driver URI and the selected browser to the build's shared environment and
    may request a Sauce Connect tunnel. Before the build finishes the tunnels
    opened for each feature's username are closed, whatever the outcome.

    The adapter keeps no per-build state; the build handle passed to each hook
    is the only source of features.
    """

    def __init__(
        self,
        dispatcher: AgentEventDispatcher,
        browser_factory: BrowserFactory,
        tunnel_manager: TunnelManager | None,
        *,
        settings: AgentSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._browser_factory = browser_factory
        self._tunnel_manager = tunnel_manager
        self._settings = settings or load_settings()
        self._logger = logger or LOGGER
        dispatcher.add_listener(self)

    def build_started(self, build: AgentRunningBuild) -> None:
        for feature in self._features(build):
            try:
                self.populate_environment(build, feature)
            except FeatureConfigurationError as exc:
                self._logger.warning("Skipping Sauce feature for build %s: %s", build.build_id, exc)
                self._report(build, f"Sauce build feature skipped: {exc}", error=True)
                continue
            if feature.tunnel_enabled:
                self.start_sauce_connect(build, feature)

    def before_build_finish(self, build: AgentRunningBuild, status: BuildFinishedStatus) -> None:
        if self._tunnel_manager is None:
            return
        for feature in self._features(build):
            try:
                self._tunnel_manager.close_tunnels_for_plan(feature.username)
            except Exception as exc:
                self._logger.warning(
                    "Failed to close Sauce Connect tunnels for %s after build %s (%s): %s",
                    feature.username,
                    build.build_id,
                    status.value,
                    exc,
                )

    def resolve_browser(self, feature: FeatureConfig) -> Browser | None:
        if feature.selected_browser is None:
            return None
        try:
            browser = self._browser_factory.resolve_browser(feature.selected_browser)
        except Exception as exc:
            self._logger.warning(
                "Browser lookup for %r failed; continuing without one: %s",
                feature.selected_browser,
                exc,
            )
            return None
        if browser is None:
            self._logger.info("Unknown Sauce browser key %r", feature.selected_browser)
        return browser

    def populate_environment(self, build: AgentRunningBuild, feature: FeatureConfig) -> dict[str, str]:
        """Share the feature's variables with the build and return them."""

        browser = self.resolve_browser(feature)
        driver_uri = driver_uri_for(
            feature, browser, render_missing_as_null=self._settings.render_missing_as_null
        )
        variables = feature_environment(feature, driver_uri, browser)
        for key, value in variables.items():
            build.add_shared_environment_variable(key, value)
        self._logger.debug(
            "Shared %s Sauce variables with build %s: %s",
            len(variables),
            build.build_id,
            ", ".join(variables),
        )
        return variables

    def start_sauce_connect(self, build: AgentRunningBuild, feature: FeatureConfig) -> bool:
        """Ask the tunnel manager for a tunnel; return whether it was opened."""

        try:
            port = feature.sauce_connect_port(self._settings.default_tunnel_port)
        except ValueError as exc:
            self._logger.error("Invalid Sauce Connect configuration for build %s: %s", build.build_id, exc)
            self._report(build, f"Sauce Connect was not started: {exc}", error=True)
            return False
        if self._tunnel_manager is None:
            self._logger.warning(
                "No tunnel manager configured; Sauce Connect not started for build %s",
                build.build_id,
            )
            self._report(build, "Sauce Connect is enabled but no tunnel manager is available on this agent")
            return False

        try:
            self._tunnel_manager.open_connection(
                feature.username,
                feature.access_key,
                port,
                feature.sauce_connect_options,
                feature.https_protocol,
            )
        except OSError as exc:
            self._logger.error(
                "Error launching Sauce Connect for build %s", build.build_id, exc_info=True
            )
            self._report(build, f"Error launching Sauce Connect: {exc}")
            return False
        self._logger.info("Sauce Connect requested for %s on port %s", feature.username, port)
        return True

    def _features(self, build: AgentRunningBuild) -> list[FeatureConfig]:
        features = build.get_build_features_of_type(self._settings.feature_type)
        return [FeatureConfig.from_parameters(feature.parameters) for feature in features]

    def _report(self, build: AgentRunningBuild, text: str, *, error: bool = False) -> None:
        if not self._settings.report_to_build_log:
            return
        if error:
            build.build_logger.error(text)
        else:
            build.build_logger.warning(text)


__all__ = ["SauceLifeCycleAdapter"]
