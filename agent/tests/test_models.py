from __future__ import annotations

import pytest

from sauce_agent import constants
from sauce_agent.models import Browser, FeatureConfig, browser_key


def test_feature_config_reads_known_keys() -> None:
    feature = FeatureConfig.from_parameters(
        {
            constants.SAUCE_USER_ID_KEY: "u1",
            constants.SAUCE_PLUGIN_ACCESS_KEY: "k1",
            constants.SAUCE_CONNECT_OPTIONS: "-v",
            constants.SAUCE_HTTPS_PROTOCOL: "TLSv1.2",
            constants.SELENIUM_HOST_KEY: "localhost",
            constants.SELENIUM_PORT_KEY: "4446",
            constants.SELENIUM_STARTING_URL_KEY: "https://example.com",
            constants.SELENIUM_MAX_DURATION_KEY: "300",
            constants.SELENIUM_IDLE_TIMEOUT_KEY: "60",
            "unrelated.key": "ignored",
        }
    )
    assert feature.username == "u1"
    assert feature.access_key == "k1"
    assert feature.sauce_connect_options == "-v"
    assert feature.https_protocol == "TLSv1.2"
    assert feature.selenium_host == "localhost"
    assert feature.starting_url == "https://example.com"
    assert feature.parameters["unrelated.key"] == "ignored"
    assert feature.selected_browser is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        ("", None),
        ("Windows10chrome70", "Windows10chrome70"),
        (" Windows10chrome70\n", "Windows10chrome70"),
        ("Windows10chrome70,Linuxfirefox45", None),
        ("Windows10chrome70\nLinuxfirefox45", None),
    ],
)
def test_only_a_single_browser_selection_is_honoured(raw: str | None, expected: str | None) -> None:
    parameters = {} if raw is None else {constants.SELENIUM_SELECTED_BROWSER: raw}
    assert FeatureConfig.from_parameters(parameters).selected_browser == expected


@pytest.mark.parametrize(
    "value,enabled",
    [(None, False), ("true", True), ("TRUE", False), ("True", False), ("1", False), ("false", False)],
)
def test_tunnel_flag_requires_exact_true(value: str | None, enabled: bool) -> None:
    assert FeatureConfig(sauce_connect=value).tunnel_enabled is enabled


@pytest.mark.parametrize("value,port", [(None, 4445), ("4446", 4446), ("80", 80)])
def test_sauce_connect_port(value: str | None, port: int) -> None:
    assert FeatureConfig(selenium_port=value).sauce_connect_port() == port


@pytest.mark.parametrize("value", ["", "abc", "44.5", "4_445"])
def test_sauce_connect_port_rejects_non_numeric(value: str) -> None:
    with pytest.raises(ValueError):
        FeatureConfig(selenium_port=value).sauce_connect_port()


def test_feature_config_is_immutable() -> None:
    feature = FeatureConfig(username="u1")
    with pytest.raises(ValueError):
        feature.username = "u2"  # type: ignore[misc]


def test_browser_from_platform_entry() -> None:
    browser = Browser.from_platform(
        {
            "api_name": "chrome",
            "long_name": "Google Chrome",
            "short_version": "70",
            "os": "Windows 10",
            "automation_backend": "webdriver",
        }
    )
    assert browser.key == "Windows10chrome70"
    assert browser.browser_name == "chrome"
    assert browser.version == "70"
    assert browser.os == "Windows 10"
    assert browser.long_name == "Google Chrome"


def test_browser_key_strips_punctuation() -> None:
    assert browser_key("OS X 10.14", "safari", "12.0") == "OSX1014safari120"
