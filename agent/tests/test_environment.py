from __future__ import annotations

from sauce_agent.environment import feature_environment
from sauce_agent.models import Browser, FeatureConfig


def test_only_configured_values_are_exported() -> None:
    feature = FeatureConfig(username="u1", access_key="k1", max_duration="300")
    env = feature_environment(feature, "sauce-ondemand:?username=u1&access-key=k1")
    assert env == {
        "SAUCE_USER_NAME": "u1",
        "SAUCE_API_KEY": "k1",
        "SELENIUM_DRIVER": "sauce-ondemand:?username=u1&access-key=k1",
        "SELENIUM_MAX_DURATION": "300",
    }
    assert "SELENIUM_HOST" not in env
    assert "SELENIUM_BROWSER" not in env


def test_full_configuration_exports_every_variable() -> None:
    feature = FeatureConfig(
        username="u1",
        access_key="k1",
        selenium_host="ondemand.saucelabs.com",
        selenium_port="80",
        starting_url="https://example.com",
        max_duration="300",
        idle_timeout="60",
    )
    browser = Browser(key="Windows10chrome70", os="Windows 10", browser_name="chrome", version="70")
    env = feature_environment(feature, "uri", browser)
    assert list(env) == [
        "SAUCE_USER_NAME",
        "SAUCE_API_KEY",
        "SELENIUM_DRIVER",
        "SELENIUM_HOST",
        "SELENIUM_PORT",
        "SELENIUM_STARTING_URL",
        "SELENIUM_MAX_DURATION",
        "SELENIUM_IDLE_TIMEOUT",
        "SELENIUM_BROWSER",
        "SELENIUM_VERSION",
        "SELENIUM_PLATFORM",
    ]
    assert env["SELENIUM_BROWSER"] == "chrome"
    assert env["SELENIUM_VERSION"] == "70"
    assert env["SELENIUM_PLATFORM"] == "Windows 10"


def test_empty_strings_are_exported_as_given() -> None:
    env = feature_environment(FeatureConfig(selenium_host=""), None)
    assert env == {"SELENIUM_HOST": ""}
