"""Parameter keys and environment variable names shared with the build host.

The key strings are part of the contract with the server-side feature editor
and with the test code that reads the exported variables, so they must never
change.
"""

from __future__ import annotations

FEATURE_TYPE = "sauce"

# Build feature parameters
SAUCE_USER_ID_KEY = "saucePlugin.userId"
SAUCE_PLUGIN_ACCESS_KEY = "saucePlugin.accessKey"
SAUCE_CONNECT_KEY = "saucePlugin.sauceConnect"
SAUCE_CONNECT_OPTIONS = "saucePlugin.sauceConnectOptions"
SAUCE_HTTPS_PROTOCOL = "saucePlugin.httpsProtocol"
SELENIUM_HOST_KEY = "saucePlugin.seleniumHost"
SELENIUM_PORT_KEY = "saucePlugin.seleniumPort"
SELENIUM_STARTING_URL_KEY = "saucePlugin.startingUrl"
SELENIUM_MAX_DURATION_KEY = "saucePlugin.maxDuration"
SELENIUM_IDLE_TIMEOUT_KEY = "saucePlugin.idleTimeout"
SELENIUM_SELECTED_BROWSER = "saucePlugin.webDriverBrowsers"

# Shared environment variables
SAUCE_USER_NAME = "SAUCE_USER_NAME"
SAUCE_API_KEY = "SAUCE_API_KEY"
SELENIUM_DRIVER_ENV = "SELENIUM_DRIVER"
SELENIUM_HOST_ENV = "SELENIUM_HOST"
SELENIUM_PORT_ENV = "SELENIUM_PORT"
SELENIUM_STARTING_URL_ENV = "SELENIUM_STARTING_URL"
SELENIUM_MAX_DURATION_ENV = "SELENIUM_MAX_DURATION"
SELENIUM_IDLE_TIMEOUT_ENV = "SELENIUM_IDLE_TIMEOUT"
SELENIUM_BROWSER_ENV = "SELENIUM_BROWSER"
SELENIUM_VERSION_ENV = "SELENIUM_VERSION"
SELENIUM_PLATFORM_ENV = "SELENIUM_PLATFORM"

DEFAULT_SAUCE_CONNECT_PORT = 4445
DRIVER_URI_SCHEME = "sauce-ondemand:"
TUNNEL_ENABLED_VALUE = "true"


__all__ = [
    "DEFAULT_SAUCE_CONNECT_PORT",
    "DRIVER_URI_SCHEME",
    "FEATURE_TYPE",
    "SAUCE_API_KEY",
    "SAUCE_CONNECT_KEY",
    "SAUCE_CONNECT_OPTIONS",
    "SAUCE_HTTPS_PROTOCOL",
    "SAUCE_PLUGIN_ACCESS_KEY",
    "SAUCE_USER_ID_KEY",
    "SAUCE_USER_NAME",
    "SELENIUM_BROWSER_ENV",
    "SELENIUM_DRIVER_ENV",
    "SELENIUM_HOST_ENV",
    "SELENIUM_HOST_KEY",
    "SELENIUM_IDLE_TIMEOUT_ENV",
    "SELENIUM_IDLE_TIMEOUT_KEY",
    "SELENIUM_MAX_DURATION_ENV",
    "SELENIUM_MAX_DURATION_KEY",
    "SELENIUM_PLATFORM_ENV",
    "SELENIUM_PORT_ENV",
    "SELENIUM_PORT_KEY",
    "SELENIUM_SELECTED_BROWSER",
    "SELENIUM_STARTING_URL_ENV",
    "SELENIUM_STARTING_URL_KEY",
    "SELENIUM_VERSION_ENV",
    "TUNNEL_ENABLED_VALUE",
]
