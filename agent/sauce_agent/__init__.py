"""Sauce OnDemand build-agent plugin.

Shares Sauce credentials, the Selenium driver URI and browser metadata with
builds that carry a ``sauce`` build feature, and asks the tunnel manager to
open and close Sauce Connect tunnels around them.
"""

from __future__ import annotations

import logging

from .browsers import BrowserFactory, SauceBrowserFactory, StaticBrowserFactory
from .config import AgentSettings, load_settings
from .driver_uri import build_driver_uri
from .host import AgentEventDispatcher, AgentLifeCycleListener, BuildFinishedStatus
from .lifecycle import SauceLifeCycleAdapter
from .models import Browser, FeatureConfig, FeatureConfigurationError
from .tunnels import TunnelManager

__version__ = "0.1.0"

__all__ = [
    "AgentEventDispatcher",
    "AgentLifeCycleListener",
    "AgentSettings",
    "Browser",
    "BrowserFactory",
    "BuildFinishedStatus",
    "FeatureConfig",
    "FeatureConfigurationError",
    "SauceBrowserFactory",
    "SauceLifeCycleAdapter",
    "StaticBrowserFactory",
    "TunnelManager",
    "__version__",
    "build_driver_uri",
    "load_settings",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
