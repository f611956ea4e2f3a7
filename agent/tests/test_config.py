from __future__ import annotations

import pytest

from sauce_agent.config import AgentSettings, load_settings


def test_defaults() -> None:
    settings = AgentSettings(_env_file=None)
    assert settings.feature_type == "sauce"
    assert settings.default_tunnel_port == 4445
    assert settings.render_missing_as_null is False
    assert settings.api_base_url() == "https://api.us-west-1.saucelabs.com/"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SAUCE_AGENT_DATA_CENTER", "EU_CENTRAL")
    monkeypatch.setenv("SAUCE_AGENT_RENDER_MISSING_AS_NULL", "true")
    load_settings.cache_clear()
    try:
        settings = load_settings()
        assert settings.api_base_url() == "https://api.eu-central-1.saucelabs.com/"
        assert settings.render_missing_as_null is True
    finally:
        load_settings.cache_clear()


def test_other_data_center_requires_url() -> None:
    with pytest.raises(ValueError):
        AgentSettings(_env_file=None, data_center="OTHER")
    settings = AgentSettings(_env_file=None, data_center="OTHER", alternate_api_url="https://sauce.internal/api")
    assert settings.api_base_url() == "https://sauce.internal/api/"


def test_tunnel_port_range_is_validated() -> None:
    with pytest.raises(ValueError):
        AgentSettings(_env_file=None, default_tunnel_port=0)


def test_catalog_retry_window_is_validated() -> None:
    assert AgentSettings(_env_file=None).catalog_retry_seconds == 300.0
    with pytest.raises(ValueError):
        AgentSettings(_env_file=None, catalog_retry_seconds=-1)
