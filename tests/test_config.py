import logging
from pathlib import Path

import pytest

from navigatex.config import (
    ObservabilityConfig,
    configure_logging,
    get_config,
    reset_config,
)
from navigatex.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults_point_to_bundled_data():
    config = get_config()

    assert config.graph.locations_path == Path(__file__).resolve().parents[1] / "data" / "locations.csv"
    assert config.graph.edges_path.name == "edges.csv"
    assert config.suggestions.limit == 3


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("NAVX_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("NAVX_GRAPH_EDGES_FILE", "roads.csv")
    monkeypatch.setenv("NAVX_SUGGEST_LIMIT", "5")
    monkeypatch.setenv("NAVX_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.edges_path == tmp_path / "roads.csv"
    assert config.suggestions.limit == 5
    assert config.observability.level == "DEBUG"


def test_config_is_cached():
    assert get_config() is get_config()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as exc_info:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert exc_info.value.setting_name == "NAVX_LOG_LEVEL"


def test_configure_logging_accepts_lowercase_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(ObservabilityConfig(level="info"))

    assert calls["level"] == logging.INFO
