"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from brewcast.config.schema import AppConfig
from brewcast.reporting.templates import ResultsTemplates, load_templates

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def default_config(tmp_path: Path) -> AppConfig:
    """Default AppConfig writing all output under tmp_path."""
    return AppConfig(
        weather={"api_key": "test-key"},
        output={
            "results_page": str(tmp_path / "resultsPage.html"),
            "debug_dir": str(tmp_path / "debug"),
        },
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "breweries": {"timeout_seconds": 5.0},
        "output": {"locale": "en-us", "forecast_days": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def templates() -> ResultsTemplates:
    return load_templates()


@pytest.fixture
def geography_payload() -> list[dict]:
    with open(FIXTURE_DIR / "geography_va.json") as f:
        return json.load(f)


@pytest.fixture
def brewery_payload() -> list[dict]:
    with open(FIXTURE_DIR / "breweries_richmond.json") as f:
        return json.load(f)


@pytest.fixture
def onecall_payload() -> dict:
    with open(FIXTURE_DIR / "onecall_richmond.json") as f:
        return json.load(f)
