"""YAML config loader with environment-sourced secrets."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from brewcast.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from an optional YAML file.

    With no path every section takes its defaults. The weather API key is
    read from the environment (after loading ``.env``) unless the YAML
    sets one explicitly.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    config = AppConfig(**raw)
    if not config.weather.api_key:
        config = with_env_api_key(config)
    return config


def with_env_api_key(config: AppConfig) -> AppConfig:
    """Return a copy of config with the weather API key taken from the env."""
    load_dotenv()
    key = os.environ.get(config.weather.api_key_env, "").strip()
    weather = config.weather.model_copy(update={"api_key": key})
    return config.model_copy(update={"weather": weather})


def apply_overrides(
    config: AppConfig,
    locale: str | None = None,
    results_page: str | None = None,
) -> AppConfig:
    """Apply CLI overrides to the output section and re-validate."""
    data = config.output.model_dump()
    if locale:
        data["locale"] = locale
    if results_page:
        data["results_page"] = results_page
    output = config.output.model_validate(data)
    return config.model_copy(update={"output": output})
