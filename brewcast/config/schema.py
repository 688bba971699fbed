"""Pydantic v2 configuration schema with strict validation."""

from babel.core import UnknownLocaleError
from pydantic import BaseModel, Field, field_validator

from brewcast.config.defaults import (
    API_KEY_ENV,
    BREWERY_BASE_URL,
    GEOGRAPHY_BASE_URL,
    WEATHER_BASE_URL,
)
from brewcast.reporting.formatters import parse_locale


class GeographyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = GEOGRAPHY_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class BreweryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = BREWERY_BASE_URL
    timeout_seconds: float = Field(default=15.0, gt=0.0)


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = WEATHER_BASE_URL
    timeout_seconds: float = Field(default=15.0, gt=0.0)
    api_key_env: str = API_KEY_ENV
    api_key: str = ""


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    results_page: str = "resultsPage.html"
    template_dir: str | None = None
    locale: str = "en-us"
    forecast_days: int = Field(default=5, ge=1, le=8)
    debug_dumps: bool = True
    debug_dir: str = "data/debug"

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        try:
            parse_locale(value)
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"unknown locale {value!r}") from e
        return value


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geography: GeographyConfig = GeographyConfig()
    breweries: BreweryConfig = BreweryConfig()
    weather: WeatherConfig = WeatherConfig()
    output: OutputConfig = OutputConfig()
