"""OpenWeather One Call client for daily forecasts."""

import logging
from pathlib import Path

import httpx

from brewcast.config.defaults import WEATHER_BASE_URL
from brewcast.errors import DataFormatError, WeatherLookupError
from brewcast.models.forecast import ForecastDay
from brewcast.storage.files import save_debug_dump

logger = logging.getLogger(__name__)

DUMP_FILENAME = "weather.json"


class WeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHER_BASE_URL,
        timeout: float = 15.0,
        debug_dir: str | Path | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.debug_dir = Path(debug_dir) if debug_dir is not None else None

    def fetch_forecast(self, lat: float, lon: float) -> list[ForecastDay]:
        """Fetch the daily forecast at a coordinate, oldest day first.

        Imperial units; minutely and alert blocks are excluded.
        """
        if not self.api_key:
            raise WeatherLookupError("Weather API key is not configured")

        url = f"{self.base_url}/onecall"
        params = {
            "lat": lat,
            "lon": lon,
            "exclude": "minutely,alerts",
            "units": "imperial",
            "appid": self.api_key,
        }
        logger.info("Fetching forecast for %.4f, %.4f", lat, lon)
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            # The request URL carries the key; report only the status.
            status = e.response.status_code
            logger.error("Weather API returned %d for %.4f, %.4f", status, lat, lon)
            raise WeatherLookupError(
                f"Forecast lookup failed with HTTP {status}", status
            ) from e
        except httpx.HTTPError as e:
            detail = self._redact(e)
            logger.error("Weather API request failed: %s", detail)
            raise WeatherLookupError(f"Forecast lookup failed: {detail}") from e
        except ValueError as e:
            raise WeatherLookupError(f"Forecast lookup returned invalid JSON: {e}") from e

        if self.debug_dir is not None:
            save_debug_dump(data, self.debug_dir / DUMP_FILENAME)

        try:
            return daily_forecast(data)
        except DataFormatError as e:
            raise WeatherLookupError(f"Forecast payload malformed: {e}") from e

    def _redact(self, exc: Exception) -> str:
        """Exception type and message, message dropped if it holds the key."""
        message = str(exc)
        if not message or self.api_key in message:
            return type(exc).__name__
        return f"{type(exc).__name__}: {message}"


def daily_forecast(payload: dict) -> list[ForecastDay]:
    """Normalise the ``daily`` block of a One Call payload."""
    if not isinstance(payload, dict) or not isinstance(payload.get("daily"), list):
        raise DataFormatError("payload has no daily forecast")

    days: list[ForecastDay] = []
    for raw in payload["daily"]:
        try:
            conditions = raw.get("weather") or [{}]
            days.append(
                ForecastDay(
                    day=int(raw["dt"]),
                    temp=float(raw["temp"]["max"]),
                    wind_speed=float(raw["wind_speed"]),
                    humidity=int(raw["humidity"]),
                    icon=str(conditions[0].get("icon") or ""),
                )
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DataFormatError(f"daily entry {raw!r} is malformed") from e

    days.sort(key=lambda d: d.day)
    return days
