"""Daily forecast model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastDay:
    day: int  # epoch seconds, UTC
    temp: float  # daily max, imperial
    wind_speed: float
    humidity: int
    icon: str
