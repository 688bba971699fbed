"""State and city location models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StateEntry:
    name: str
    code: str  # 2-letter USPS code


@dataclass(frozen=True)
class CityRecord:
    name: str
    latitude: float
    longitude: float
    county: str
