"""Opendatasoft client resolving the towns and cities of a US state."""

import logging
from pathlib import Path

import httpx

from brewcast.config.defaults import GEOGRAPHY_BASE_URL
from brewcast.errors import DataFormatError, GeographyLookupError
from brewcast.ingest.state_codes import resolve_state_code
from brewcast.models.location import CityRecord
from brewcast.storage.files import save_debug_dump

logger = logging.getLogger(__name__)

SELECT_FIELDS = (
    "include(name), include(state), include(longitude), "
    "include(latitude), include(county)"
)
DUMP_FILENAME = "towns_and_cities.json"


class GeographyClient:
    def __init__(
        self,
        base_url: str = GEOGRAPHY_BASE_URL,
        timeout: float = 30.0,
        debug_dir: str | Path | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.debug_dir = Path(debug_dir) if debug_dir is not None else None

    def resolve_cities(self, state: str) -> dict[str, CityRecord]:
        """Fetch every town/city in a state, keyed by name.

        Raises NotFoundError for an unknown state, DataFormatError when a
        record lacks a name or coordinates, and GeographyLookupError for
        transport or decoding failures.
        """
        code = resolve_state_code(state)
        url = f"{self.base_url}/exports/json"
        params = {
            "select": SELECT_FIELDS,
            "order_by": "name asc",
            "limit": -1,
            "refine": f"state:{code}",
            "pretty": "false",
            "timezone": "UTC",
        }
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Geography API error for state=%s: %s", code, e)
            raise GeographyLookupError(
                f"City lookup for {code} failed: {e}", e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            logger.error("Geography API request failed for state=%s: %s", code, e)
            raise GeographyLookupError(f"City lookup for {code} failed: {e}") from e
        except ValueError as e:
            raise GeographyLookupError(
                f"City lookup for {code} returned invalid JSON: {e}"
            ) from e

        if self.debug_dir is not None:
            save_debug_dump(data, self.debug_dir / DUMP_FILENAME)

        if not isinstance(data, list):
            raise GeographyLookupError(
                f"City lookup for {code} returned {type(data).__name__}, expected a list"
            )
        return compile_city_map(data)


def compile_city_map(records: list[dict]) -> dict[str, CityRecord]:
    """Restructure flat dataset records into a name -> CityRecord mapping.

    Duplicate names collide; the last record wins.
    """
    cities: dict[str, CityRecord] = {}
    for index, raw in enumerate(records):
        name = str(raw.get("name") or "").strip() if isinstance(raw, dict) else ""
        if not name:
            raise DataFormatError(f"City record {index} has no name")
        try:
            latitude = float(raw["latitude"])
            longitude = float(raw["longitude"])
        except (KeyError, TypeError, ValueError) as e:
            raise DataFormatError(
                f"City record {name!r} has invalid coordinates"
            ) from e
        cities[name] = CityRecord(
            name=name,
            latitude=latitude,
            longitude=longitude,
            county=str(raw.get("county") or ""),
        )
    return cities


def city_names(cities: dict[str, CityRecord]) -> list[str]:
    return sorted(cities, key=str.casefold)
