"""Open Brewery DB client."""

import logging
from pathlib import Path

import httpx

from brewcast.config.defaults import BREWERY_BASE_URL
from brewcast.errors import BreweryLookupError
from brewcast.ingest.slugs import slugify
from brewcast.models.brewery import BreweryRecord
from brewcast.storage.files import save_debug_dump

logger = logging.getLogger(__name__)

DUMP_FILENAME = "breweries.json"


class BreweryClient:
    def __init__(
        self,
        base_url: str = BREWERY_BASE_URL,
        timeout: float = 15.0,
        debug_dir: str | Path | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.debug_dir = Path(debug_dir) if debug_dir is not None else None

    def fetch_breweries(self, state: str, city: str) -> list[BreweryRecord]:
        """List the breweries in a city, sorted by name."""
        url = f"{self.base_url}/breweries"
        params = {
            "by_state": slugify(state),
            "by_city": slugify(city),
            "sort": "name:asc",
        }
        logger.info("Fetching breweries for %s, %s", city, state)
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Brewery API error for %s: %s", params, e)
            raise BreweryLookupError(
                f"Brewery lookup for {city}, {state} failed: {e}",
                e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Brewery API request failed for %s: %s", params, e)
            raise BreweryLookupError(
                f"Brewery lookup for {city}, {state} failed: {e}"
            ) from e
        except ValueError as e:
            raise BreweryLookupError(
                f"Brewery lookup for {city}, {state} returned invalid JSON: {e}"
            ) from e

        if self.debug_dir is not None:
            save_debug_dump(data, self.debug_dir / DUMP_FILENAME)

        if not isinstance(data, list):
            raise BreweryLookupError(
                f"Brewery lookup for {city}, {state} returned "
                f"{type(data).__name__}, expected a list"
            )
        breweries = []
        for index, raw in enumerate(data):
            if not isinstance(raw, dict):
                raise BreweryLookupError(
                    f"Brewery lookup for {city}, {state} returned malformed "
                    f"record {index}: {raw!r}"
                )
            breweries.append(BreweryRecord.from_api(raw))
        return breweries
