"""Search pipeline: state -> city -> breweries + forecast -> results page."""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path

from brewcast.config.schema import AppConfig
from brewcast.ingest.brewery_client import BreweryClient
from brewcast.ingest.geography_client import GeographyClient, city_names
from brewcast.ingest.state_codes import resolve_state_code, state_name, state_names
from brewcast.ingest.weather_client import WeatherClient
from brewcast.models.brewery import BreweryRecord
from brewcast.models.forecast import ForecastDay
from brewcast.models.location import CityRecord
from brewcast.prompt.selector import LocationPrompter
from brewcast.reporting.results_page import ResultsRenderer
from brewcast.reporting.templates import load_templates

logger = logging.getLogger(__name__)


class SearchPipeline:
    def __init__(
        self,
        config: AppConfig,
        prompter: LocationPrompter | None = None,
        geography: GeographyClient | None = None,
        breweries: BreweryClient | None = None,
        weather: WeatherClient | None = None,
        renderer: ResultsRenderer | None = None,
    ):
        self.config = config
        out = config.output
        debug_dir = out.debug_dir if out.debug_dumps else None

        self.prompter = prompter or LocationPrompter()
        self.geography = geography or GeographyClient(
            base_url=config.geography.base_url,
            timeout=config.geography.timeout_seconds,
            debug_dir=debug_dir,
        )
        self.breweries = breweries or BreweryClient(
            base_url=config.breweries.base_url,
            timeout=config.breweries.timeout_seconds,
            debug_dir=debug_dir,
        )
        self.weather = weather or WeatherClient(
            api_key=config.weather.api_key,
            base_url=config.weather.base_url,
            timeout=config.weather.timeout_seconds,
            debug_dir=debug_dir,
        )
        self.renderer = renderer or ResultsRenderer(
            load_templates(out.template_dir), out.results_page
        )

    def run(self) -> Path | None:
        """Run one interactive search. Returns the results page path.

        Any lookup or input error propagates and aborts the run.
        """
        state = self.prompter.choose("Select a state:", state_names())
        code = resolve_state_code(state)
        full_name = state_name(code)

        print(f"Gathering cities in {full_name}...")
        cities = self.geography.resolve_cities(code)
        print(f"{len(cities)} cities acquired!")

        city_name = self.prompter.choose("Select a city:", city_names(cities))
        city = cities[city_name]

        print(f"Gathering breweries and weather for {city.name}, {full_name}...")
        breweries, forecast = self.fetch_results(full_name, city)
        logger.info(
            "Found %d breweries and %d forecast days", len(breweries), len(forecast)
        )

        path = self.renderer.render(
            breweries,
            forecast,
            full_name,
            city.name,
            self.config.output.locale,
            limit=self.config.output.forecast_days,
        )
        if path is not None:
            print(f"Page generated: {path}")
        return path

    def fetch_results(
        self, state: str, city: CityRecord
    ) -> tuple[list[BreweryRecord], list[ForecastDay]]:
        """Fetch breweries and forecast concurrently; both must succeed.

        The first failure is re-raised right away and the other result,
        if any, is discarded.
        """
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="lookup")
        try:
            brewery_future = executor.submit(
                self.breweries.fetch_breweries, state, city.name
            )
            weather_future = executor.submit(
                self.weather.fetch_forecast, city.latitude, city.longitude
            )
            done, _ = wait(
                [brewery_future, weather_future], return_when=FIRST_EXCEPTION
            )
            for future in done:
                exc = future.exception()
                if exc is not None:
                    raise exc
            return brewery_future.result(), weather_future.result()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
