"""Results page builder: fills the card and page templates and saves HTML."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from brewcast.errors import FileWriteError
from brewcast.models.brewery import BreweryRecord
from brewcast.models.forecast import ForecastDay
from brewcast.reporting.formatters import (
    color_class,
    escape,
    fill_template,
    format_address,
    icon_link,
    map_link,
    readable_date,
    round_half_up,
    website_href,
    website_label,
)
from brewcast.reporting.templates import ResultsTemplates
from brewcast.storage.files import write_text

logger = logging.getLogger(__name__)

DEFAULT_FORECAST_DAYS = 5


class ResultsRenderer:
    def __init__(self, templates: ResultsTemplates, output_path: str | Path):
        self.templates = templates
        self.output_path = Path(output_path)

    def render(
        self,
        breweries: Sequence[BreweryRecord],
        forecast_days: Sequence[ForecastDay],
        state: str,
        city: str,
        locale: str,
        limit: int = DEFAULT_FORECAST_DAYS,
        now: datetime | None = None,
    ) -> Path | None:
        """Build the results page and write it to the output path.

        Returns the written path, or None if the file could not be saved.
        """
        page = self.build_page(breweries, forecast_days, state, city, locale, limit, now)
        try:
            path = write_text(self.output_path, page)
        except FileWriteError as e:
            logger.warning("Results page not saved: %s", e)
            return None
        logger.info("Results page written to %s", path)
        return path

    def build_page(
        self,
        breweries: Sequence[BreweryRecord],
        forecast_days: Sequence[ForecastDay],
        state: str,
        city: str,
        locale: str,
        limit: int = DEFAULT_FORECAST_DAYS,
        now: datetime | None = None,
    ) -> str:
        if now is None:
            now = datetime.now()
        return fill_template(
            self.templates.page,
            {
                "DATE": escape(readable_date(now, locale)),
                "CITY": escape(city),
                "STATE": escape(state),
                "WEATHER": self.build_weather_cards(forecast_days, locale, limit),
                "BREWERIES": self.build_brewery_cards(breweries),
            },
        )

    def build_brewery_cards(self, breweries: Sequence[BreweryRecord]) -> str:
        cards = []
        for index, brewery in enumerate(breweries):
            cards.append(
                fill_template(
                    self.templates.brewery_card,
                    {
                        "NAME": escape(brewery.name),
                        "ADDRESSLINK": escape(map_link(brewery)),
                        "ADDRESS": escape(format_address(brewery)),
                        "PHONENUMBER": escape(brewery.phone),
                        "WEBSITELINK": escape(website_label(brewery.website_url)),
                        "WEBSITEURL": escape(website_href(brewery.website_url)),
                        "COLOR": color_class(index),
                    },
                )
            )
        return "".join(cards)

    def build_weather_cards(
        self, forecast_days: Sequence[ForecastDay], locale: str, limit: int
    ) -> str:
        cards = []
        for index, day in enumerate(forecast_days[:limit]):
            cards.append(
                fill_template(
                    self.templates.weather_card,
                    {
                        "DATE": escape(readable_date(day.day, locale)),
                        "WEATHERICON": escape(icon_link(day.icon)),
                        "TEMPERATURE": round_half_up(day.temp),
                        "WIND": round_half_up(day.wind_speed),
                        "HUMIDITY": day.humidity,
                        "COLOR": color_class(index),
                    },
                )
            )
        return "".join(cards)
