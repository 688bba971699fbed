"""Tests for card value formatters."""

from datetime import datetime

import pytest
from babel import Locale

from brewcast.models.brewery import BreweryRecord
from brewcast.reporting.formatters import (
    color_class,
    fill_template,
    format_address,
    icon_link,
    long_date_pattern,
    map_link,
    readable_date,
    round_half_up,
    website_href,
    website_label,
)


def _brewery(**kwargs) -> BreweryRecord:
    fields = {"name": "Ardent Craft Ales", "city": "Richmond", "state": "Virginia"}
    fields.update(kwargs)
    return BreweryRecord(**fields)


class TestFormatAddress:
    def test_street_city_state_postal(self):
        brewery = _brewery(street="123 Main St", postal_code="23220")
        assert format_address(brewery) == "123 Main St, Richmond, Virginia 23220"

    def test_secondary_and_tertiary_lines(self):
        brewery = _brewery(
            street="1 Main St", address_2="Suite 4", address_3="Rear", postal_code="1"
        )
        assert format_address(brewery) == "1 Main St, Suite 4, Rear, Richmond, Virginia 1"

    def test_no_street(self):
        assert format_address(_brewery(postal_code="23220")) == "Richmond, Virginia 23220"

    def test_no_postal_code(self):
        assert format_address(_brewery(street="1 Main St")) == "1 Main St, Richmond, Virginia"

    def test_everything_missing(self):
        assert format_address(BreweryRecord(name="X")) == ""


class TestLinks:
    def test_map_link(self):
        assert map_link(_brewery()) == (
            "http://maps.google.com/maps?q=ardent+craft+ales+richmond+virginia"
        )

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("http://www.ardentcraftales.com", "www.ardentcraftales.com"),
            ("https://theveilbrewing.com/", "theveilbrewing.com/"),
            ("  HTTPS://Example.com ", "Example.com"),
            ("example.com", "example.com"),
            ("", ""),
        ],
    )
    def test_website_label(self, url: str, expected: str):
        assert website_label(url) == expected

    def test_website_href_adds_scheme(self):
        assert website_href("example.com") == "http://example.com"
        assert website_href("https://example.com") == "https://example.com"
        assert website_href("") == ""

    def test_icon_link(self):
        assert icon_link("01d") == "http://openweathermap.org/img/w/01d.png"


class TestNumbers:
    @pytest.mark.parametrize(
        "value,expected", [(71.4, 71), (5.6, 6), (2.5, 3), (3.5, 4), (-0.4, 0), (0.0, 0)]
    )
    def test_round_half_up(self, value: float, expected: int):
        assert round_half_up(value) == expected

    def test_color_class_alternates(self):
        assert [color_class(i) for i in range(4)] == ["dark", "light", "dark", "light"]


class TestReadableDate:
    def test_epoch_en_us(self):
        assert readable_date(1700000000, "en-us") == "Tuesday, November 14"

    def test_datetime(self):
        assert readable_date(datetime(2024, 7, 4, 12), "en_US") == "Thursday, July 4"

    def test_other_locale(self):
        assert readable_date(1700000000, "de-de") == "Dienstag, 14. November"

    def test_quoted_literals_kept(self):
        out = readable_date(1700000000, "pt-br")
        assert "novembro" in out
        assert "'" not in out

    def test_pattern_spells_out_names(self):
        assert long_date_pattern(Locale.parse("en_US")) == "EEEE, MMMM d"


class TestFillTemplate:
    def test_replaces_every_occurrence(self):
        out = fill_template("{%A%}-{%B%}-{%A%}", {"A": "x", "B": 2})
        assert out == "x-2-x"

    def test_unknown_tokens_left_alone(self):
        assert fill_template("{%A%}{%C%}", {"A": "x"}) == "x{%C%}"

    def test_substituted_tokens_not_expanded(self):
        out = fill_template("{%A%}|{%B%}", {"A": "{%B%}", "B": "x"})
        assert out == "{%B%}|x"
