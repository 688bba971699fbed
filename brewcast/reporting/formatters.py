"""Value formatters for the brewery and weather cards."""

import html
import math
import re
from datetime import UTC, date, datetime

from babel import Locale
from babel.dates import format_datetime, match_skeleton

from brewcast.config.defaults import MAPS_URL, WEATHER_ICON_URL
from brewcast.ingest.slugs import slugify
from brewcast.models.brewery import BreweryRecord

LONG_DATE_SKELETON = "MMMMEEEEd"  # weekday, month name, day number
LONG_DATE_FALLBACK = "EEEE, MMMM d"

_TOKEN = re.compile(r"\{%(\w+)%\}")
_QUOTED = re.compile(r"('(?:[^']|'')*')")
_WIDEN = (
    (re.compile(r"(?<!E)E{1,3}(?!E)\.?"), "EEEE"),
    (re.compile(r"(?<!c)c{1,3}(?!c)\.?"), "cccc"),
    (re.compile(r"(?<!M)M{3}(?!M)\.?"), "MMMM"),
    (re.compile(r"(?<!L)L{3}(?!L)\.?"), "LLLL"),
)


def fill_template(template: str, values: dict[str, object]) -> str:
    """Replace every ``{%KEY%}`` token in template with its value.

    Single pass: tokens inside substituted values are left as text.
    Unknown tokens are kept.
    """
    return _TOKEN.sub(
        lambda m: str(values[m[1]]) if m[1] in values else m[0], template
    )


def escape(value: str) -> str:
    return html.escape(value or "", quote=True)


def color_class(index: int) -> str:
    return "dark" if index % 2 == 0 else "light"


def round_half_up(value: float) -> int:
    """Round like JavaScript's Math.round (x.5 goes up)."""
    return math.floor(value + 0.5)


def format_address(brewery: BreweryRecord) -> str:
    """One-line postal address with empty parts dropped.

    >>> format_address(BreweryRecord(name="x", street="123 Main St",
    ...     city="Richmond", state="Virginia", postal_code="23220"))
    '123 Main St, Richmond, Virginia 23220'
    """
    region = " ".join(p for p in (brewery.state, brewery.postal_code) if p)
    parts = (
        brewery.street,
        brewery.address_2,
        brewery.address_3,
        brewery.city,
        region,
    )
    return ", ".join(p for p in parts if p)


def map_link(brewery: BreweryRecord) -> str:
    """Google Maps search link, e.g. ``?q=ardent+craft+ales+richmond+virginia``."""
    terms = (slugify(p, "+") for p in (brewery.name, brewery.city, brewery.state))
    return f"{MAPS_URL}?q=" + "+".join(t for t in terms if t)


def website_label(url: str) -> str:
    """Display form of a website: trimmed, protocol removed."""
    label = (url or "").strip()
    for prefix in ("https://", "http://"):
        if label.lower().startswith(prefix):
            return label[len(prefix):]
    return label


def website_href(url: str) -> str:
    url = (url or "").strip()
    if not url or "://" in url:
        return url
    return f"http://{url}"


def icon_link(icon: str) -> str:
    return f"{WEATHER_ICON_URL}/{icon}.png"


def parse_locale(locale: str) -> Locale:
    """Accept both ``en-us`` and ``en_US`` spellings."""
    sep = "-" if "-" in locale else "_"
    return Locale.parse(locale, sep=sep)


def readable_date(moment: int | float | date | datetime, locale: str) -> str:
    """Locale-aware long date, e.g. ``Tuesday, November 14`` for en-us.

    Numbers are epoch seconds and are read in UTC.
    """
    if isinstance(moment, (int, float)):
        moment = datetime.fromtimestamp(moment, tz=UTC)
    elif not isinstance(moment, datetime):
        moment = datetime(moment.year, moment.month, moment.day)
    babel_locale = parse_locale(locale)
    return format_datetime(moment, long_date_pattern(babel_locale), locale=babel_locale)


def long_date_pattern(locale: Locale) -> str:
    """CLDR pattern for weekday + month + day with both names spelled out.

    Most locales only publish the abbreviated ``MMMEd`` skeleton, so the
    closest match is widened to full names. Quoted literals are untouched.
    """
    skeletons = locale.datetime_skeletons
    key = match_skeleton(LONG_DATE_SKELETON, skeletons)
    if key is None:
        return LONG_DATE_FALLBACK
    pattern = skeletons[key]
    pattern = getattr(pattern, "pattern", pattern)
    return "".join(
        part if part.startswith("'") else _widen(part)
        for part in _QUOTED.split(pattern)
    )


def _widen(fragment: str) -> str:
    for regex, replacement in _WIDEN:
        fragment = regex.sub(replacement, fragment)
    return fragment
