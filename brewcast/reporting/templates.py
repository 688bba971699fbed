"""Results page templates, loaded once and passed to the renderer."""

from dataclasses import dataclass
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent / "templates"

PAGE_FILE = "results.html"
BREWERY_CARD_FILE = "breweryCard.html"
WEATHER_CARD_FILE = "weatherCard.html"


@dataclass(frozen=True)
class ResultsTemplates:
    page: str
    brewery_card: str
    weather_card: str


def load_templates(directory: str | Path | None = None) -> ResultsTemplates:
    """Read the three page templates from directory (package default)."""
    directory = Path(directory) if directory is not None else TEMPLATE_DIR
    return ResultsTemplates(
        page=(directory / PAGE_FILE).read_text(encoding="utf-8"),
        brewery_card=(directory / BREWERY_CARD_FILE).read_text(encoding="utf-8"),
        weather_card=(directory / WEATHER_CARD_FILE).read_text(encoding="utf-8"),
    )
