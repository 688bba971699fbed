"""CLI entry point for the brewery and weather search."""

import argparse
import logging

import yaml
from pydantic import ValidationError

from brewcast.config.loader import apply_overrides, load_config
from brewcast.errors import BrewcastError
from brewcast.pipeline.search_pipeline import SearchPipeline

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="brewcast",
        description="Find breweries and the 5-day forecast for a US city",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--locale", default=None, help="Date locale, e.g. en-us")
    parser.add_argument("--output", default=None, help="Results page path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    # Prompts share the terminal, so only warnings are logged by default.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        config = apply_overrides(config, locale=args.locale, results_page=args.output)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Config error: {e}")
        return 1

    try:
        path = SearchPipeline(config).run()
    except BrewcastError as e:
        logger.debug("Search aborted", exc_info=True)
        print(f"Error: {e}")
        return 1
    return 0 if path is not None else 1
