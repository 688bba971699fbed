"""File writers for the results page and raw upstream debug dumps."""

import json
import logging
from pathlib import Path
from typing import Any

from brewcast.errors import FileWriteError

logger = logging.getLogger(__name__)


def write_text(path: str | Path, text: str) -> Path:
    """Write text to path, creating parent directories. Returns the path."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Failed to write {path}: {e}") from e
    return path


def save_debug_dump(data: Any, path: str | Path) -> bool:
    """Best-effort dump of a raw upstream response as JSON.

    Never raises: a failure is logged and reported as False.
    """
    try:
        text = json.dumps(data)
        write_text(path, text)
    except (FileWriteError, TypeError, ValueError) as e:
        logger.warning("Debug dump to %s failed: %s", path, e)
        return False
    logger.debug("Saved debug dump to %s", path)
    return True
