"""Slug helpers for upstream query parameters and map links."""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str, separator: str = "_") -> str:
    """Lowercase ASCII slug with runs of spaces/punctuation collapsed.

    >>> slugify("Winston-Salem")
    'winston_salem'
    >>> slugify("Ardent Craft Ales", "+")
    'ardent+craft+ales'
    """
    ascii_text = (
        unicodedata.normalize("NFKD", text or "")
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    slug = _NON_ALNUM.sub(separator, ascii_text.lower())
    return slug.strip(separator)
