"""State directory lookups over the static USPS code table."""

from brewcast.config.defaults import STATE_CODES
from brewcast.errors import NotFoundError
from brewcast.models.location import StateEntry


def resolve_state_code(state: str) -> str:
    """Resolve a state code or full state name to its 2-letter code.

    Case and surrounding whitespace are ignored. Raises NotFoundError
    when nothing matches.
    """
    location = (state or "").upper().strip()
    if location in STATE_CODES:
        return location

    for code, name in STATE_CODES.items():
        if name.upper() == location:
            return code
    raise NotFoundError(f"State code not found for {state!r}")


def state_name(code: str) -> str:
    """Full state name for a 2-letter code."""
    try:
        return STATE_CODES[code.upper().strip()]
    except KeyError:
        raise NotFoundError(f"Unknown state code {code!r}") from None


def state_entries() -> list[StateEntry]:
    return sorted(
        (StateEntry(name=name, code=code) for code, name in STATE_CODES.items()),
        key=lambda e: e.name,
    )


def state_names() -> list[str]:
    return [e.name for e in state_entries()]
