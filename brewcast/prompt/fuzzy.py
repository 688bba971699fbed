"""Subsequence matching used by the autocomplete prompts."""

from collections.abc import Iterable


def is_subsequence(query: str, candidate: str) -> bool:
    """True if every char of query appears in candidate, in order."""
    remaining = iter(candidate.casefold())
    return all(ch in remaining for ch in query.casefold())


def filter_candidates(query: str | None, candidates: Iterable[str]) -> list[str]:
    """Candidates matching query as a subsequence, original order kept.

    An empty query matches everything.
    """
    if not query:
        return list(candidates)
    return [c for c in candidates if is_subsequence(query, c)]
