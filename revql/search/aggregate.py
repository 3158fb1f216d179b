"""Collect engine matches into the final, deduplicated result list."""

from __future__ import annotations

from collections.abc import Iterable

from revql.schema.types import Match


def aggregate(matches: Iterable[Match]) -> list[Match]:
    """Drop repeated (root field, terminal, path) matches, keeping first-seen order."""
    seen: set[tuple[object, ...]] = set()
    result: list[Match] = []
    for match in matches:
        if match.key in seen:
            continue
        seen.add(match.key)
        result.append(match)
    return result
