"""Search configuration passed from the command line to the engine."""

from __future__ import annotations

from dataclasses import dataclass

from revql.schema.types import Scope


@dataclass(frozen=True)
class SearchOptions:
    term: str
    containing: bool = False  # substring instead of exact match
    scope: Scope = Scope.EITHER
    show_relay: bool = False  # traverse Relay connection types instead of pruning them
    max_depth: int | None = None  # longest reported path, in steps

    @classmethod
    def from_flags(
        cls,
        term: str,
        containing: bool = False,
        type_only: bool = False,
        field_only: bool = False,
        show_relay: bool = False,
        max_depth: int | None = None,
    ) -> SearchOptions:
        """Build options from the ``-t``/``-f`` flag pair.

        Neither flag searches both type and field names.
        """
        if type_only and field_only:
            raise ValueError("type_only and field_only are mutually exclusive")
        scope = Scope.EITHER
        if type_only:
            scope = Scope.TYPE
        elif field_only:
            scope = Scope.FIELD
        return cls(
            term=term,
            containing=containing,
            scope=scope,
            show_relay=show_relay,
            max_depth=max_depth,
        )
