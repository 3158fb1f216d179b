"""Name matching for type and field candidates."""

from __future__ import annotations

from revql.schema.types import Scope
from revql.search.options import SearchOptions


class MatchPredicate:
    """Decides whether a type or field name satisfies the search.

    Matching is case-sensitive, as GraphQL names are.
    """

    def __init__(self, options: SearchOptions):
        self.term = options.term
        self.containing = options.containing
        self.scope = options.scope

    def matches(self, name: str, kind: Scope) -> bool:
        if kind is Scope.EITHER:
            raise ValueError("candidate kind must be Scope.TYPE or Scope.FIELD")
        if self.scope is not Scope.EITHER and self.scope is not kind:
            return False
        if self.containing:
            return self.term in name
        return name == self.term
