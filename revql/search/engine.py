"""Reachability engine: which operations can reach a matching type or field.

Walks the schema depth-first from every root field of Query and Mutation,
following field return types and fanning out from unions/interfaces into
their possible types. Each recursive call gets its own path and visited
set (the types already on the active path); nothing is marked globally, so
the same type is reported once per independent path that reaches it.

A type already on the active path is a cycle re-entry: its fields are
still checked against the search, but the walk does not descend through
them and the type itself is not reported again.

The walk only descends into types from which a match is reachable at all
(computed once per engine), so schemas where everything links to
everything stay cheap to search when the matches are sparse.
"""

from __future__ import annotations

from collections.abc import Iterator

from revql.schema.catalog import TypeCatalog
from revql.schema.types import FieldDef, Match, PathStep, Scope, TypeDef
from revql.search.aggregate import aggregate
from revql.search.options import SearchOptions
from revql.search.predicate import MatchPredicate
from revql.search.relay import RelayClassifier

Path = tuple[PathStep, ...]


class ReachabilityEngine:
    """Search a catalog for every path to a type or field matching the options.

    Traversal order is deterministic: roots Query then Mutation, fields in
    declaration order, possible types in document order.
    """

    def __init__(
        self,
        catalog: TypeCatalog,
        options: SearchOptions,
        predicate: MatchPredicate | None = None,
        relay: RelayClassifier | None = None,
    ):
        self.catalog = catalog
        self.options = options
        self.predicate = predicate or MatchPredicate(options)
        self.relay = relay or RelayClassifier(catalog)
        self._productive = self._productive_types()

    def search(self) -> Iterator[Match]:
        """Yield matches in traversal order. Duplicates are left to the aggregator."""
        for root in self.catalog.roots():
            for root_field in root.fields:
                yield from self._search_operation(root, root_field)

    def _search_operation(self, root: TypeDef, root_field: FieldDef) -> Iterator[Match]:
        if self._pruned(root_field):
            return
        path: Path = (PathStep.for_field(root_field),)
        if not self._fits(path):
            return
        if self.predicate.matches(root_field.name, Scope.FIELD):
            yield self._match(root, root_field, path, root_field)
        yield from self._visit(root, root_field, path, frozenset())

    def _visit(
        self,
        root: TypeDef,
        operation: FieldDef,
        path: Path,
        visited: frozenset[str],
    ) -> Iterator[Match]:
        """Evaluate the type the last step of ``path`` lands on, then descend."""
        target = self.catalog.underlying(path[-1].type)
        if self._pruned(target):
            return

        reentry = target.name in visited
        if not reentry and self.predicate.matches(target.name, Scope.TYPE):
            yield self._match(root, operation, path, target)

        visited = visited | {target.name}

        for field_def in target.fields:
            if self._pruned(field_def):
                continue
            extended = path + (PathStep.for_field(field_def),)
            if not self._fits(extended):
                continue
            if self.predicate.matches(field_def.name, Scope.FIELD):
                yield self._match(root, operation, extended, field_def)
            if not reentry and self._leads_to_match(field_def.type.name):
                yield from self._visit(root, operation, extended, visited)

        if target.is_polymorphic and not reentry:
            for possible in self.catalog.possible_types(target):
                extended = path + (PathStep.for_possible_type(target.name, possible.name),)
                if self._fits(extended) and self._leads_to_match(possible.name):
                    yield from self._visit(root, operation, extended, visited)

    def _pruned(self, item: TypeDef | FieldDef) -> bool:
        return not self.options.show_relay and self.relay.is_relay_artifact(item)

    def _leads_to_match(self, type_name: str) -> bool:
        return type_name in self._productive

    def _productive_types(self) -> frozenset[str]:
        """Names of the types from which some match can be reached.

        Over-approximates the walk: cycle re-entry and max_depth are ignored,
        so descending only into these types never loses a match.
        """
        productive: set[str] = set()
        changed = True
        while changed:
            changed = False
            for type_def in self.catalog:
                if type_def.name in productive or self._pruned(type_def):
                    continue
                if self._is_productive(type_def, productive):
                    productive.add(type_def.name)
                    changed = True
        return frozenset(productive)

    def _is_productive(self, type_def: TypeDef, productive: set[str]) -> bool:
        if self.predicate.matches(type_def.name, Scope.TYPE):
            return True
        for field_def in type_def.fields:
            if self._pruned(field_def):
                continue
            if self.predicate.matches(field_def.name, Scope.FIELD):
                return True
            if field_def.type.name in productive:
                return True
        return any(name in productive for name in type_def.possible_types)

    def _fits(self, path: Path) -> bool:
        return self.options.max_depth is None or len(path) <= self.options.max_depth

    @staticmethod
    def _match(
        root: TypeDef,
        operation: FieldDef,
        path: Path,
        terminal: TypeDef | FieldDef,
    ) -> Match:
        return Match(
            root=root.name,
            operation=operation.name,
            path=path,
            terminal=terminal,
            terminal_kind=Scope.FIELD if isinstance(terminal, FieldDef) else Scope.TYPE,
        )


def search(catalog: TypeCatalog, options: SearchOptions) -> list[Match]:
    """Run a search and return its deduplicated matches (synchronous entry point)."""
    return aggregate(ReachabilityEngine(catalog, options).search())
