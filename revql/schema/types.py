"""Typed schema model shared by the catalog and the search engine.

Two layers of types:
1. Schema graph — TypeRef, FieldDef and TypeDef, built once by the catalog
2. Search results — PathStep and Match, produced by the reachability engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from graphql.type.introspection import TypeKind

WRAPPING_KINDS = frozenset({TypeKind.LIST, TypeKind.NON_NULL})
POLYMORPHIC_KINDS = frozenset({TypeKind.UNION, TypeKind.INTERFACE})


class Scope(Enum):
    """Which names a search evaluates."""

    TYPE = "type"
    FIELD = "field"
    EITHER = "either"


class StepKind(Enum):
    FIELD = "field"
    POSSIBLE_TYPE = "possible_type"  # union/interface fan-out into a concrete type


# -- Schema graph -------------------------------------------------------------


@dataclass(frozen=True)
class TypeRef:
    """A named type plus its wrapping modifiers, outermost first."""

    name: str
    modifiers: tuple[TypeKind, ...] = ()

    def __str__(self) -> str:
        rendered = self.name
        for modifier in reversed(self.modifiers):
            if modifier is TypeKind.LIST:
                rendered = f"[{rendered}]"
            else:
                rendered = f"{rendered}!"
        return rendered


@dataclass(frozen=True)
class FieldDef:
    owner: str  # name of the declaring OBJECT or INTERFACE type
    name: str
    type: TypeRef

    @property
    def qualified_name(self) -> str:
        return f"{self.owner}.{self.name}"


@dataclass(frozen=True)
class TypeDef:
    name: str
    kind: TypeKind
    fields: tuple[FieldDef, ...] = ()
    possible_types: tuple[str, ...] = ()  # resolved by name through the catalog
    interfaces: tuple[str, ...] = ()

    @property
    def is_polymorphic(self) -> bool:
        return self.kind in POLYMORPHIC_KINDS

    def field(self, name: str) -> FieldDef | None:
        for field_def in self.fields:
            if field_def.name == name:
                return field_def
        return None


# -- Search results -----------------------------------------------------------


@dataclass(frozen=True)
class PathStep:
    """One hop of a traversal path."""

    owner: str
    name: str
    type: TypeRef
    kind: StepKind = StepKind.FIELD

    @classmethod
    def for_field(cls, field_def: FieldDef) -> PathStep:
        return cls(owner=field_def.owner, name=field_def.name, type=field_def.type)

    @classmethod
    def for_possible_type(cls, owner: str, type_name: str) -> PathStep:
        return cls(
            owner=owner,
            name=type_name,
            type=TypeRef(type_name),
            kind=StepKind.POSSIBLE_TYPE,
        )


@dataclass(frozen=True)
class Match:
    """A path from a root operation field to a matching type or field."""

    root: str  # name of the root type (Query / Mutation)
    operation: str  # root field name
    path: tuple[PathStep, ...]
    terminal: TypeDef | FieldDef
    terminal_kind: Scope

    @property
    def step_names(self) -> tuple[str, ...]:
        return tuple(step.name for step in self.path)

    @property
    def terminal_name(self) -> str:
        if isinstance(self.terminal, FieldDef):
            return self.terminal.qualified_name
        return self.terminal.name

    @property
    def key(self) -> tuple[str, str, Scope, str, tuple[PathStep, ...]]:
        return (self.root, self.operation, self.terminal_kind, self.terminal_name, self.path)
