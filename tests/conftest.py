"""Shared test fixtures for revql tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from revql.schema.catalog import TypeCatalog
from revql.schema.loader import parse_document
from revql.schema.types import Match, StepKind
from revql.search.engine import search
from revql.search.options import SearchOptions

_BUILTIN_SCALARS = ("String", "ID", "Int", "Boolean")

# -- Introspection document builders ------------------------------------------


def named(name: str, kind: str = "OBJECT") -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def non_null(ref: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "NON_NULL", "name": None, "ofType": ref}


def list_of(ref: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "LIST", "name": None, "ofType": ref}


def scalar_ref(name: str = "String") -> dict[str, Any]:
    return named(name, "SCALAR")


def field(name: str, type_ref: dict[str, Any]) -> dict[str, Any]:
    return {"name": name, "description": None, "args": [], "type": type_ref, "isDeprecated": False}


def object_type(
    name: str,
    fields: list[dict[str, Any]],
    interfaces: tuple[str, ...] = (),
) -> dict[str, Any]:
    return {
        "kind": "OBJECT",
        "name": name,
        "description": None,
        "fields": fields,
        "interfaces": [named(i, "INTERFACE") for i in interfaces],
        "possibleTypes": None,
    }


def interface_type(
    name: str,
    fields: list[dict[str, Any]],
    possible: tuple[str, ...] = (),
) -> dict[str, Any]:
    return {
        "kind": "INTERFACE",
        "name": name,
        "fields": fields,
        "interfaces": [],
        "possibleTypes": [named(p) for p in possible],
    }


def union_type(name: str, possible: tuple[str, ...]) -> dict[str, Any]:
    return {
        "kind": "UNION",
        "name": name,
        "fields": None,
        "interfaces": None,
        "possibleTypes": [named(p) for p in possible],
    }


def scalar_type(name: str) -> dict[str, Any]:
    return {"kind": "SCALAR", "name": name, "fields": None, "interfaces": None, "possibleTypes": None}


def make_document(
    types: list[dict[str, Any]],
    query: str | None = "Query",
    mutation: str | None = None,
) -> dict[str, Any]:
    """Wrap type records into a full introspection response, adding builtin scalars."""
    declared = {t["name"] for t in types}
    all_types = types + [scalar_type(s) for s in _BUILTIN_SCALARS if s not in declared]
    return {
        "data": {
            "__schema": {
                "queryType": {"name": query} if query else None,
                "mutationType": {"name": mutation} if mutation else None,
                "subscriptionType": None,
                "types": all_types,
                "directives": [],
            }
        }
    }


def build_catalog(types: list[dict[str, Any]], **kwargs: Any) -> TypeCatalog:
    document = parse_document(json.dumps(make_document(types, **kwargs)))
    assert document.data is not None
    return TypeCatalog.from_schema(document.data.schema_)


def write_document(tmp_path: Path, document: dict[str, Any], name: str = "schema.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(document))
    return path


def run_search(catalog: TypeCatalog, term: str, **flags: Any) -> list[Match]:
    return search(catalog, SearchOptions.from_flags(term, **flags))


def paths(matches: list[Match]) -> list[list[str]]:
    return [list(m.step_names) for m in matches]


def replay(catalog: TypeCatalog, match: Match) -> None:
    """Follow a match's path through the catalog and check it lands on the terminal."""
    current = catalog.resolve(match.root)
    assert current is not None
    last_field = None
    for step in match.path:
        assert step.owner == current.name
        if step.kind is StepKind.POSSIBLE_TYPE:
            assert step.name in current.possible_types
            last_field = None
            current = catalog.resolve(step.name)
        else:
            last_field = current.field(step.name)
            assert last_field is not None
            assert last_field.type == step.type
            current = catalog.underlying(step.type)
        assert current is not None
    if match.terminal_kind.value == "field":
        assert match.terminal == last_field
    else:
        assert match.terminal == current


# -- Schema fixtures ----------------------------------------------------------


def self_ref_types() -> list[dict[str, Any]]:
    """Query.user: User, with User.friend: User."""
    return [
        object_type("Query", [field("user", named("User"))]),
        object_type(
            "User",
            [field("name", scalar_ref()), field("friend", named("User"))],
        ),
    ]


def union_types() -> list[dict[str, Any]]:
    """Query.search: SearchResult = Post | Comment, with Comment.author: User."""
    return [
        object_type("Query", [field("search", list_of(named("SearchResult", "UNION")))]),
        union_type("SearchResult", ("Post", "Comment")),
        object_type("Post", [field("title", scalar_ref())]),
        object_type(
            "Comment",
            [field("body", scalar_ref()), field("author", non_null(named("User")))],
        ),
        object_type("User", [field("name", scalar_ref())]),
    ]


def relay_types() -> list[dict[str, Any]]:
    """Query.usersConnection: UserConnection -> edges: [UserEdge] -> node: User."""
    return [
        object_type("Query", [field("usersConnection", named("UserConnection"))]),
        object_type(
            "UserConnection",
            [
                field("edges", list_of(named("UserEdge"))),
                field("pageInfo", non_null(named("PageInfo"))),
            ],
        ),
        object_type(
            "UserEdge",
            [field("cursor", non_null(scalar_ref())), field("node", named("User"))],
        ),
        object_type(
            "PageInfo",
            [
                field("hasNextPage", non_null(scalar_ref("Boolean"))),
                field("hasPreviousPage", non_null(scalar_ref("Boolean"))),
            ],
        ),
        object_type("User", [field("name", scalar_ref())]),
    ]


@pytest.fixture
def self_ref_catalog() -> TypeCatalog:
    return build_catalog(self_ref_types())


@pytest.fixture
def union_catalog() -> TypeCatalog:
    return build_catalog(union_types())


@pytest.fixture
def relay_catalog() -> TypeCatalog:
    return build_catalog(relay_types())
