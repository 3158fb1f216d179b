"""Pydantic models for the GraphQL introspection result format (.json).

Only the parts of the introspection query result that reverse lookup needs
are modelled; everything else in the document (descriptions, arguments,
directives, deprecation flags) is ignored.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

NamedKind = Literal["SCALAR", "OBJECT", "INTERFACE", "UNION", "ENUM", "INPUT_OBJECT"]
TypeRefKind = Literal[
    "SCALAR", "OBJECT", "INTERFACE", "UNION", "ENUM", "INPUT_OBJECT", "LIST", "NON_NULL"
]


class TypeRefRecord(BaseModel):
    kind: TypeRefKind
    name: str | None = None  # None for LIST / NON_NULL wrappers
    of_type: TypeRefRecord | None = Field(default=None, alias="ofType")

    model_config = {"populate_by_name": True}


class FieldRecord(BaseModel):
    name: str
    type: TypeRefRecord


class RootTypeRecord(BaseModel):
    name: str


class TypeRecord(BaseModel):
    kind: NamedKind
    name: str
    fields: list[FieldRecord] | None = None
    interfaces: list[TypeRefRecord] | None = None
    possible_types: list[TypeRefRecord] | None = Field(default=None, alias="possibleTypes")

    model_config = {"populate_by_name": True}


class SchemaRecord(BaseModel):
    query_type: RootTypeRecord | None = Field(default=None, alias="queryType")
    mutation_type: RootTypeRecord | None = Field(default=None, alias="mutationType")
    types: list[TypeRecord]

    model_config = {"populate_by_name": True}


class IntrospectionData(BaseModel):
    schema_: SchemaRecord = Field(alias="__schema")

    model_config = {"populate_by_name": True}


class IntrospectionDocument(BaseModel):
    """Top-level ``{"data": {"__schema": ...}}`` response of an introspection query.

    ``data`` is null when the server answered with errors only.
    """

    data: IntrospectionData | None
