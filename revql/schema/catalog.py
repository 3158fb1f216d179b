"""Type catalog: the schema graph indexed by type name.

Built once from a parsed introspection document and never mutated
afterwards. Every type reference in the catalog is checked at build time,
so a search never starts on a truncated or inconsistent document.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from graphql.type.introspection import TypeKind

from revql.formats.introspection import SchemaRecord, TypeRecord, TypeRefRecord
from revql.schema.errors import InvalidDocumentShape, MissingQueryRoot, UnknownType
from revql.schema.types import WRAPPING_KINDS, FieldDef, TypeDef, TypeRef


class TypeCatalog:
    """Immutable index of the schema's types, plus its Query/Mutation roots."""

    def __init__(
        self,
        types: Iterable[TypeDef],
        query_type: str | None,
        mutation_type: str | None = None,
    ):
        self._types: dict[str, TypeDef] = {}
        for type_def in types:
            if type_def.name in self._types:
                raise InvalidDocumentShape(f"Type '{type_def.name}' is declared twice")
            self._types[type_def.name] = type_def

        if query_type is None:
            raise MissingQueryRoot("Schema has no queryType")
        query_root = self._types.get(query_type)
        if query_root is None:
            raise MissingQueryRoot(f"Query root type '{query_type}' is not declared")
        self.query_root: TypeDef = query_root

        self.mutation_root: TypeDef | None = None
        if mutation_type is not None:
            self.mutation_root = self._named(mutation_type, "mutationType")

        self._check_references()

    @classmethod
    def from_schema(cls, schema: SchemaRecord) -> TypeCatalog:
        """Build the catalog from the ``__schema`` object of a document."""
        return cls(
            (_to_type_def(record) for record in schema.types),
            query_type=schema.query_type.name if schema.query_type else None,
            mutation_type=schema.mutation_type.name if schema.mutation_type else None,
        )

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[TypeDef]:
        return iter(self._types.values())

    def roots(self) -> Iterator[TypeDef]:
        """Yield the query root, then the mutation root if the schema has one."""
        yield self.query_root
        if self.mutation_root is not None:
            yield self.mutation_root

    def resolve(self, name: str) -> TypeDef | None:
        return self._types.get(name)

    def underlying(self, ref: TypeRef) -> TypeDef:
        """Strip the wrapping modifiers of a reference and return its named type."""
        return self._named(ref.name, str(ref))

    def possible_types(self, type_def: TypeDef) -> list[TypeDef]:
        """Concrete object types of a union or interface, in document order."""
        return [self._named(name, type_def.name) for name in type_def.possible_types]

    def _named(self, name: str, referrer: str | None = None) -> TypeDef:
        type_def = self._types.get(name)
        if type_def is None:
            raise UnknownType(name, referrer)
        return type_def

    def _check_references(self) -> None:
        for type_def in self._types.values():
            for field_def in type_def.fields:
                self._named(field_def.type.name, field_def.qualified_name)
            for name in type_def.possible_types:
                self._named(name, f"{type_def.name} possible types")
            for name in type_def.interfaces:
                self._named(name, f"{type_def.name} interfaces")


def _to_type_def(record: TypeRecord) -> TypeDef:
    """Convert a raw type record into a TypeDef."""
    fields = tuple(
        FieldDef(
            owner=record.name,
            name=f.name,
            type=_to_type_ref(f.type, f"{record.name}.{f.name}"),
        )
        for f in record.fields or []
    )
    return TypeDef(
        name=record.name,
        kind=TypeKind[record.kind],
        fields=fields,
        possible_types=tuple(
            _to_type_ref(ref, f"{record.name} possible types").name
            for ref in record.possible_types or []
        ),
        interfaces=tuple(
            _to_type_ref(ref, f"{record.name} interfaces").name
            for ref in record.interfaces or []
        ),
    )


def _to_type_ref(record: TypeRefRecord, referrer: str) -> TypeRef:
    """Flatten a nested ``ofType`` chain into a named type plus modifiers."""
    modifiers: list[TypeKind] = []
    current = record
    while TypeKind[current.kind] in WRAPPING_KINDS:
        if current.of_type is None:
            raise InvalidDocumentShape(f"{referrer}: {current.kind} type reference has no ofType")
        modifiers.append(TypeKind[current.kind])
        current = current.of_type
    if current.name is None:
        raise InvalidDocumentShape(f"{referrer}: {current.kind} type reference has no name")
    return TypeRef(name=current.name, modifiers=tuple(modifiers))
