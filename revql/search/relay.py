"""Recognize Relay pagination artifacts (connections, edges, page info).

Classification is by naming convention only: schemas don't mark these
types explicitly, and their generic field names (``edges``, ``node``...)
recur across every connection type.
"""

from __future__ import annotations

from revql.schema.catalog import TypeCatalog
from revql.schema.types import FieldDef, TypeDef

NODE_INTERFACE = "Node"

_RELAY_TYPE_SUFFIXES = ("Edge", "Connection")
_RELAY_TYPE_NAMES = frozenset({"PageInfo"})
_RELAY_FIELD_NAMES = frozenset({"edges", "node", "pageInfo", "cursor"})


def is_relay_type_name(name: str) -> bool:
    return name in _RELAY_TYPE_NAMES or name.endswith(_RELAY_TYPE_SUFFIXES)


class RelayClassifier:
    def __init__(self, catalog: TypeCatalog):
        self._catalog = catalog

    def is_relay_artifact(self, item: TypeDef | FieldDef) -> bool:
        if isinstance(item, FieldDef):
            return self._is_relay_field(item)
        return is_relay_type_name(item.name)

    def _is_relay_field(self, field_def: FieldDef) -> bool:
        """A pagination field name declared on a connection/edge type or a Node."""
        if field_def.name not in _RELAY_FIELD_NAMES:
            return False
        owner = self._catalog.resolve(field_def.owner)
        if owner is None:
            return False
        return is_relay_type_name(owner.name) or NODE_INTERFACE in owner.interfaces
