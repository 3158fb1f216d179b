"""Load introspection documents (.json files) into pydantic models."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from revql.formats.introspection import IntrospectionDocument
from revql.schema.errors import InvalidDocumentShape

_MAX_REPORTED_ERRORS = 5


def load_document(path: str | Path) -> IntrospectionDocument:
    """Load an introspection document from a .json file on disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidDocumentShape(f"{path} is not UTF-8 text: {e}") from e
    return parse_document(text)


def parse_document(text: str) -> IntrospectionDocument:
    """Parse introspection JSON text.

    Accepts both the full response (``{"data": {"__schema": ...}}``) and the
    bare ``{"__schema": ...}`` object that some tools save.
    """
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDocumentShape(f"Invalid JSON: {e}") from e

    if isinstance(raw, dict) and "__schema" in raw:
        raw = {"data": raw}

    try:
        return IntrospectionDocument.model_validate(raw)
    except ValidationError as e:
        raise InvalidDocumentShape(
            "Not a GraphQL introspection result",
            details=_format_errors(e),
        ) from e


def _format_errors(error: ValidationError) -> list[str]:
    """Render the first few pydantic errors as ``loc: message`` lines."""
    details: list[str] = []
    for err in error.errors()[:_MAX_REPORTED_ERRORS]:
        loc = ".".join(str(part) for part in err["loc"]) or "<document>"
        details.append(f"{loc}: {err['msg']}")
    hidden = error.error_count() - len(details)
    if hidden > 0:
        details.append(f"... and {hidden} more")
    return details
