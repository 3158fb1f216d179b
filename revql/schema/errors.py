"""Fatal errors raised while loading or searching a schema."""

from __future__ import annotations


class RevqlError(Exception):
    """Base class for errors that abort a search run."""


class InvalidDocumentShape(RevqlError):
    """Raised when the input is not a GraphQL introspection result."""

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.details: list[str] = details or []

    def __str__(self) -> str:
        message = super().__str__()
        if not self.details:
            return message
        return message + "\n" + "\n".join(f"  {d}" for d in self.details)


class MissingQueryRoot(RevqlError):
    """Raised when the document has no query root type."""


class UnknownType(RevqlError):
    """Raised when a type reference names a type missing from the document."""

    def __init__(self, name: str, referrer: str | None = None):
        self.name = name
        self.referrer = referrer
        where = f" (referenced by {referrer})" if referrer else ""
        super().__init__(f"Unknown type '{name}'{where}")
