"""Reverse lookup over GraphQL introspection schemas."""

__version__ = "0.1.0"
