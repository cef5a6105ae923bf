"""
Schema model module.

Contains the in-memory model of a parsed LDAP schema.
"""

from __future__ import annotations

from .nodes import (
    DEFAULT_SYNTAX,
    SYNTAX_VALUE_KINDS,
    Attribute,
    ObjectClass,
    Schema,
    SchemaBinding,
    ValueKind,
)

__all__ = [
    "Attribute",
    "ObjectClass",
    "SchemaBinding",
    "Schema",
    "ValueKind",
    "SYNTAX_VALUE_KINDS",
    "DEFAULT_SYNTAX",
]
