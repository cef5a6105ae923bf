"""
Schema model node definitions for LDAP schemas.

These nodes hold the declarations collected by the schema parser.
Attribute references inside object classes start out as raw names and
are linked to concrete Attribute entries by the resolution pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ...utils import to_field_identifier


class ValueKind(Enum):
    """Semantic kind of an attribute value."""

    TEXT = "text"
    BYTES = "bytes"
    OBJECT = "object"  # Anything we don't have a better mapping for


# Attribute syntax -> value kind. Unknown or missing syntaxes map to OBJECT.
SYNTAX_VALUE_KINDS: dict[str, ValueKind] = {
    "caseExactString": ValueKind.TEXT,
    "caseIgnoreString": ValueKind.TEXT,
    "distinguishedName": ValueKind.TEXT,
    "octetString": ValueKind.BYTES,
    "octetStringMatch": ValueKind.BYTES,
    "binary": ValueKind.BYTES,
    "generalizedTime": ValueKind.OBJECT,
    "integer": ValueKind.OBJECT,
    "boolean": ValueKind.OBJECT,
    "jpeg": ValueKind.OBJECT,
}

DEFAULT_SYNTAX = "caseIgnoreString"


@dataclass(eq=False)
class Attribute:
    """A directory attribute declaration.

    Compared by identity: the schema registry owns exactly one instance
    per lower-cased name.
    """

    name: str
    alternate_names: str | None = None
    syntax: str | None = None
    multi_valued: bool = True

    def __post_init__(self):
        # Rejects empty names
        to_field_identifier(self.name)

    @property
    def field_identifier(self) -> str:
        return to_field_identifier(self.name)

    @property
    def value_kind(self) -> ValueKind:
        if self.syntax is None:
            return ValueKind.OBJECT
        return SYNTAX_VALUE_KINDS.get(self.syntax, ValueKind.OBJECT)

    @property
    def is_sequence(self) -> bool:
        return self.multi_valued

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, syntax={self.syntax!r}, multi_valued={self.multi_valued})"


@dataclass
class ObjectClass:
    """A directory object class declaration."""

    name: str = ""
    alternate_names: str | None = None
    subclass_of: str | None = None
    kind: str | None = None  # structural / auxiliary / abstract, as written in the source

    # Raw names in first-seen order, duplicates suppressed
    required_attribute_names: list[str] = field(default_factory=list)
    optional_attribute_names: list[str] = field(default_factory=list)

    # Filled in by the resolution pass
    required_attributes: list[Attribute] = field(default_factory=list)
    optional_attributes: list[Attribute] = field(default_factory=list)

    def add_required_attribute_name(self, name: str) -> None:
        if name not in self.required_attribute_names:
            self.required_attribute_names.append(name)

    def add_optional_attribute_name(self, name: str) -> None:
        if name not in self.optional_attribute_names:
            self.optional_attribute_names.append(name)

    def add_required_attribute(self, attribute: Attribute) -> None:
        if attribute not in self.required_attributes:
            self.required_attributes.append(attribute)

    def add_optional_attribute(self, attribute: Attribute) -> None:
        if attribute not in self.optional_attributes:
            self.optional_attributes.append(attribute)

    @property
    def attributes(self) -> list[Attribute]:
        """Required then optional attributes, each attribute once."""
        result = list(self.required_attributes)
        for attribute in self.optional_attributes:
            if attribute not in result:
                result.append(attribute)
        return result


@dataclass
class SchemaBinding:
    """A name binding: where an object class may live and which attribute names it."""

    binding_name: str | None = None
    ldap_name: str | None = None  # Bound object class, casing as referenced
    allowable_parent: str | None = None
    named_by: str | None = None


@dataclass
class Schema:
    """Root of the parsed schema model."""

    # Lower-cased attribute name -> Attribute
    attributes: dict[str, Attribute] = field(default_factory=dict)

    # Parse order, duplicates kept
    object_classes: list[ObjectClass] = field(default_factory=list)

    # Bound object class name (as parsed) -> SchemaBinding
    schema_bindings: dict[str, SchemaBinding] = field(default_factory=dict)

    def add_attribute(self, attribute: Attribute) -> None:
        self.attributes[attribute.name.lower()] = attribute

    def add_object_class(self, object_class: ObjectClass) -> None:
        self.object_classes.append(object_class)

    def add_schema_binding(self, schema_binding: SchemaBinding) -> None:
        self.schema_bindings[schema_binding.ldap_name] = schema_binding

    def find_attribute(self, name: str | None) -> Attribute | None:
        """Case-insensitive attribute lookup."""
        if name is None:
            return None
        return self.attributes.get(name.lower())
