"""
Attribute resolver.

Links the raw attribute names collected on each object class to the
Attribute entries of the schema registry, synthesizing a default entry
for names the schema never declares.
"""

from __future__ import annotations

from ..diagnostics import Diagnostics
from ..schema_model.nodes import DEFAULT_SYNTAX, Attribute, ObjectClass, Schema


class AttributeResolver:
    """Resolves attribute names to Attribute entries."""

    def __init__(self, schema: Schema, diagnostics: Diagnostics | None = None):
        self.schema = schema
        self.diagnostics = diagnostics or Diagnostics()

    def resolve(self) -> Schema:
        """Resolve every object class in parse order."""
        for object_class in self.schema.object_classes:
            self.resolve_object_class(object_class)
        return self.schema

    def resolve_object_class(self, object_class: ObjectClass) -> None:
        for attribute_name in object_class.required_attribute_names:
            object_class.add_required_attribute(self.find_or_create_attribute(attribute_name))

        for attribute_name in object_class.optional_attribute_names:
            object_class.add_optional_attribute(self.find_or_create_attribute(attribute_name))

    def find_or_create_attribute(self, attribute_name: str) -> Attribute:
        """
        Find a declared attribute, or register a default one.

        The default is single-valued caseIgnoreString. It is registered
        before being returned so later references reuse the same instance.

        Args:
            attribute_name: Attribute name as referenced by the object class

        Returns:
            The registry entry for the name
        """
        result = self.schema.find_attribute(attribute_name)
        if result is None:
            result = Attribute(
                name=attribute_name,
                alternate_names=attribute_name,
                syntax=DEFAULT_SYNTAX,
                multi_valued=False,
            )
            self.diagnostics.warning("Created a default attribute object for attribute '%s'", attribute_name)
            self.schema.add_attribute(result)
        return result
