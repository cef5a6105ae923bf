"""
Generation model builder.

Phase 2 of the pipeline: derive, for one object class, everything a
template needs to render its entity and mapper artifacts.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from ...utils import capitalize
from ..schema_model.nodes import Attribute, ObjectClass, Schema
from .name_resolver import resolve_declared_name

TYPES_SUB_PACKAGE = "types"
MAPPERS_SUB_PACKAGE = "mappers"
MAPPER_SUFFIX = "Mapper"


@dataclass
class GenerationModel:
    """Template input for one artifact."""

    object_class: ObjectClass
    class_name: str = ""
    parent_class_name: str | None = None
    child_object_classes: list[str] = field(default_factory=list)
    rdn_attribute: Attribute | None = None

    # Package the artifact lives in
    package: str = ""

    # Entity class and packages, so mappers can import their entity
    entity_class_name: str = ""
    types_package: str = ""
    mappers_package: str = ""

    generation_comment: str = ""

    def for_mapper(self) -> GenerationModel:
        """The same model renamed for the mapper artifact."""
        parent_class_name = self.parent_class_name
        if parent_class_name is not None:
            parent_class_name += MAPPER_SUFFIX
        return dataclasses.replace(
            self,
            class_name=self.class_name + MAPPER_SUFFIX,
            parent_class_name=parent_class_name,
            package=self.mappers_package,
        )

    def to_context(self) -> dict[str, Any]:
        return {
            "object_class": self.object_class,
            "class_name": self.class_name,
            "parent_class_name": self.parent_class_name,
            "child_object_classes": self.child_object_classes,
            "rdn_attribute": self.rdn_attribute,
            "package": self.package,
            "entity_class_name": self.entity_class_name,
            "types_package": self.types_package,
            "mappers_package": self.mappers_package,
            "generation_comment": self.generation_comment,
        }


class ModelBuilder:
    """Builds generation models from a resolved schema."""

    def __init__(self, schema: Schema, package: str, generation_comment: str = ""):
        """
        Initialize the builder.

        Args:
            schema: The resolved schema (read only)
            package: Base package; entities go to <package>.types and
                mappers to <package>.mappers
            generation_comment: Comment placed at the top of generated files
        """
        self.schema = schema
        self.types_package = f"{package}.{TYPES_SUB_PACKAGE}"
        self.mappers_package = f"{package}.{MAPPERS_SUB_PACKAGE}"
        self.generation_comment = generation_comment

    def build(self, object_class: ObjectClass) -> GenerationModel:
        """Build the entity model for ``object_class``."""
        class_name = capitalize(object_class.name)
        return GenerationModel(
            object_class=object_class,
            class_name=class_name,
            parent_class_name=self.parent_class_name(object_class),
            child_object_classes=self.child_object_classes(object_class),
            rdn_attribute=self.rdn_attribute(object_class),
            package=self.types_package,
            entity_class_name=class_name,
            types_package=self.types_package,
            mappers_package=self.mappers_package,
            generation_comment=self.generation_comment,
        )

    def parent_class_name(self, object_class: ObjectClass) -> str | None:
        if object_class.subclass_of is None:
            return None
        return capitalize(resolve_declared_name(object_class.subclass_of, self.schema.object_classes))

    def child_object_classes(self, object_class: ObjectClass) -> list[str]:
        """Object classes some name binding allows directly under ``object_class``."""
        name = object_class.name.lower()
        result = []
        for schema_binding in self.schema.schema_bindings.values():
            if schema_binding.allowable_parent and schema_binding.allowable_parent.lower() == name:
                result.append(resolve_declared_name(schema_binding.ldap_name, self.schema.object_classes))
        return result

    def rdn_attribute(self, object_class: ObjectClass) -> Attribute | None:
        """The naming attribute from the class's own binding, never synthesized."""
        schema_binding = self.schema.schema_bindings.get(object_class.name)
        if schema_binding is None:
            return None
        return self.schema.find_attribute(schema_binding.named_by)
