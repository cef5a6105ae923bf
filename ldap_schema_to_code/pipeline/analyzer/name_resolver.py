"""
Name resolver for object class cross references.

Subclass and name-binding references don't always use the letter casing
of the object class they point to.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..schema_model.nodes import ObjectClass


def resolve_declared_name(name: str, object_classes: Iterable[ObjectClass]) -> str:
    """
    Resolve a referenced object class name to its declared spelling.

    Args:
        name: The name as referenced
        object_classes: Declared object classes, searched in order

    Returns:
        The name of the first declared class matching case-insensitively,
        or ``name`` unchanged when nothing matches
    """
    lowered = name.lower()
    for object_class in object_classes:
        if object_class.name.lower() == lowered:
            return object_class.name
    return name
