"""
Analyzer module.

Contains name resolution and generation model building.
"""

from __future__ import annotations

from .model_builder import (
    MAPPER_SUFFIX,
    MAPPERS_SUB_PACKAGE,
    TYPES_SUB_PACKAGE,
    GenerationModel,
    ModelBuilder,
)
from .name_resolver import resolve_declared_name

__all__ = [
    "GenerationModel",
    "ModelBuilder",
    "resolve_declared_name",
    "TYPES_SUB_PACKAGE",
    "MAPPERS_SUB_PACKAGE",
    "MAPPER_SUFFIX",
]
