"""
Code generation backends.

Contains the template renderer used for every artifact kind.
"""

from __future__ import annotations

from .renderer import ArtifactKind, TemplateRenderer, python_type

__all__ = [
    "ArtifactKind",
    "TemplateRenderer",
    "python_type",
]
