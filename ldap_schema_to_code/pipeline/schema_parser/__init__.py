"""
Schema parser module.

Contains the format-agnostic parser driver, the attribute resolution
pass and the DXC line decoder.
"""

from __future__ import annotations

from .base import LineDecoder, SchemaParser
from .dxc_decoder import DxcLineDecoder
from .resolver import AttributeResolver

__all__ = [
    "LineDecoder",
    "SchemaParser",
    "AttributeResolver",
    "DxcLineDecoder",
]
