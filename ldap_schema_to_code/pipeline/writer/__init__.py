"""
Writer module.

Atomic artifact writes and cleanup of old output.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .cleanup import remove_old_output

__all__ = [
    "AtomicWriter",
    "remove_old_output",
]
