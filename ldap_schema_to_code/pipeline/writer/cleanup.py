"""
Removal of previously generated artifacts.
"""

from __future__ import annotations

from pathlib import Path

from ..diagnostics import Diagnostics


def remove_old_output(directory: Path, file_extension: str, diagnostics: Diagnostics | None = None) -> list[Path]:
    """
    Delete generated files directly inside ``directory``.

    Only regular files ending in ``.<file_extension>`` are removed.
    Subdirectories and their contents are left alone, and a missing
    directory is not an error.

    Args:
        directory: Output directory of one artifact kind
        file_extension: Extension of generated files, without the dot
        diagnostics: Where to report what gets deleted

    Returns:
        The removed paths, sorted
    """
    diagnostics = diagnostics or Diagnostics()
    diagnostics.info("Deleting *.%s under %s", file_extension, directory)

    if not directory.is_dir():
        return []

    suffix = f".{file_extension}"
    removed = []
    for path in sorted(directory.iterdir()):
        if path.is_file() and path.name.endswith(suffix):
            path.unlink()
            removed.append(path)
    return removed
