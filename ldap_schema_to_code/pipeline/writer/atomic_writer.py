"""
Atomic file writer for generated artifacts.

Ensures that an interrupted or failed render never leaves a partially
written artifact behind.
"""

from __future__ import annotations

import ast
import os
import stat
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from ..errors import ArtifactWriteError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Stream the content into a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_python: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_python: Optional validation function for Python code
        """
        self._validate_python = validate_python or self._default_validate_python

    def write(self, path: Path, content: str | Iterable[str], validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Text, or chunks of text produced lazily (e.g. a template stream)
            validate: Whether to validate before finalizing

        Raises:
            ArtifactWriteError: If validation fails
            OSError: If file operations fail
        """
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                if isinstance(content, str):
                    f.write(content)
                else:
                    for chunk in content:
                        f.write(chunk)

            if validate:
                self._validate_content(temp_path.read_text(encoding="utf-8"), path.suffix)

            # mkstemp creates the file 0600
            os.chmod(temp_path, _target_mode(path))
            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _validate_content(self, content: str, suffix: str) -> None:
        """Validate content based on the target file extension.

        Only Python output is checked.
        """
        if suffix == ".py":
            self._validate_python(content)

    def _default_validate_python(self, content: str) -> None:
        """Default Python validation.

        Raises:
            ArtifactWriteError: If the code doesn't parse
        """
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise ArtifactWriteError(f"Generated Python code is not valid: {e}") from e


def _target_mode(path: Path) -> int:
    """Mode for the replacement file: keep the old file's, else follow the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
