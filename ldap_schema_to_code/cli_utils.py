"""
CLI utilities for schema file discovery and logging setup.
"""

import logging
from pathlib import Path


def discover_schema_files(
    schema_directory: str | Path,
    include_schemas: list[str] | None = None,
    exclude_schemas: list[str] | None = None,
) -> list[str]:
    """
    Build the ordered list of schema files to compile.

    Without includes, every regular file directly inside the directory is
    used, sorted by name. With includes, the named files are used in the
    given order. Excludes are removed last.

    Args:
        schema_directory: Directory holding the schema files
        include_schemas: File names relative to the directory
        exclude_schemas: File names relative to the directory

    Returns:
        Absolute paths, without duplicates
    """
    directory = Path(schema_directory).absolute()

    if include_schemas:
        candidates = [str(directory / name) for name in include_schemas]
    else:
        logging.getLogger(__name__).info("No schemas included explicitly, loading every file under %s", directory)
        candidates = [str(path) for path in sorted(directory.iterdir()) if path.is_file()]

    # dict keeps first-seen order
    schema_files = dict.fromkeys(candidates)
    for name in exclude_schemas or []:
        schema_files.pop(str(directory / name), None)

    return list(schema_files)


def configure_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; debug messages only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
