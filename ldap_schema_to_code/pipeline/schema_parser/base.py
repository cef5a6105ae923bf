"""
Format-agnostic schema parser.

Phase 1 of the pipeline: feed every schema file, line by line, to a
line decoder that knows the concrete schema dialect, then run the
attribute resolution pass over the collected declarations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from os import PathLike

from ..diagnostics import Diagnostics
from ..errors import SchemaReadError
from ..schema_model.nodes import Schema
from .resolver import AttributeResolver


class LineDecoder(ABC):
    """Decodes one schema dialect, one trimmed line at a time.

    Decoders are stateful: a declaration may span many lines and,
    within one parse, many files.
    """

    @abstractmethod
    def reset(self) -> None:
        """Forget any state left over from a previous parse."""

    @abstractmethod
    def consume_line(self, line: str, schema: Schema) -> None:
        """
        Decode a single line and record finished declarations in ``schema``.

        Args:
            line: The line with surrounding whitespace stripped
            schema: The schema under construction
        """

    def finish(self, schema: Schema) -> None:
        """Called once after the last line of the last file."""


class SchemaParser:
    """Drives a LineDecoder over a list of schema files."""

    def __init__(self, decoder: LineDecoder, diagnostics: Diagnostics | None = None):
        self.decoder = decoder
        self.diagnostics = diagnostics or Diagnostics()
        self.schema: Schema | None = None

    def parse(self, schema_file_paths: Iterable[str | PathLike]) -> Schema:
        """
        Parse the given files, in order, into a resolved Schema.

        Args:
            schema_file_paths: Schema files; later files may reference
                declarations from earlier ones and vice versa

        Returns:
            Schema with every attribute reference resolved

        Raises:
            SchemaReadError: If any file cannot be read
        """
        self.schema = Schema()
        self.decoder.reset()

        for schema_file_path in schema_file_paths:
            self.diagnostics.info("Parsing %s", schema_file_path)
            try:
                with open(schema_file_path, encoding="utf-8") as f:
                    for line in f:
                        self.decoder.consume_line(line.strip(), self.schema)
            except (OSError, UnicodeDecodeError) as e:
                raise SchemaReadError(str(schema_file_path), e) from e

        self.decoder.finish(self.schema)

        return AttributeResolver(self.schema, self.diagnostics).resolve()
