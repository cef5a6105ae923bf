"""
Diagnostics sink for the parser and generator.

Each Diagnostics instance records what happened during one compile run and
forwards every entry to a standard library logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger("ldap_schema_to_code")


@dataclass
class Diagnostic:
    level: int
    message: str


@dataclass
class Diagnostics:
    """Collects diagnostics and mirrors them to ``logger``."""

    logger: logging.Logger = field(default=logger)
    entries: list[Diagnostic] = field(default_factory=list)
    warning_count: int = 0
    error_count: int = 0

    def _record(self, level: int, message: str, *args, exc_info=None) -> None:
        if args:
            message = message % args
        self.entries.append(Diagnostic(level, message))
        self.logger.log(level, message, exc_info=exc_info)

    def debug(self, message: str, *args) -> None:
        self._record(logging.DEBUG, message, *args)

    def info(self, message: str, *args) -> None:
        self._record(logging.INFO, message, *args)

    def warning(self, message: str, *args) -> None:
        self.warning_count += 1
        self._record(logging.WARNING, message, *args)

    def error(self, message: str, *args, exc_info=None) -> None:
        self.error_count += 1
        self._record(logging.ERROR, message, *args, exc_info=exc_info)

    def messages(self, level: int | None = None) -> list[str]:
        """Recorded messages, optionally filtered to one level."""
        return [entry.message for entry in self.entries if level is None or entry.level == level]
