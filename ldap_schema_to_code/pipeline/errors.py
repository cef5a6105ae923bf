"""
Exceptions raised by the schema compiler.
"""

from __future__ import annotations


class SchemaCompilerError(Exception):
    """Base class for all compiler errors."""

    pass


class SettingsError(SchemaCompilerError):
    """Raised when a required setting is missing or empty."""

    def __init__(self, setting: str):
        super().__init__(f"The <{setting}> setting must be defined.")
        self.setting = setting


class SchemaReadError(SchemaCompilerError):
    """Raised when a schema file cannot be opened or read.

    Aborts the whole run; no partial schema is returned.
    """

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Unable to read schema file {path}: {cause}")
        self.path = path


class TemplateLoadError(SchemaCompilerError):
    """Raised when a template override cannot be read or compiled."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Unable to load template {path}: {cause}")
        self.path = path


class ArtifactWriteError(SchemaCompilerError):
    """Raised when a generated artifact fails validation.

    The generator treats this like any other per-artifact failure:
    the artifact is skipped and generation continues.
    """

    pass
