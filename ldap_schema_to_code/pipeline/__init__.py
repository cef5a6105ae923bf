"""
Pipeline - LDAP schema to code generator.

1. Phase 1 (Parser): Decode schema files line by line and resolve
   attribute references into a Schema model
2. Phase 2 (Analyzer): Derive a generation model per object class
3. Phase 3 (Backend): Render entity and mapper templates
4. Phase 4 (Writer): Atomically write one file per artifact
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig
from .diagnostics import Diagnostic, Diagnostics
from .errors import (
    ArtifactWriteError,
    SchemaCompilerError,
    SchemaReadError,
    SettingsError,
    TemplateLoadError,
)
from .generator import GenerationReport, PipelineGenerator, SkippedArtifact

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "SkippedArtifact",
    "CodeGeneratorConfig",
    "OutputConfig",
    "Diagnostic",
    "Diagnostics",
    "SchemaCompilerError",
    "SettingsError",
    "SchemaReadError",
    "TemplateLoadError",
    "ArtifactWriteError",
]
