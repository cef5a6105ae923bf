"""LDAP Schema to Code Generator

A Python package for compiling LDAP schema files into typed entity
and mapper modules. Schemas are decoded line by line, attribute
references are resolved across files, and one artifact per object
class is rendered from Jinja2 templates.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGeneratorConfig,
    Diagnostics,
    GenerationReport,
    OutputConfig,
    PipelineGenerator,
    SchemaCompilerError,
)

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "CodeGeneratorConfig",
    "OutputConfig",
    "Diagnostics",
    "SchemaCompilerError",
]
