"""
Configuration for the schema compiler pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import SettingsError


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        file_extension: Extension of generated files, also used by the cleanup pass
        validate_before_write: Whether to validate generated Python before writing
    """

    file_extension: str = "py"
    validate_before_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Root directory generated packages are written under
    generate_directory: str = ""

    # Dotted package name; artifacts go to <package>.types and <package>.mappers
    generate_package: str = ""

    # Which artifact kinds to generate
    generate_types: bool = True
    generate_mappers: bool = True

    # Template overrides (None = bundled defaults)
    type_template_file: str | None = None
    mapper_template_file: str | None = None

    # Delete previously generated files before generating
    remove_old_output: bool = False

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Schema discovery, used by the command line front end
    schema_directory: str = ""
    include_schemas: list[str] = field(default_factory=list)
    exclude_schemas: list[str] = field(default_factory=list)

    # Log debug diagnostics
    verbose: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    file_extension=v.get("file_extension", "py"),
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "generate_directory": self.generate_directory,
            "generate_package": self.generate_package,
            "generate_types": self.generate_types,
            "generate_mappers": self.generate_mappers,
            "type_template_file": self.type_template_file,
            "mapper_template_file": self.mapper_template_file,
            "remove_old_output": self.remove_old_output,
            "add_generation_comment": self.add_generation_comment,
            "schema_directory": self.schema_directory,
            "include_schemas": self.include_schemas,
            "exclude_schemas": self.exclude_schemas,
            "verbose": self.verbose,
            "output": {
                "file_extension": self.output.file_extension,
                "validate_before_write": self.output.validate_before_write,
            },
        }

    def validate(self, schema_files: list[str] | None = None) -> None:
        """Check the settings every run needs.

        Raises:
            SettingsError: Naming the first missing setting
        """
        if not self.generate_package:
            raise SettingsError("generate_package")
        if not self.generate_directory:
            raise SettingsError("generate_directory")
        if schema_files is not None and not schema_files:
            raise SettingsError("schema_files")
