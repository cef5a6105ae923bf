"""
Pipeline generator.

Ties the phases together: settings check, template loading, schema
parsing, optional cleanup, then one entity and/or mapper artifact per
object class.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import jinja2

from .. import __version__
from ..utils import package_to_path
from .analyzer import MAPPERS_SUB_PACKAGE, TYPES_SUB_PACKAGE, GenerationModel, ModelBuilder
from .backends import ArtifactKind, TemplateRenderer
from .config import CodeGeneratorConfig
from .diagnostics import Diagnostics
from .schema_model import Schema
from .schema_parser import DxcLineDecoder, LineDecoder, SchemaParser
from .writer import AtomicWriter, remove_old_output


@dataclass
class SkippedArtifact:
    """An artifact that failed to render or write."""

    object_class: str
    kind: ArtifactKind
    path: Path
    reason: str


@dataclass
class GenerationReport:
    """Outcome of one compile run."""

    schema: Schema | None = None
    written: list[Path] = field(default_factory=list)
    skipped: list[SkippedArtifact] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class PipelineGenerator:
    """Compiles LDAP schema files into entity and mapper modules."""

    def __init__(
        self,
        config: CodeGeneratorConfig,
        schema_files: Sequence[str | PathLike],
        decoder: LineDecoder | None = None,
        diagnostics: Diagnostics | None = None,
        renderer: TemplateRenderer | None = None,
        writer: AtomicWriter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration
            schema_files: Schema files, parsed in this order
            decoder: Line decoder for the schema dialect (DXC by default)
            diagnostics: Diagnostics sink shared by every phase
            renderer: Template renderer
            writer: Artifact writer
        """
        self.config = config
        self.schema_files = list(schema_files)
        self.diagnostics = diagnostics or Diagnostics()
        self.decoder = decoder or DxcLineDecoder(self.diagnostics)
        self.renderer = renderer or TemplateRenderer()
        self.writer = writer or AtomicWriter()

    @property
    def generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        return f"Generated by ldap_schema_to_code {__version__}. Do not edit."

    def output_directory(self, kind: ArtifactKind) -> Path:
        """Directory artifacts of ``kind`` are written to."""
        sub_package = TYPES_SUB_PACKAGE if kind == ArtifactKind.TYPE else MAPPERS_SUB_PACKAGE
        package = f"{self.config.generate_package}.{sub_package}"
        return Path(self.config.generate_directory) / package_to_path(package)

    def enabled_kinds(self) -> list[ArtifactKind]:
        kinds = []
        if self.config.generate_types:
            kinds.append(ArtifactKind.TYPE)
        if self.config.generate_mappers:
            kinds.append(ArtifactKind.MAPPER)
        return kinds

    def load_templates(self) -> dict[ArtifactKind, jinja2.Template]:
        """Load the template of every enabled kind.

        Raises:
            TemplateLoadError: If an override template can't be loaded
        """
        overrides = {
            ArtifactKind.TYPE: self.config.type_template_file,
            ArtifactKind.MAPPER: self.config.mapper_template_file,
        }
        return {kind: self.renderer.load(kind, overrides[kind]) for kind in self.enabled_kinds()}

    def parse(self) -> Schema:
        return SchemaParser(self.decoder, self.diagnostics).parse(self.schema_files)

    def remove_old_output(self) -> list[Path]:
        removed = []
        for kind in self.enabled_kinds():
            removed.extend(remove_old_output(self.output_directory(kind), self.config.output.file_extension, self.diagnostics))
        return removed

    def generate(self) -> GenerationReport:
        """
        Run the whole compile.

        Fatal problems (missing settings, unreadable schema files, unusable
        template overrides) raise before anything is written. A failure on a
        single artifact is logged and recorded in the report instead.

        Returns:
            GenerationReport with written, skipped and removed files

        Raises:
            SettingsError: If a required setting is missing
            TemplateLoadError: If an override template can't be loaded
            SchemaReadError: If a schema file can't be read
        """
        self.config.validate(self.schema_files)
        templates = self.load_templates()
        schema = self.parse()

        report = GenerationReport(schema=schema)
        if self.config.remove_old_output:
            report.removed = self.remove_old_output()

        builder = ModelBuilder(schema, self.config.generate_package, self.generation_comment)
        for object_class in schema.object_classes:
            model = builder.build(object_class)
            if ArtifactKind.TYPE in templates:
                self._generate_artifact(ArtifactKind.TYPE, templates[ArtifactKind.TYPE], model, report)
            if ArtifactKind.MAPPER in templates:
                self._generate_artifact(ArtifactKind.MAPPER, templates[ArtifactKind.MAPPER], model.for_mapper(), report)

        if report.skipped:
            self.diagnostics.warning(
                "Generated %d file(s), skipped %d file(s)",
                len(report.written),
                report.skipped_count,
            )
        else:
            self.diagnostics.info("Generated %d file(s)", len(report.written))
        return report

    def _generate_artifact(
        self,
        kind: ArtifactKind,
        template: jinja2.Template,
        model: GenerationModel,
        report: GenerationReport,
    ) -> None:
        path = self.output_directory(kind) / f"{model.class_name}.{self.config.output.file_extension}"
        try:
            self.writer.write(
                path,
                self.renderer.generate(template, model.to_context()),
                validate=self.config.output.validate_before_write,
            )
        except Exception as e:
            # One broken artifact must not stop the others
            self.diagnostics.error("Unable to write output to file - %s: %s", path, e)
            report.skipped.append(SkippedArtifact(model.object_class.name, kind, path, str(e)))
            return

        self.diagnostics.info("Write output to file - %s", path)
        report.written.append(path)
