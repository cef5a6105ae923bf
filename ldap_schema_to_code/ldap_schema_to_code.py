import json
import logging
from pathlib import Path

import click
from click.core import ParameterSource

from .cli_utils import configure_logging, discover_schema_files
from .pipeline import CodeGeneratorConfig, PipelineGenerator, SchemaCompilerError, SettingsError

logger = logging.getLogger(__name__)


@click.command()
@click.option("--package", "-p", default=None, type=str, help="Base package of the generated code")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--include", "-i", "include_schemas", multiple=True, help="Schema file to compile (repeatable)")
@click.option("--exclude", "-x", "exclude_schemas", multiple=True, help="Schema file to skip (repeatable)")
@click.option("--types/--no-types", "generate_types", default=True, help="Generate entity classes")
@click.option("--mappers/--no-mappers", "generate_mappers", default=True, help="Generate mapper classes")
@click.option("--type-template", default=None, type=click.Path(resolve_path=True), help="Template overriding the bundled entity template")
@click.option("--mapper-template", default=None, type=click.Path(resolve_path=True), help="Template overriding the bundled mapper template")
@click.option("--remove-old-output", is_flag=True, default=False, help="Delete previously generated files first")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("schema_directory", type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
@click.pass_context
def ldap_schema_to_code(
    ctx,
    package,
    config,
    include_schemas,
    exclude_schemas,
    generate_types,
    generate_mappers,
    type_template,
    mapper_template,
    remove_old_output,
    verbose,
    schema_directory,
    output,
):
    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # Command line options override the config file
    config.schema_directory = schema_directory
    config.generate_directory = output
    if package:
        config.generate_package = package
    if include_schemas:
        config.include_schemas = list(include_schemas)
    if exclude_schemas:
        config.exclude_schemas = list(exclude_schemas)
    for name, value in (("generate_types", generate_types), ("generate_mappers", generate_mappers)):
        if ctx.get_parameter_source(name) != ParameterSource.DEFAULT:
            setattr(config, name, value)
    if type_template:
        config.type_template_file = type_template
    if mapper_template:
        config.mapper_template_file = mapper_template
    if remove_old_output:
        config.remove_old_output = True
    if verbose:
        config.verbose = True

    configure_logging(config.verbose)
    if config.verbose:
        for key, value in config.to_dict().items():
            logger.debug("%s: %s", key, value)

    try:
        config.validate()
        schema_files = discover_schema_files(config.schema_directory, config.include_schemas, config.exclude_schemas)
        config.validate(schema_files)
    except SettingsError as e:
        raise click.UsageError(str(e)) from e

    logger.info("Loading LDAP schemas: %s", ", ".join(schema_files))
    Path(output).mkdir(parents=True, exist_ok=True)

    try:
        report = PipelineGenerator(config, schema_files).generate()
    except SchemaCompilerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(report.written)} file(s) under {output}")
    if report.skipped:
        click.echo(f"Skipped {report.skipped_count} file(s), see errors above", err=True)
