import json
import logging
from pathlib import Path

import click

from .cli_utils import format_generation_error
from .utils import snake_to_pascal_case
from .pipeline import (
    CodeGeneratorConfig,
    PipelineGenerator,
    SchemaParseError,
    SchemaResolutionError,
    UnsupportedLanguageError,
)


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Type name of the root schema (default: file stem)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--language", "-l", default="rust", type=click.Choice(["rust", "python"]))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug information")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def json_schema_to_types(name, config, language, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    if name is None:
        name = snake_to_pascal_case(Path(path).name.split(".")[0])

    try:
        codegen = PipelineGenerator(name, schema, config, language)
        out = codegen.generate()
    except (SchemaResolutionError, SchemaParseError, UnsupportedLanguageError) as e:
        raise click.ClickException(format_generation_error(e)) from e

    with open(output, "w") as f:
        f.write(out)
