"""
CLI utilities for the generated-file header and error reporting.
"""

from __future__ import annotations

from pathlib import Path

import click

from .pipeline.errors import SchemaParseError, SchemaResolutionError

PROGRAM_NAME = "json_schema_to_types"


def _format_value(param: click.Parameter, value: object) -> str:
    """Show paths by file name only so headers do not leak local directories."""
    if isinstance(param.type, click.Path):
        return Path(str(value)).name
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the command line of the running Click command.

    Positional arguments come first, then options that differ from their
    defaults. Flags are shown without a value.

    Args:
        click_command: Click command object for introspection

    Returns:
        Command line string, or the bare program name outside a Click context
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return PROGRAM_NAME

    arguments = []
    options = []
    for param in click_command.params:
        value = ctx.params.get(param.name)
        if value is None or value is False:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(param, value))
        elif isinstance(param, click.Option) and value != param.default:
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _format_value(param, value)])

    return " ".join([PROGRAM_NAME, *arguments, *options])


def format_generation_error(error: Exception) -> str:
    """Message shown to the user when generation aborts."""
    if isinstance(error, SchemaResolutionError):
        return f"Cannot generate types, {error}"
    if isinstance(error, SchemaParseError):
        return f"Invalid schema document, {error}"
    return str(error)
