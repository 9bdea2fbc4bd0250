"""
CLI utilities: rebuilding the command line for the generation comment.
"""

from pathlib import Path
from typing import Any

import click

PROGRAM_NAME = "json_schema_to_pojo"


def _display_value(value: Any) -> str:
    """Existing paths are shown by file name only."""
    if isinstance(value, (str, Path)):
        path = Path(str(value))
        return path.name if path.exists() else str(value)
    return str(value)


def _option_args(param: click.Option, value: Any) -> list[str]:
    if param.is_flag and param.secondary_opts:
        return [param.opts[0] if value else param.secondary_opts[0]]
    if param.is_flag:
        return [param.opts[0]] if value else []
    return [param.opts[0], _display_value(value)]


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the invocation of ``click_command`` from the active click context.

    Options left at their default are omitted.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        params = click.get_current_context().params
    except RuntimeError:
        return PROGRAM_NAME

    arguments: list[str] = []
    options: list[str] = []
    for param in click_command.params:
        if param.name not in params:
            continue
        value = params[param.name]
        if value is None or value == "" or value == ():
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            options.extend(_option_args(param, value))

    return " ".join([PROGRAM_NAME] + arguments + options)
