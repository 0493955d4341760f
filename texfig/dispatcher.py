"""
Command Dispatch

Maps a subcommand name to its handler, lets the handler validate its own
arguments, runs it and turns every TexfigError into exit status 1.
"""

from typing import Dict, List, Optional, Sequence

import typer
from loguru import logger

from texfig.config import Settings
from texfig.contexts.figures.handlers import FigureCommand, RunOptions, registered_commands
from texfig.exceptions import CommandUsageError, TexfigError, UnknownCommandError

COMMANDS: Dict[str, FigureCommand] = {command.name: command for command in registered_commands()}

USAGE = """Usage: texfig [OPTIONS] <command> [args...]

Builds cropped standalone PDF figures from gnuplot, TikZ and LaTeX sources."""


def command_names(commands: Optional[Dict[str, FigureCommand]] = None) -> List[str]:
    return list((COMMANDS if commands is None else commands).keys())


def command_listing(commands: Optional[Dict[str, FigureCommand]] = None) -> str:
    """Available commands, one name per line."""
    return "\n".join(command_names(commands))


def _print_command_listing(commands: Dict[str, FigureCommand]) -> None:
    typer.echo("Available commands:", err=True)
    typer.echo(command_listing(commands), err=True)


def lookup(name: str, commands: Optional[Dict[str, FigureCommand]] = None) -> FigureCommand:
    """
    Find the handler registered under `name` (exact, case-sensitive match).

    Raises:
        UnknownCommandError: If no handler has that name
    """
    commands = COMMANDS if commands is None else commands
    if name not in commands:
        raise UnknownCommandError(name, command_names(commands))
    return commands[name]


def dispatch(
    command_name: Optional[str],
    args: Sequence[str],
    settings: Settings,
    options: Optional[RunOptions] = None,
    commands: Optional[Dict[str, FigureCommand]] = None,
) -> int:
    """
    Run one texfig command.

    Args:
        command_name: Subcommand name, or None when texfig was called without one
        args: Positional arguments following the subcommand
        settings: Resolved settings for this run
        options: Flags from the command line
        commands: Command table (default: COMMANDS)

    Returns:
        Exit status: 0 on success, 1 on any failure
    """
    commands = COMMANDS if commands is None else commands
    options = options or RunOptions()

    if command_name is None:
        typer.echo(USAGE, err=True)
        typer.echo("", err=True)
        _print_command_listing(commands)
        return 1

    try:
        command = lookup(command_name, commands)
    except UnknownCommandError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        _print_command_listing(commands)
        return 1

    try:
        command.validate_args(args)
    except CommandUsageError:
        typer.echo(command.usage, err=True)
        return 1
    except TexfigError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        return 1

    try:
        return command.execute(args, settings, options)
    except TexfigError as e:
        logger.debug(f"{command_name} aborted: {e!r}")
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        return 1
