"""Custom exceptions for texfig, raised by library code and reported by the dispatcher."""

from pathlib import Path
from typing import List, Optional, Sequence


class TexfigError(Exception):
    """Base class for every error that aborts a texfig run with exit status 1."""


class ConfigurationError(TexfigError):
    """Raised when settings resolved from texfig.yaml or the environment are invalid."""


class CommandUsageError(TexfigError):
    """
    Raised by a handler when its argument list is malformed.

    Attributes:
        command: Name of the command that rejected its arguments
        args: The arguments it received
    """

    def __init__(self, command: str, args: Sequence[str], message: Optional[str] = None):
        self.command = command
        self.args_received = list(args)
        super().__init__(message or f"Wrong number of arguments for '{command}'")


class UnknownCommandError(TexfigError):
    """
    Raised when a command name is not in the registry.

    Attributes:
        name: The attempted command name
        valid_names: All registered command names
    """

    def __init__(self, name: str, valid_names: List[str]):
        self.name = name
        self.valid_names = valid_names
        super().__init__(f"Unknown command: {name}")


class SourceContractError(TexfigError):
    """
    Raised when a source script violates what texfig expects of it.

    Attributes:
        message: Error description
        source_path: Path to the offending script
        line: Offending line, if one was found
    """

    def __init__(self, message: str, source_path: Path, line: Optional[str] = None):
        self.message = message
        self.source_path = source_path
        self.line = line

        parts = [f"{source_path}: {message}"]
        if line:
            parts.append(f"  offending line: {line.strip()}")

        super().__init__("\n".join(parts))


class ProcessFailedError(TexfigError):
    """
    Raised when an external tool exits with a non-zero status or cannot be started.

    The tool's own output is inherited by the terminal, so this only carries
    enough to say which stage failed.

    Attributes:
        tool: Executable name (first word of the command template)
        argv: Full argument vector that was run
        returncode: Exit status of the child (127 if it could not be found)
    """

    def __init__(self, tool: str, argv: List[str], returncode: int):
        self.tool = tool
        self.argv = argv
        self.returncode = returncode

        if returncode == 127:
            message = f"Command not found: {tool}"
        else:
            message = f"{tool} failed with exit status {returncode}"

        super().__init__(message)


class TempAllocationError(TexfigError):
    """Raised when a temporary file cannot be created in the working directory."""
