"""
External tool invocation.

Runs the configured typesetter, plotting engine and cropper. The tools write
straight to the terminal; texfig only checks their exit status.
"""

import shlex
import subprocess
import time
from pathlib import Path
from typing import List, Optional, Union

from texfig.config import Settings
from texfig.contexts.rendering.logger import log_process_result, log_process_start
from texfig.exceptions import ConfigurationError, ProcessFailedError

PathLike = Union[str, Path]


def build_argv(command_template: str, *args: PathLike) -> List[str]:
    """
    Split a command template and append arguments.

    The template may hold several words (e.g., "pdflatex -halt-on-error");
    it is split with shell quoting rules. Arguments are appended verbatim.

    Raises:
        ConfigurationError: If the template is empty or badly quoted
    """
    try:
        argv = shlex.split(command_template)
    except ValueError as e:
        raise ConfigurationError(f"Cannot parse command '{command_template}': {e}") from e

    if not argv:
        raise ConfigurationError("Command template is empty")

    return argv + [str(arg) for arg in args]


def run_command(
    command_template: str,
    *args: PathLike,
    input: Optional[Union[str, bytes]] = None,
    cwd: Optional[Path] = None,
) -> int:
    """
    Run an external command and wait for it.

    Args:
        command_template: Configured command, possibly with its own flags
        *args: Extra arguments appended to the command
        input: Text or raw bytes fed to the child's stdin (inherited when None)
        cwd: Working directory for the child (default: current directory)

    Returns:
        0 on success

    Raises:
        ProcessFailedError: If the command cannot be started or exits non-zero
    """
    argv = build_argv(command_template, *args)
    tool = argv[0]
    cwd = Path.cwd() if cwd is None else Path(cwd)

    log_process_start(argv, cwd)
    start_time = time.time()

    try:
        result = subprocess.run(argv, input=input, text=not isinstance(input, bytes), cwd=cwd)
    except FileNotFoundError as e:
        log_process_result(tool, 127, time.time() - start_time)
        raise ProcessFailedError(tool, argv, 127) from e
    except PermissionError as e:
        log_process_result(tool, 126, time.time() - start_time)
        raise ProcessFailedError(tool, argv, 126) from e

    log_process_result(tool, result.returncode, time.time() - start_time)

    if result.returncode != 0:
        raise ProcessFailedError(tool, argv, result.returncode)

    return 0


class ProcessRunner:
    """Runs the three tools named in a Settings object."""

    def __init__(self, settings: Settings, cwd: Optional[Path] = None):
        self.settings = settings
        self.cwd = Path.cwd() if cwd is None else Path(cwd)

    def plot(self, script: Union[str, bytes]) -> int:
        """Run the plotting engine with `script` on stdin. Bytes are passed unchanged."""
        return run_command(self.settings.gnuplot, input=script, cwd=self.cwd)

    def typeset(self, tex_file: Path) -> int:
        """Run the typesetter on `tex_file`; the PDF lands next to it."""
        return run_command(self.settings.latex, tex_file.name, cwd=tex_file.parent)

    def crop(self, pdf_file: Path, output_file: Path) -> int:
        """Run the cropper, writing the trimmed copy of `pdf_file` to `output_file`."""
        return run_command(self.settings.pdfcrop, pdf_file, output_file, cwd=self.cwd)
