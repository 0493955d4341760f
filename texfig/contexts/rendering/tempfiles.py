"""
Temporary file tracking.

Every file texfig creates lives in the working directory under a shared name
prefix, so that LaTeX and gnuplot can find each other's output by relative
name. External tools add companion files next to them (.aux, .log, the
cairolatex graphic, the cropped PDF), which is why cleanup removes everything
that starts with a tracked base name rather than only the allocated paths.
"""

import os
import tempfile
from pathlib import Path
from typing import List, Optional

from texfig.contexts.rendering.logger import _log_debug, log_cleanup
from texfig.exceptions import TempAllocationError


def _matching_files(directory: Path, prefix: str) -> List[Path]:
    """Regular files in `directory` whose name starts with `prefix`, sorted by name."""
    return sorted(
        path for path in directory.iterdir() if path.is_file() and path.name.startswith(prefix)
    )


def _remove_quietly(paths: List[Path]) -> List[Path]:
    """Delete `paths`, ignoring failures. Returns the paths actually removed."""
    removed = []
    for path in paths:
        try:
            path.unlink()
        except OSError as e:
            _log_debug(f"Could not remove {path}: {e}")
            continue
        removed.append(path)
    return removed


class TempFileSet:
    """
    Run-scoped set of temporary files.

    Use as a context manager so the files are released on every exit path:

        with TempFileSet("texfig-tmp-") as temps:
            document = temps.allocate(".tex")
            ...

    Attributes:
        prefix: Name prefix of every allocated file
        directory: Directory the files are created in
        keep: Skip cleanup when leaving the context (for debugging)
    """

    def __init__(self, prefix: str, directory: Optional[Path] = None, keep: bool = False):
        self.prefix = prefix
        self.directory = Path.cwd() if directory is None else Path(directory)
        self.keep = keep
        self._bases: List[str] = []

    def __enter__(self) -> "TempFileSet":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if self.keep:
            log_cleanup(self.files(), kept=True)
        else:
            self.cleanup()

    @property
    def bases(self) -> List[str]:
        """Base names allocated so far."""
        return list(self._bases)

    def allocate(self, extension: str) -> Path:
        """
        Create a uniquely named empty file with the given extension.

        Args:
            extension: Suffix including the dot (e.g., ".tex")

        Returns:
            Path of the new file

        Raises:
            TempAllocationError: If the file cannot be created
        """
        try:
            fd, name = tempfile.mkstemp(suffix=extension, prefix=self.prefix, dir=self.directory)
            os.close(fd)
        except OSError as e:
            raise TempAllocationError(
                f"Cannot create temporary file in {self.directory}: {e}"
            ) from e

        path = Path(name)
        self._bases.append(path.name[: len(path.name) - len(extension)])
        _log_debug(f"Allocated {path.name}")
        return path

    def files(self) -> List[Path]:
        """Files currently on disk that belong to this set."""
        if not self._bases or not self.directory.is_dir():
            return []
        return [
            path
            for path in _matching_files(self.directory, self.prefix)
            if any(path.name.startswith(base) for base in self._bases)
        ]

    def cleanup(self) -> int:
        """
        Remove every file that starts with a tracked base name.

        Failures are ignored. Safe to call more than once.

        Returns:
            Number of files removed
        """
        removed = _remove_quietly(self.files())
        log_cleanup(removed)
        return len(removed)


def clean_prefixed(prefix: str, directory: Optional[Path] = None) -> List[Path]:
    """
    Remove every file in `directory` whose name starts with `prefix`.

    Recovers from runs that were killed before their own cleanup ran.

    Returns:
        Paths that were removed (empty when there was nothing to do)
    """
    directory = Path.cwd() if directory is None else Path(directory)
    removed = _remove_quietly(_matching_files(directory, prefix))
    log_cleanup(removed)
    return removed
