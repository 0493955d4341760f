"""
Rendering Context

Responsibilities:
- Runs the external typesetter, plotting engine and cropper
- Allocates and releases the temporary files they work on

Owns: Child processes, temporary file lifecycle
Never: Decides what goes into a generated document
"""

from texfig.contexts.rendering.runner import ProcessRunner, build_argv, run_command
from texfig.contexts.rendering.tempfiles import TempFileSet, clean_prefixed

__all__ = ["ProcessRunner", "TempFileSet", "build_argv", "clean_prefixed", "run_command"]
