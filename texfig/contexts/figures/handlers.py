"""
Figure Commands

One handler per texfig subcommand. The generation commands share one
pipeline: validate arguments, stage temporary files, optionally run gnuplot,
write the standalone document, typeset it, optionally crop it, and move the
PDF to the requested output path. Temporary files are released when the
pipeline leaves its TempFileSet, whether it succeeded or not.
"""

import os
import shutil
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

import typer

from texfig.config import Settings
from texfig.contexts.figures.gnuplot_checks import check_gnuplot_script, output_directive
from texfig.contexts.figures.logger import _log_debug, log_figure_done, log_figure_start
from texfig.contexts.rendering import ProcessRunner, TempFileSet, clean_prefixed
from texfig.contexts.templating import DocumentKind, synthesize, write_document
from texfig.exceptions import CommandUsageError, TexfigError


@dataclass(frozen=True)
class RunOptions:
    """
    Per-invocation flags from the command line.

    Attributes:
        crop: Run the cropper on the typeset PDF before moving it into place
        keep_temps: Leave temporary files behind for inspection
    """

    crop: bool = False
    keep_temps: bool = False


class FigureCommand(ABC):
    """A texfig subcommand: validates its own arguments, then executes."""

    name: str = ""
    arity: int = 0
    usage: str = ""

    def validate_args(self, args: Sequence[str]) -> None:
        """
        Check the argument count.

        Raises:
            CommandUsageError: If the count does not match `arity`
        """
        if len(args) != self.arity:
            raise CommandUsageError(self.name, args)

    @abstractmethod
    def execute(self, args: Sequence[str], settings: Settings, options: RunOptions) -> int:
        """Run the command. Returns the exit status."""


class FigureBuildCommand(FigureCommand):
    """Base for commands that turn a source file into a PDF figure."""

    arity = 2
    kind: DocumentKind

    def validate_args(self, args: Sequence[str]) -> None:
        super().validate_args(args)
        if not Path(args[0]).is_file():
            raise TexfigError(f"Source file not found: {args[0]}")

    def execute(self, args: Sequence[str], settings: Settings, options: RunOptions) -> int:
        source, output = Path(args[0]), Path(args[1])
        start_time = time.time()
        log_figure_start(self.name, source, output)

        workdir = Path.cwd()
        runner = ProcessRunner(settings, cwd=workdir)

        with TempFileSet(settings.tmp_prefix, workdir, keep=options.keep_temps) as temps:
            content = self.prepare_content(source, temps, runner)

            document_file = temps.allocate(".tex")
            text = synthesize(self.kind, content, font_size=settings.font_size)
            write_document(text, document_file)
            _log_debug(f"Wrote {document_file.name}")

            runner.typeset(document_file)
            pdf_file = document_file.with_suffix(".pdf")
            if not pdf_file.exists():
                raise TexfigError(f"Typesetter did not produce {pdf_file.name}")

            if options.crop:
                cropped_file = pdf_file.with_name(f"{pdf_file.stem}-crop.pdf")
                runner.crop(pdf_file, cropped_file)
                pdf_file = cropped_file

            finalize(pdf_file, output)

        log_figure_done(self.name, output, time.time() - start_time)
        return 0

    def prepare_content(self, source: Path, temps: TempFileSet, runner: ProcessRunner) -> str:
        """
        Return the path the document body inputs, relative to the working directory.

        Sources that LaTeX can read directly are input as they are.
        """
        return os.path.relpath(source.absolute(), temps.directory)


class GnuplotCommand(FigureBuildCommand):
    name = "gnuplot"
    kind = DocumentKind.GNUPLOT
    usage = """Usage: texfig gnuplot <script.gp> <output.pdf>

Runs gnuplot on the script and typesets the cairolatex output as a
standalone PDF. The script must contain a line such as

    set terminal cairolatex pdf

and must not contain a 'set output' line; texfig sets the output itself."""

    def prepare_content(self, source: Path, temps: TempFileSet, runner: ProcessRunner) -> str:
        try:
            raw_script = source.read_bytes()
        except OSError as e:
            raise TexfigError(f"Cannot read {source}: {e}") from e

        # Scripts need not be UTF-8 (set encoding iso_8859_1); gnuplot gets the original bytes
        script = raw_script.decode("utf-8", errors="surrogateescape")
        check_gnuplot_script(script, source)

        fragment_file = temps.allocate(".tex")
        directive = output_directive(fragment_file.name).encode("utf-8", errors="surrogateescape")
        runner.plot(directive + raw_script)

        if not fragment_file.stat().st_size:
            raise TexfigError(f"gnuplot did not write the figure fragment {fragment_file.name}")

        return fragment_file.name


class TikzCommand(FigureBuildCommand):
    name = "tikz"
    kind = DocumentKind.TIKZ
    usage = """Usage: texfig tikz <figure.tikz> <output.pdf>

Typesets a file containing a tikzpicture (tikz and pgfplots are loaded,
pgfplots compat=newest) as a standalone PDF."""


class LatexCommand(FigureBuildCommand):
    name = "latex"
    kind = DocumentKind.LATEX
    usage = """Usage: texfig latex <fragment.tex> <output.pdf>

Typesets a LaTeX fragment (graphicx, xcolor and subfigure are loaded) as a
standalone PDF."""


class CleanCommand(FigureCommand):
    name = "clean"
    arity = 0
    usage = """Usage: texfig clean

Removes every file in the current directory whose name starts with the
temporary file prefix (TEXFIG_TMP_PREFIX)."""

    def execute(self, args: Sequence[str], settings: Settings, options: RunOptions) -> int:
        removed = clean_prefixed(settings.tmp_prefix, Path.cwd())
        if removed:
            typer.echo(f"Removed {len(removed)} temporary file(s)")
        else:
            typer.echo("Nothing to clean")
        return 0


def finalize(pdf_file: Path, output: Path) -> Path:
    """
    Move the finished PDF to the requested output path, replacing any existing file.

    Raises:
        TexfigError: If the output directory does not exist, the output path is
            a directory, or the move fails
    """
    if not output.parent.is_dir():
        raise TexfigError(f"Output directory does not exist: {output.parent}")
    if output.is_dir():
        raise TexfigError(f"Output path is a directory: {output}")

    try:
        shutil.move(str(pdf_file), str(output))
    except OSError as e:
        raise TexfigError(f"Cannot write {output}: {e}") from e
    _log_debug(f"Moved {pdf_file.name} to {output}")
    return output


def registered_commands() -> List[FigureCommand]:
    """Every subcommand, in the order they are listed to the user."""
    return [GnuplotCommand(), TikzCommand(), LatexCommand(), CleanCommand()]

