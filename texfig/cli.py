"""
texfig command line

Builds standalone PDF figures from plotting and diagram sources.

Commands:
    gnuplot - Plot a gnuplot script (cairolatex terminal) and typeset it
    tikz    - Typeset a TikZ picture
    latex   - Typeset an arbitrary LaTeX fragment
    clean   - Remove leftover temporary files

Examples:\n

    texfig gnuplot sine.gp sine.pdf            # Plot and typeset

    texfig tikz diagram.tikz diagram.pdf       # Typeset a tikzpicture

    texfig latex table.tex table.pdf --crop    # Typeset, then trim margins with pdfcrop

    texfig clean                               # Remove leftover texfig-tmp-* files
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from texfig import __version__
from texfig.config import load_settings
from texfig.contexts.figures.handlers import RunOptions
from texfig.dispatcher import dispatch
from texfig.exceptions import ConfigurationError
from texfig.utils.logger import setup_logger

app = typer.Typer(
    help="Build cropped standalone PDF figures from gnuplot, TikZ and LaTeX sources",
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"texfig {__version__}")
        raise typer.Exit()


@app.command()
def main(
    command: Annotated[
        Optional[str],
        typer.Argument(help="Command to run: gnuplot, tikz, latex or clean"),
    ] = None,
    args: Annotated[
        Optional[List[str]],
        typer.Argument(help="Command arguments (usually <source> <output>)"),
    ] = None,
    crop: Annotated[
        bool,
        typer.Option("--crop", "-c", help="Trim the figure margins with the cropping tool"),
    ] = False,
    keep_temps: Annotated[
        bool,
        typer.Option(
            "--keep-temps",
            "-k",
            help="Keep temporary files for debugging (remove them later with 'texfig clean')",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every step and external command"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
):
    """
    Build a standalone PDF figure.

    Examples:\n

        $ texfig gnuplot sine.gp sine.pdf

        $ texfig tikz diagram.tikz diagram.pdf --crop

        $ texfig clean
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_dir = os.getenv("TEXFIG_LOG_DIR")
    setup_logger(
        context_name="texfig",
        log_dir=Path(log_dir) if log_dir else None,
        verbose=verbose,
        extra_provenance={
            "Typesetter": settings.latex,
            "Plotting engine": settings.gnuplot,
            "Cropper": settings.pdfcrop,
        },
    )

    options = RunOptions(crop=crop, keep_temps=keep_temps)
    raise typer.Exit(code=dispatch(command, args or [], settings, options))


if __name__ == "__main__":
    app()
