"""
Figures Context

Responsibilities:
- Implements the texfig commands (gnuplot, tikz, latex, clean)
- Validates gnuplot scripts before running them
- Moves finished figures to their output path

Owns: Command pipelines and their argument contracts
Never: Writes LaTeX by hand (delegates to the templating context)
"""

from texfig.contexts.figures.handlers import (
    CleanCommand,
    FigureBuildCommand,
    FigureCommand,
    GnuplotCommand,
    LatexCommand,
    RunOptions,
    TikzCommand,
    finalize,
    registered_commands,
)

__all__ = [
    "CleanCommand",
    "FigureBuildCommand",
    "FigureCommand",
    "GnuplotCommand",
    "LatexCommand",
    "RunOptions",
    "TikzCommand",
    "finalize",
    "registered_commands",
]
