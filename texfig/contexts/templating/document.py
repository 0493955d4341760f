"""
Standalone Document Synthesis

Builds the minimal LaTeX document that wraps one figure. Each document kind
differs only in its package list and setup lines; everything else comes from
the standalone.tex.jinja template.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import List, Optional, Union

from texfig.contexts.templating.registries import TemplateRegistry

# Optional user preamble, looked up in the working directory at typesetting time
PREAMBLE_FILE = "texfig-preamble.tex"


class DocumentKind(str, Enum):
    """What the document body inputs."""

    GNUPLOT = "gnuplot"  # cairolatex fragment written by gnuplot
    TIKZ = "tikz"  # raw tikzpicture source
    LATEX = "latex"  # arbitrary LaTeX fragment


@dataclass(frozen=True)
class Package:
    name: str
    options: Optional[str] = None


@dataclass
class StandaloneDocument:
    """
    A standalone-class document with a single content input.

    Attributes:
        body: Path passed to \\input in the document body
        font_size: Document class font size option (e.g., "10pt")
        packages: Packages loaded in the preamble, in order
        setup: Raw preamble lines emitted after the packages
        preamble: Optional preamble file included if it exists
    """

    body: str
    font_size: str = "10pt"
    packages: List[Package] = field(default_factory=list)
    setup: List[str] = field(default_factory=list)
    preamble: str = PREAMBLE_FILE


_BASE_PACKAGES = [Package("graphicx"), Package("xcolor")]

_KIND_PACKAGES = {
    DocumentKind.GNUPLOT: [],
    DocumentKind.TIKZ: [Package("tikz"), Package("pgfplots")],
    DocumentKind.LATEX: [Package("subfigure")],
}

_KIND_SETUP = {
    DocumentKind.GNUPLOT: [],
    DocumentKind.TIKZ: [r"\pgfplotsset{compat=newest}"],
    DocumentKind.LATEX: [],
}


def packages_for(kind: DocumentKind) -> List[Package]:
    """Packages loaded by a document of `kind`: graphics and color first, then kind-specific ones."""
    kind = DocumentKind(kind)
    return _BASE_PACKAGES + _KIND_PACKAGES[kind]


def setup_lines_for(kind: DocumentKind) -> List[str]:
    """Preamble lines emitted after the package list."""
    return list(_KIND_SETUP[DocumentKind(kind)])


def preamble_include(preamble: str = PREAMBLE_FILE) -> str:
    """
    Conditional include of the user preamble.

    LaTeX skips the include silently when the file does not exist, so a
    missing preamble is never an error.
    """
    return rf"\InputIfFileExists{{{preamble}}}{{}}{{}}"


def tex_path(path: Union[str, PurePath]) -> str:
    """Spell a path the way \\input expects it (forward slashes)."""
    return PurePath(path).as_posix()


def build_document(
    kind: DocumentKind,
    content_path: Union[str, PurePath],
    font_size: str = "10pt",
    preamble: str = PREAMBLE_FILE,
) -> StandaloneDocument:
    """Assemble the document model for `kind` around `content_path`."""
    return StandaloneDocument(
        body=tex_path(content_path),
        font_size=font_size,
        packages=packages_for(kind),
        setup=setup_lines_for(kind),
        preamble=preamble,
    )


def render_document(
    document: StandaloneDocument, registry: Optional[TemplateRegistry] = None
) -> str:
    """Render a document model to LaTeX source."""
    registry = registry or TemplateRegistry()
    template = registry.get_template("standalone")
    return template.render(document=document, preamble_include=preamble_include(document.preamble))


def synthesize(
    kind: DocumentKind,
    content_path: Union[str, PurePath],
    font_size: str = "10pt",
    preamble: str = PREAMBLE_FILE,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Generate the LaTeX source of a standalone document wrapping `content_path`.

    Args:
        kind: Document kind, selects packages and setup lines
        content_path: File the document body inputs, relative to the directory
                      the typesetter runs in
        font_size: Document class font size option
        preamble: Optional preamble file to include if present
        registry: Template registry (a fresh one is created when omitted)

    Returns:
        LaTeX source text
    """
    document = build_document(kind, content_path, font_size=font_size, preamble=preamble)
    return render_document(document, registry)


def write_document(text: str, path: Path) -> Path:
    """Write generated LaTeX source to `path`."""
    path.write_text(text, encoding="utf-8")
    return path
