"""
Templating Context

Responsibilities:
- Models the standalone document that wraps a figure
- Renders it to LaTeX through Jinja2 templates

Owns: Document classes, package lists, preamble inclusion
Never: Runs external tools
"""

from texfig.contexts.templating.document import (
    PREAMBLE_FILE,
    DocumentKind,
    Package,
    StandaloneDocument,
    build_document,
    packages_for,
    preamble_include,
    render_document,
    setup_lines_for,
    synthesize,
    write_document,
)
from texfig.contexts.templating.registries import TemplateRegistry

__all__ = [
    "PREAMBLE_FILE",
    "DocumentKind",
    "Package",
    "StandaloneDocument",
    "TemplateRegistry",
    "build_document",
    "packages_for",
    "preamble_include",
    "render_document",
    "setup_lines_for",
    "synthesize",
    "write_document",
]
