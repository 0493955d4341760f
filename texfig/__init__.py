"""
texfig - standalone PDF figures from gnuplot, TikZ and LaTeX sources

Wraps a figure source in a minimal standalone LaTeX document, drives the
external tools that turn it into a PDF and cleans up after them.

Architecture:
- Rendering Context: external tool invocation and temporary files
- Templating Context: standalone document generation
- Figures Context: one handler per command (gnuplot, tikz, latex, clean)
"""

__version__ = "0.1.0"
