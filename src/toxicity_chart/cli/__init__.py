"""Command-line interface package for the toxicity chart tooling."""

from .app import ToxicityReport, build_parser, main, render_table, run

__all__ = [
    "ToxicityReport",
    "build_parser",
    "main",
    "render_table",
    "run",
]
