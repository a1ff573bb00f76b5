"""
CLI layer for naming-study.

Provides a Typer application that delegates to :mod:`naming_study.registry`.
This package handles only terminal transport: argument parsing, coloured
output, and table formatting.

Entry point::

    naming-study --help
"""

from naming_study.cli.app import app

__all__ = ["app"]
