"""Command-line interface."""

from clipfrag.cli.main import main, run

__all__ = ["main", "run"]
