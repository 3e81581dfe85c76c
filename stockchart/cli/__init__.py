"""CLI commands for stockchart.

This package provides the command-line interface for parsing intraday
payloads and producing chart geometry.
"""

from stockchart.cli.main import cli, main

__all__ = ["cli", "main"]
