"""Command-line interface for extscaffold."""

from extscaffold.cli.app import main
from extscaffold.cli.parser import build_parser

__all__ = ["build_parser", "main"]
