"""Command-line interface for GridGrep."""

from gridgrep.cli.parser import create_parser

__all__ = ["create_parser"]
