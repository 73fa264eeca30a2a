"""Command-line interface for jayson."""

from jayson.cli.parser import CLIParser
from jayson.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
