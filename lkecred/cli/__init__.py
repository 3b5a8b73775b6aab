"""CLI forwarding module to allow `from lkecred.cli import main`."""

from cli.main import app, build_parser, main

__all__ = ["app", "build_parser", "main"]
