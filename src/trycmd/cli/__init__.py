"""Command-line interface for trycmd."""

from trycmd.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
