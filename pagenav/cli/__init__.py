"""Pagination engine CLI.

A small command-line front end built with Click and Rich.
"""

from pagenav.cli.main import cli

__all__ = ["cli"]
