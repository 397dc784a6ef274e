"""Command line interface for docrepo."""

from .main import create_parser, main, run

__all__ = ["create_parser", "main", "run"]
