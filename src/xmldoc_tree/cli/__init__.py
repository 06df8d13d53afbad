"""Command-line interface for xmldoc-tree."""

from .main import main

__all__ = ["main"]
