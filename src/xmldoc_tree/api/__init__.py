"""Public parsing API for XML document trees."""

from .parser import parse, parse_bytes, parse_file, parse_string

__all__ = [
    "parse",
    "parse_bytes",
    "parse_file",
    "parse_string",
]
