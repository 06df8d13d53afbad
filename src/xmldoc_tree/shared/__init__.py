"""Shared utilities for XML document trees.

This module provides the configuration objects, exception types, and logging
helpers used across the tree, API, and CLI layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    DocumentHeader,
    DocumentOptions,
    ParserSettings,
)
from .errors import (
    ElementNotFoundError,
    InvalidNameError,
    RootElementMissingError,
    XMLParseError,
    XMLTreeError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DocumentHeader",
    "DocumentOptions",
    "ParserSettings",
    "ElementNotFoundError",
    "InvalidNameError",
    "RootElementMissingError",
    "XMLParseError",
    "XMLTreeError",
    "CorrelationLogger",
    "get_logger",
]
