"""Exception types for XML document tree operations.

Lookups on the tree report a miss by returning ``None``; the exceptions here
are raised only by the strict helpers (``require``/``require_root``), by
element construction, and by the parser feed.
"""

from typing import Optional


class XMLTreeError(Exception):
    """Base exception for all xmldoc_tree errors."""


class InvalidNameError(XMLTreeError, ValueError):
    """Raised when an element is constructed with an empty name."""


class ElementNotFoundError(XMLTreeError, LookupError):
    """Raised by strict lookups when a child element does not exist."""

    def __init__(self, name: str, parent_name: Optional[str] = None) -> None:
        if parent_name is None:
            message = f"Element '{name}' not found"
        else:
            message = f"Element '{name}' not found under '{parent_name}'"
        super().__init__(message)
        self.name = name
        self.parent_name = parent_name


class RootElementMissingError(XMLTreeError):
    """Raised when a document without a root element is asked for one."""


class XMLParseError(XMLTreeError):
    """Raised when XML text cannot be parsed into a document tree."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
