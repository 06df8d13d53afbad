"""XML Document Tree.

An in-memory XML document model: a mutable tree of named, attributed, valued
elements with name and key-path navigation, lenient typed values, and
round-trip serialization to indented or compact XML text.

Entry points:
- Parse: parse(), parse_string(), parse_bytes(), parse_file()
- Build: XMLElement, XMLDocument
- Configure: DocumentOptions, DocumentHeader, ParserSettings
"""

__version__ = "0.1.0"
__author__ = "xmldoc-tree developers"

from .api import parse, parse_bytes, parse_file, parse_string
from .shared.config import DocumentHeader, DocumentOptions, ParserSettings
from .shared.errors import (
    ElementNotFoundError,
    InvalidNameError,
    RootElementMissingError,
    XMLParseError,
    XMLTreeError,
)
from .tree import XMLDocument, XMLElement, escape_xml

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Parsing functions
    "parse",
    "parse_bytes",
    "parse_file",
    "parse_string",

    # Tree objects
    "XMLDocument",
    "XMLElement",
    "escape_xml",

    # Configuration
    "DocumentHeader",
    "DocumentOptions",
    "ParserSettings",

    # Errors
    "ElementNotFoundError",
    "InvalidNameError",
    "RootElementMissingError",
    "XMLParseError",
    "XMLTreeError",
]
