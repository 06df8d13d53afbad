"""In-memory XML document tree.

Key Components:
    XMLElement: Element node with name, value, attributes, and ordered children
    XMLDocument: Document wrapper carrying options and the XML declaration
    XMLTreeBuilder: lxml parser target that builds a tree from parse events
    escape_xml / to_xml / to_xml_compact: XML text rendering
"""

from .builder import XMLTreeBuilder
from .document import XMLDocument
from .element import NodeRole, XMLElement
from .serializer import escape_xml, to_xml, to_xml_compact
from .values import as_bool, as_decimal, as_float, as_int, as_string

__all__ = [
    "NodeRole",
    "XMLDocument",
    "XMLElement",
    "XMLTreeBuilder",
    "as_bool",
    "as_decimal",
    "as_float",
    "as_int",
    "as_string",
    "escape_xml",
    "to_xml",
    "to_xml_compact",
]
