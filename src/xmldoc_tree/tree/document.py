"""Document wrapper above the root element.

The document carries the options that apply to the whole tree and renders the
XML declaration in front of its root element.
"""

from typing import Optional, Union

from xmldoc_tree.shared import (
    DocumentOptions,
    RootElementMissingError,
    XMLParseError,
)

from .builder import XMLTreeBuilder
from .element import NodeRole, XMLElement
from .serializer import to_document_xml

DOCUMENT_NAME = "#document"


class XMLDocument(XMLElement):
    """Root XML document container.

    The parsed or assigned root element is the first child of the document.
    Elements below the document find it through their ``document`` property
    and read ``options`` from it.

    Examples:
        >>> document = XMLDocument(XMLElement("catalog"))
        >>> document.root.name
        'catalog'
        >>> document.xml
        '<?xml version="1.0" encoding="utf-8" standalone="no"?>\\n<catalog />'
    """

    def __init__(
        self,
        root: Optional[XMLElement] = None,
        options: Optional[DocumentOptions] = None
    ) -> None:
        super().__init__(DOCUMENT_NAME)
        self.role = NodeRole.DOCUMENT
        self.options = options or DocumentOptions()
        if root is not None:
            self.add_child(root)

    @classmethod
    def from_xml(
        cls,
        data: Union[str, bytes],
        options: Optional[DocumentOptions] = None,
        correlation_id: Optional[str] = None
    ) -> "XMLDocument":
        """Create a document from XML text or bytes.

        Raises:
            XMLParseError: If the data is not well-formed XML
        """
        document = cls(options=options)
        document.load_xml(data, correlation_id)
        return document

    @property
    def root(self) -> Optional[XMLElement]:
        """Root element, or None when the document is empty."""
        return self.children[0] if self.children else None

    def require_root(self) -> XMLElement:
        """Root element.

        Raises:
            RootElementMissingError: If the document has no root element
        """
        root = self.root
        if root is None:
            raise RootElementMissingError("Document has no root element")
        return root

    def load_xml(
        self,
        data: Union[str, bytes],
        correlation_id: Optional[str] = None
    ) -> None:
        """Replace the document content with the tree parsed from ``data``.

        On a parse failure the document is left empty.

        Raises:
            XMLParseError: If the data is not well-formed XML
        """
        for child in list(self.children):
            child.remove_from_parent()

        builder = XMLTreeBuilder(self, self.options.parser_settings, correlation_id)
        try:
            builder.feed(data)
        except XMLParseError:
            for child in list(self.children):
                child.remove_from_parent()
            raise

    @property
    def xml(self) -> str:
        """XML declaration followed by the indented root element."""
        return to_document_xml(self.options.header.xml_string, self.children)
