"""Tree building from XML parser events.

``XMLTreeBuilder`` is an lxml parser target: lxml calls ``start``, ``data``,
``end`` and ``close`` in document order and the builder turns them into
``add_child`` calls and ``value`` updates on the tree below a document.
"""

from typing import Dict, List, Optional, Tuple, Union

from lxml import etree

from xmldoc_tree.shared import ParserSettings, XMLParseError, get_logger

from .element import XMLElement

XML_NAMESPACE_ATTRIBUTE = "xmlns"
XML_NAMESPACE_URI = "http://www.w3.org/XML/1998/namespace"


def split_clark_name(tag: str) -> Tuple[Optional[str], str]:
    """Split lxml's ``{uri}local`` notation into (uri, local name)."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return None, tag


class XMLTreeBuilder:
    """Parser target that appends parsed elements below a parent node.

    Only the public tree surface is used: each start event calls
    ``add_child`` on the current insertion point and character data is
    written to ``value`` of the element opened last. Text that follows a
    closed child element is not attached to any element.
    """

    def __init__(
        self,
        parent: XMLElement,
        settings: Optional[ParserSettings] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize tree builder.

        Args:
            parent: Node the parsed top-level element is appended to
            settings: Namespace and whitespace handling
            correlation_id: Optional correlation ID for request tracking
        """
        self.parent = parent
        self.settings = settings or ParserSettings()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "xml_tree_builder")

        self._insertion_point: XMLElement = parent
        self._current_element: Optional[XMLElement] = None
        self._text_buffer: List[str] = []
        self._namespace_scopes: List[Dict[Optional[str], str]] = []
        self._elements_created = 0

    # lxml parser target interface

    def start(
        self,
        tag: str,
        attrib: Dict[str, str],
        nsmap: Optional[Dict[Optional[str], str]] = None
    ) -> None:
        """Open an element below the current insertion point."""
        # The default namespace arrives under None or "" depending on the lxml version
        declared = dict(nsmap or {})
        self._namespace_scopes.append(declared)

        uri, local = split_clark_name(tag)
        qualified = self._qualify(uri, local)

        attributes: Dict[str, str] = {}
        if not self.settings.should_process_namespaces:
            for prefix, namespace in declared.items():
                key = (
                    XML_NAMESPACE_ATTRIBUTE if not prefix
                    else f"{XML_NAMESPACE_ATTRIBUTE}:{prefix}"
                )
                attributes[key] = namespace
        for key, value in attrib.items():
            attr_uri, attr_local = split_clark_name(key)
            attributes[self._qualify(attr_uri, attr_local, attribute=True)] = value

        if self.settings.should_process_namespaces:
            element = self._insertion_point.add_child(
                local,
                namespace_uri=uri,
                qualified_name=qualified,
                attributes=attributes,
            )
        else:
            element = self._insertion_point.add_child(qualified, attributes=attributes)

        self._elements_created += 1
        self._insertion_point = element
        self._current_element = element
        self._text_buffer.clear()

    def data(self, text: str) -> None:
        """Append character data to the element opened last."""
        if self._current_element is None:
            return
        self._text_buffer.append(text)
        value = "".join(self._text_buffer)
        if self.settings.should_trim_whitespace:
            value = value.strip()
        self._current_element.value = value or None

    def end(self, tag: str) -> None:
        """Close the element at the current insertion point."""
        self._namespace_scopes.pop()
        parent = self._insertion_point.parent
        self._insertion_point = parent if parent is not None else self.parent
        self._current_element = None
        self._text_buffer.clear()

    def close(self) -> XMLElement:
        """Finish the feed and return the node elements were added to."""
        self.logger.debug(
            "Tree building completed",
            extra={"element_count": self._elements_created}
        )
        return self.parent

    # Feeding

    def feed(self, data: Union[str, bytes]) -> XMLElement:
        """Parse ``data`` completely, building the tree as events arrive.

        Raises:
            XMLParseError: If the data is not well-formed XML
        """
        self.logger.debug(
            "Starting tree building",
            extra={"content_length": len(data), "input_type": type(data).__name__}
        )

        if not data.strip():
            raise XMLParseError("Malformed XML: document is empty", 1, 1)

        parser_options = {
            "target": self,
            "no_network": True,
            "resolve_entities": (
                True if self.settings.should_resolve_external_entities
                else "internal"
            ),
        }
        if isinstance(data, str):
            # lxml rejects str input that carries an encoding declaration
            data = data.encode("utf-8")
            parser_options["encoding"] = "utf-8"

        parser = etree.XMLParser(**parser_options)
        try:
            return etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            line, column = getattr(e, "position", (None, None))
            self.logger.warning(
                "Tree building failed",
                extra={
                    "error": str(e),
                    "line": line,
                    "column": column,
                    "element_count": self._elements_created,
                }
            )
            raise XMLParseError(f"Malformed XML: {e}", line, column) from e

    def _qualify(self, uri: Optional[str], local: str, attribute: bool = False) -> str:
        if uri is None:
            return local
        if uri == XML_NAMESPACE_URI:
            return f"xml:{local}"
        for scope in reversed(self._namespace_scopes):
            for prefix, namespace in scope.items():
                if namespace != uri:
                    continue
                if prefix:
                    return f"{prefix}:{local}"
                if not attribute:
                    return local
        return local
