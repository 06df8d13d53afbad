"""XML text rendering for element trees.

The indented form writes one tab per element ancestor and closes elements in
one of three shapes: ``<a />`` (no value, no children), ``<a>text</a>``
value form, or a block with one child per line. The compact form is the
indented form with every newline and tab removed, so the two never disagree.
"""

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .element import XMLElement

INDENT = "\t"

# "&" must stay first so the entities added below are not escaped again
_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
)

_COMPACT_STRIP = str.maketrans("", "", "\n\t")


def escape_xml(text: str) -> str:
    """Escape the five XML special characters in text or attribute values.

    Examples:
        >>> escape_xml("a & b")
        'a &amp; b'
        >>> escape_xml("<tag>")
        '&lt;tag&gt;'
    """
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def to_xml(element: "XMLElement") -> str:
    """Render ``element`` and its subtree as indented XML text."""
    parts: List[str] = []
    _render(element, element.depth, parts)
    return "".join(parts)


def to_xml_compact(element: "XMLElement") -> str:
    """Render ``element`` as XML text without newlines or tabs."""
    return strip_layout(element.xml)


def strip_layout(xml: str) -> str:
    """Remove every newline and tab character from rendered XML."""
    return xml.translate(_COMPACT_STRIP)


def to_document_xml(header: str, roots: List["XMLElement"]) -> str:
    """Render a document: the XML declaration, then each top-level element."""
    return "\n".join([header] + [to_xml(root) for root in roots])


def _render(element: "XMLElement", depth: int, parts: List[str]) -> None:
    indent = INDENT * depth

    parts.append(f"{indent}<{element.name}")
    for key, value in element.attributes.items():
        parts.append(f' {key}="{escape_xml(value)}"')

    if element.children:
        parts.append(">\n")
        for child in element.children:
            _render(child, depth + 1, parts)
            parts.append("\n")
        parts.append(f"{indent}</{element.name}>")
    elif element.value is None:
        parts.append(" />")
    else:
        parts.append(f">{escape_xml(element.value)}</{element.name}>")
