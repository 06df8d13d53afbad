"""Element node of the XML document tree.

A parent owns its children through its ``children`` list; a child only keeps a
weak reference back to its parent. Detaching a child clears that reference and
leaves the child as the root of its own subtree.
"""

import weakref
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from xmldoc_tree.shared.errors import ElementNotFoundError, InvalidNameError

from . import serializer, values

if TYPE_CHECKING:
    from .document import XMLDocument

KEY_PATH_SEPARATOR = "."


class NodeRole(Enum):
    """Role of a node within a tree."""

    ELEMENT = auto()    # Regular XML element
    DOCUMENT = auto()   # Document wrapper above the root element


@dataclass(eq=False)
class XMLElement:
    """Represents a single XML element in the document tree.

    Elements compare by identity. Name lookups (``first_child``, ``all`` and
    subscripting) match names exactly and case-sensitively, and report a miss
    by returning ``None``.

    Examples:
        >>> note = XMLElement("note")
        >>> to = note.add_child("to", "Tove")
        >>> note["to"] is to
        True
        >>> note["to"].value
        'Tove'
        >>> note["from"] is None
        True
    """

    name: str
    value: Optional[str] = None
    namespace_uri: Optional[str] = None
    qualified_name: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["XMLElement"] = field(default_factory=list)
    role: NodeRole = field(default=NodeRole.ELEMENT, init=False, repr=False)
    _parent_ref: Optional["weakref.ReferenceType[XMLElement]"] = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Validate the name and establish parent relationships for children."""
        if not self.name:
            raise InvalidNameError("Element name cannot be empty")

        for child in self.children:
            child._parent_ref = weakref.ref(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, value={self.value!r}, "
            f"attributes={self.attributes!r}, children={len(self.children)})"
        )

    # Tree structure

    @property
    def parent(self) -> Optional["XMLElement"]:
        """Containing element, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def document(self) -> Optional["XMLDocument"]:
        """Nearest document wrapper above this node (or this node itself)."""
        node: Optional[XMLElement] = self
        while node is not None:
            if node.role is NodeRole.DOCUMENT:
                return node  # type: ignore[return-value]
            node = node.parent
        return None

    @property
    def depth(self) -> int:
        """Number of element ancestors; a document wrapper is not counted."""
        depth = 0
        node = self.parent
        while node is not None:
            if node.role is NodeRole.ELEMENT:
                depth += 1
            node = node.parent
        return depth

    # Lookup

    def _document_follows_key_path(self) -> bool:
        document = self.document
        return document is not None and document.options.subscript_follows_key_path

    def first_child(self, name: str) -> Optional["XMLElement"]:
        """First direct child named ``name``, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def child(
        self, key: str, follow_key_path: Optional[bool] = None
    ) -> Optional["XMLElement"]:
        """Look up a child by name, or by dotted key path when enabled.

        Args:
            key: Child name, or a dotted key path such as ``"a.b.c"``
            follow_key_path: Whether to split ``key`` on dots. When None, the
                owning document's ``subscript_follows_key_path`` option decides
                (off when the element is not part of a document).

        Returns:
            The matching element, or None
        """
        if follow_key_path is None:
            follow_key_path = self._document_follows_key_path()
        if follow_key_path:
            return self.at_path(key)
        return self.first_child(key)

    def __getitem__(self, key: str) -> Optional["XMLElement"]:
        return self.child(key)

    def at_path(self, key_path: str) -> Optional["XMLElement"]:
        """Resolve a dotted key path one child name at a time.

        Stops at the first segment that has no matching child.
        """
        node: Optional[XMLElement] = self
        for segment in key_path.split(KEY_PATH_SEPARATOR):
            node = node.first_child(segment)
            if node is None:
                return None
        return node

    def require(
        self, key: str, follow_key_path: Optional[bool] = None
    ) -> "XMLElement":
        """Like ``child`` but raises ElementNotFoundError on a miss.

        Raises:
            ElementNotFoundError: Naming the first segment that did not resolve
        """
        if follow_key_path is None:
            follow_key_path = self._document_follows_key_path()
        segments = key.split(KEY_PATH_SEPARATOR) if follow_key_path else [key]

        node = self
        for segment in segments:
            found = node.first_child(segment)
            if found is None:
                raise ElementNotFoundError(segment, node.name)
            node = found
        return node

    # Same-name siblings

    @property
    def all(self) -> List["XMLElement"]:
        """Siblings sharing this element's name, self included, in document order."""
        parent = self.parent
        if parent is None:
            return [self]
        return [child for child in parent.children if child.name == self.name]

    @property
    def first(self) -> "XMLElement":
        """First sibling sharing this element's name.

        An element that was dropped from ``parent.children`` without going
        through ``remove_child`` is its own first sibling.
        """
        parent = self.parent
        if parent is None:
            return self
        found = parent.first_child(self.name)
        return found if found is not None else self

    @property
    def last(self) -> "XMLElement":
        """Last sibling sharing this element's name."""
        return self.all[-1]

    @property
    def count(self) -> int:
        """Number of siblings sharing this element's name, self included."""
        return len(self.all)

    def all_with_value(self, value: str) -> List["XMLElement"]:
        """Same-name siblings whose value equals ``value`` exactly."""
        return [element for element in self.all if element.value == value]

    def all_with_attributes(self, attributes: Dict[str, str]) -> List["XMLElement"]:
        """Same-name siblings carrying every given attribute with the given value.

        Extra attributes on a candidate do not prevent a match.
        """
        return [
            element for element in self.all
            if all(
                key in element.attributes and element.attributes[key] == expected
                for key, expected in attributes.items()
            )
        ]

    # Typed values

    @property
    def as_string(self) -> str:
        """Value, or an empty string when there is none."""
        return values.as_string(self)

    @property
    def as_bool(self) -> bool:
        """True for "true" (any case) or "1"."""
        return values.as_bool(self)

    @property
    def as_int(self) -> int:
        """Value as an integer, 0 when it does not parse."""
        return values.as_int(self)

    @property
    def as_int8(self) -> int:
        return values.as_sized_int(self, values.INT8_RANGE)

    @property
    def as_uint8(self) -> int:
        return values.as_sized_int(self, values.UINT8_RANGE)

    @property
    def as_int16(self) -> int:
        return values.as_sized_int(self, values.INT16_RANGE)

    @property
    def as_uint16(self) -> int:
        return values.as_sized_int(self, values.UINT16_RANGE)

    @property
    def as_int32(self) -> int:
        return values.as_sized_int(self, values.INT32_RANGE)

    @property
    def as_uint32(self) -> int:
        return values.as_sized_int(self, values.UINT32_RANGE)

    @property
    def as_int64(self) -> int:
        return values.as_sized_int(self, values.INT64_RANGE)

    @property
    def as_uint64(self) -> int:
        return values.as_sized_int(self, values.UINT64_RANGE)

    @property
    def as_float(self) -> float:
        """Value as a float, 0.0 when it does not parse."""
        return values.as_float(self)

    @property
    def as_decimal(self) -> Decimal:
        """Value as a Decimal, Decimal(0) when it does not parse."""
        return values.as_decimal(self)

    # Mutation

    def add_child(
        self,
        child: Union["XMLElement", str],
        value: Optional[str] = None,
        namespace_uri: Optional[str] = None,
        qualified_name: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None
    ) -> "XMLElement":
        """Append a child and make ``self`` its parent.

        ``child`` is either an element or the name of a new element built from
        the remaining arguments. The child is returned so calls can be chained.

        The child is not detached from a previous parent; call
        ``remove_from_parent`` first when moving an element between trees.
        Attaching an ancestor below one of its descendants is not checked.
        """
        if isinstance(child, str):
            child = XMLElement(
                child,
                value=value,
                namespace_uri=namespace_uri,
                qualified_name=qualified_name,
                attributes=dict(attributes) if attributes else {},
            )
        elif not isinstance(child, XMLElement):
            raise TypeError("Child must be an XMLElement instance or a name")
        elif any(
            arg is not None
            for arg in (value, namespace_uri, qualified_name, attributes)
        ):
            raise TypeError("Element fields cannot be given with an existing child")

        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def remove_child(self, child: "XMLElement") -> bool:
        """Remove a child by identity and clear its parent relationship."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                del self.children[index]
                child._parent_ref = None
                return True
        return False

    def remove_from_parent(self) -> None:
        """Detach this element, with its whole subtree, from its parent."""
        parent = self.parent
        if parent is not None:
            parent.remove_child(self)
        self._parent_ref = None

    # Serialization

    @property
    def xml(self) -> str:
        """This element and its subtree as indented, escaped XML text."""
        return serializer.to_xml(self)

    @property
    def xml_compact(self) -> str:
        """Same as ``xml`` without newline and tab characters."""
        return serializer.strip_layout(self.xml)
