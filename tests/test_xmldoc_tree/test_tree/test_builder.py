"""Tests for building trees from lxml parser events."""

import pytest

from xmldoc_tree.shared import ParserSettings, XMLParseError
from xmldoc_tree.tree import XMLDocument, XMLElement, XMLTreeBuilder
from xmldoc_tree.tree.builder import split_clark_name

NAMESPACED = (
    '<root xmlns="urn:a" xmlns:x="urn:x">'
    '<x:item x:id="1" plain="p">v</x:item>'
    '</root>'
)


def build(data, settings=None) -> XMLDocument:
    """Feed ``data`` into a fresh document through the builder."""
    document = XMLDocument()
    XMLTreeBuilder(document, settings).feed(data)
    return document


class TestSplitClarkName:
    """Test splitting lxml tag names."""

    def test_plain_name(self) -> None:
        """Test a name without namespace."""
        assert split_clark_name("item") == (None, "item")

    def test_namespaced_name(self) -> None:
        """Test the {uri}local notation."""
        assert split_clark_name("{urn:x}item") == ("urn:x", "item")


class TestXMLTreeBuilderEvents:
    """Test the parser target callbacks directly."""

    def test_events_build_nested_tree(self) -> None:
        """Test start/data/end calls attach elements in document order."""
        parent = XMLElement("holder")
        builder = XMLTreeBuilder(parent)

        builder.start("note", {})
        builder.start("to", {"lang": "en"})
        builder.data("Tove")
        builder.end("to")
        builder.start("from", {})
        builder.end("from")
        builder.end("note")

        assert builder.close() is parent
        note = parent["note"]
        assert note.parent is parent
        assert [child.name for child in note.children] == ["to", "from"]
        assert note["to"].value == "Tove"
        assert note["to"].attributes == {"lang": "en"}
        assert note["from"].value is None

    def test_data_chunks_are_joined(self) -> None:
        """Test character data split across events forms one value."""
        parent = XMLElement("holder")
        builder = XMLTreeBuilder(parent)

        builder.start("text", {})
        builder.data("  Hello, ")
        builder.data("world  ")
        builder.end("text")

        assert parent["text"].value == "Hello, world"


class TestXMLTreeBuilderFeed:
    """Test feeding complete XML documents."""

    def test_values_and_attributes(self) -> None:
        """Test a simple document."""
        document = build('<note id="7"><to>Tove</to><from>Jani</from></note>')
        note = document.root

        assert note.name == "note"
        assert note.attributes == {"id": "7"}
        assert note["to"].value == "Tove"
        assert note["from"].value == "Jani"
        assert note.value is None

    def test_repeated_children_keep_order(self) -> None:
        """Test same-name siblings stay in document order."""
        document = build("<r><i>1</i><i>2</i><j /><i>3</i></r>")

        assert [i.value for i in document.root["i"].all] == ["1", "2", "3"]
        assert document.root["i"].count == 3

    def test_whitespace_is_trimmed_by_default(self) -> None:
        """Test surrounding whitespace is removed and blank text is dropped."""
        document = build("<r>\n  <a>  padded  </a>\n  <b>   </b>\n</r>")

        assert document.root.value is None
        assert document.root["a"].value == "padded"
        assert document.root["b"].value is None

    def test_whitespace_is_kept_when_trimming_disabled(self) -> None:
        """Test values are stored verbatim without trimming."""
        settings = ParserSettings(should_trim_whitespace=False)
        document = build("<r><a>  padded  </a></r>", settings)

        assert document.root["a"].value == "  padded  "

    def test_text_after_child_is_not_attached(self) -> None:
        """Test only text before the first closed child becomes the value."""
        document = build("<p>Hello <b>world</b> tail</p>")

        assert document.root.value == "Hello"
        assert document.root["b"].value == "world"

    def test_entities_and_cdata_are_decoded(self) -> None:
        """Test predefined entities and CDATA sections become plain text."""
        document = build(
            "<r><e>&lt;tag&gt; &amp; &apos;q&apos;</e>"
            "<c><![CDATA[x < y && z]]></c></r>"
        )

        assert document.root["e"].value == "<tag> & 'q'"
        assert document.root["c"].value == "x < y && z"

    def test_comments_and_processing_instructions_are_ignored(self) -> None:
        """Test non-element markup does not produce nodes."""
        document = build("<r><!-- note --><?app data?><a>1</a></r>")

        assert [child.name for child in document.root.children] == ["a"]

    def test_bytes_with_encoding_declaration(self) -> None:
        """Test bytes are decoded using the declared encoding."""
        data = '<?xml version="1.0" encoding="ISO-8859-1"?><a>café</a>'.encode(
            "iso-8859-1"
        )

        assert build(data).root.value == "café"

    def test_string_with_encoding_declaration(self) -> None:
        """Test str input is accepted even when it declares an encoding."""
        data = '<?xml version="1.0" encoding="ISO-8859-1"?><a>café</a>'

        assert build(data).root.value == "café"


class TestXMLTreeBuilderNamespaces:
    """Test namespace handling modes."""

    def test_qualified_names_without_namespace_processing(self) -> None:
        """Test prefixes stay in names and declarations stay as attributes."""
        document = build(NAMESPACED)
        root = document.root
        item = root["x:item"]

        assert root.name == "root"
        assert root.attributes == {"xmlns": "urn:a", "xmlns:x": "urn:x"}
        assert root.namespace_uri is None
        assert item.value == "v"
        assert item.attributes == {"x:id": "1", "plain": "p"}

    def test_local_names_with_namespace_processing(self) -> None:
        """Test names become local and namespace details are recorded."""
        settings = ParserSettings(should_process_namespaces=True)
        document = build(NAMESPACED, settings)
        root = document.root
        item = root["item"]

        assert root.name == "root"
        assert root.namespace_uri == "urn:a"
        assert root.qualified_name == "root"
        assert root.attributes == {}
        assert item.namespace_uri == "urn:x"
        assert item.qualified_name == "x:item"
        assert item.attributes == {"x:id": "1", "plain": "p"}

    @pytest.mark.parametrize("default_prefix", [None, ""])
    def test_default_namespace_key_from_target_events(self, default_prefix) -> None:
        """Test the default namespace is recognized under either nsmap key."""
        parent = XMLElement("holder")
        builder = XMLTreeBuilder(parent)

        builder.start("{urn:a}feed", {}, {default_prefix: "urn:a"})
        builder.start("{urn:a}title", {}, {})
        builder.data("t")
        builder.end("{urn:a}title")
        builder.end("{urn:a}feed")

        feed = parent["feed"]
        assert feed.attributes == {"xmlns": "urn:a"}
        assert feed["title"].value == "t"
        assert feed.xml_compact == '<feed xmlns="urn:a"><title>t</title></feed>'

    def test_default_namespace_document_end_to_end(self) -> None:
        """Test a default-namespaced document keeps plain names and reparses."""
        data = '<feed xmlns="http://www.w3.org/2005/Atom"><title>t</title></feed>'
        document = build(data)
        root = document.root

        assert root.name == "feed"
        assert root.attributes == {"xmlns": "http://www.w3.org/2005/Atom"}
        assert root["title"].value == "t"
        assert root.xml_compact == data

        reparsed = build(document.xml)
        assert reparsed.root.xml_compact == data

    def test_default_namespace_with_namespace_processing(self) -> None:
        """Test default-namespaced names stay unprefixed when processing."""
        settings = ParserSettings(should_process_namespaces=True)
        document = build('<feed xmlns="urn:atom"><title>t</title></feed>', settings)
        title = document.root["title"]

        assert title.namespace_uri == "urn:atom"
        assert title.qualified_name == "title"

    def test_xml_prefix_attribute(self) -> None:
        """Test xml:lang keeps its reserved prefix."""
        document = build('<a xml:lang="en" />')

        assert document.root.attributes == {"xml:lang": "en"}

    def test_round_trip_keeps_declarations(self) -> None:
        """Test a namespaced document serializes back with its prefixes."""
        document = build(NAMESPACED)

        reparsed = build(document.root.xml_compact)

        assert reparsed.root.xml_compact == document.root.xml_compact
        assert '<x:item x:id="1" plain="p">v</x:item>' in document.root.xml_compact


class TestXMLTreeBuilderErrors:
    """Test malformed input handling."""

    @pytest.mark.parametrize("data", [
        "<a><b></a>",
        "<a>",
        "not xml",
        "<a></a><b></b>",
    ])
    def test_malformed_input_raises_parse_error(self, data) -> None:
        """Test syntax errors surface as XMLParseError."""
        with pytest.raises(XMLParseError, match="Malformed XML"):
            build(data)

    @pytest.mark.parametrize("data", ["", "   \n", b""])
    def test_empty_input_raises_parse_error(self, data) -> None:
        """Test empty documents are rejected."""
        with pytest.raises(XMLParseError, match="document is empty"):
            build(data)

    def test_parse_error_reports_position(self) -> None:
        """Test line information is carried on the error."""
        with pytest.raises(XMLParseError) as exc_info:
            build("<a>\n<b>\n</a>")

        assert exc_info.value.line is not None
        assert exc_info.value.line >= 1
        assert exc_info.value.__cause__ is not None
