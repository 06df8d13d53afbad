"""Parsing entry points that turn XML input into an XMLDocument.

``parse`` detects the input type and routes it to ``parse_string``,
``parse_bytes`` or ``parse_file``.
"""

import time
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from xmldoc_tree.shared import DocumentOptions, get_logger
from xmldoc_tree.tree import XMLDocument

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]

MS_PER_SECOND = 1000


def parse(
    input_data: InputType,
    options: Optional[DocumentOptions] = None,
    correlation_id: Optional[str] = None
) -> XMLDocument:
    """Parse XML from a string, bytes, path, or file-like object.

    Args:
        input_data: XML content as string, bytes, file-like object, or Path
        options: Document options (parser settings, header, key paths)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        XMLDocument holding the parsed tree

    Raises:
        XMLParseError: If the input is not well-formed XML
        TypeError: If the input type is not supported

    Examples:
        >>> document = parse('<root><item>value</item></root>')
        >>> document.root["item"].value
        'value'
    """
    if isinstance(input_data, str):
        return parse_string(input_data, options, correlation_id)
    if isinstance(input_data, bytes):
        return parse_bytes(input_data, options, correlation_id)
    if isinstance(input_data, Path):
        return parse_file(input_data, options, correlation_id)
    if hasattr(input_data, "read"):
        return _parse_content(
            input_data.read(), options, correlation_id, "file_object"
        )
    raise TypeError(f"Unsupported input type: {type(input_data).__name__}")


def parse_string(
    xml_string: str,
    options: Optional[DocumentOptions] = None,
    correlation_id: Optional[str] = None
) -> XMLDocument:
    """Parse XML from a string.

    Examples:
        >>> document = parse_string('<root><item id="1">Hello</item></root>')
        >>> document.root["item"].attributes["id"]
        '1'
    """
    return _parse_content(xml_string, options, correlation_id, "string")


def parse_bytes(
    xml_bytes: bytes,
    options: Optional[DocumentOptions] = None,
    correlation_id: Optional[str] = None
) -> XMLDocument:
    """Parse XML from bytes, honoring the encoding declaration."""
    return _parse_content(xml_bytes, options, correlation_id, "bytes")


def parse_file(
    file_path: Union[str, Path],
    options: Optional[DocumentOptions] = None,
    correlation_id: Optional[str] = None
) -> XMLDocument:
    """Parse XML from a file path.

    Raises:
        FileNotFoundError: If the file does not exist
        XMLParseError: If the file is not well-formed XML
    """
    path = Path(file_path)
    return _parse_content(path.read_bytes(), options, correlation_id, "file")


def _parse_content(
    content: Union[str, bytes],
    options: Optional[DocumentOptions],
    correlation_id: Optional[str],
    source: str
) -> XMLDocument:
    start_time = time.time()
    logger = get_logger(__name__, correlation_id, "parse")

    logger.info(
        "Starting parse operation",
        extra={"source": source, "content_length": len(content)}
    )

    document = XMLDocument.from_xml(content, options, correlation_id)

    logger.info(
        "Parse operation completed",
        extra={
            "source": source,
            "root": document.root.name if document.root is not None else None,
            "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
        }
    )
    return document
