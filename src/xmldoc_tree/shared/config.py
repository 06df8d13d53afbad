"""Configuration classes for XML document trees.

This module provides the option objects consumed by documents and the parser
feed: the XML declaration written in front of a serialized document, the
parser settings, and the key-path subscripting switch.
"""

import json
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

_VALID_STANDALONE = ("yes", "no")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, ValueError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class DocumentHeader:
    """XML declaration emitted in front of a serialized document."""

    version: str = "1.0"
    encoding: str = "utf-8"
    standalone: Optional[str] = "no"

    def __post_init__(self) -> None:
        """Validate header values."""
        if not self.version:
            raise ConfigValidationError("version cannot be empty", "version")
        if not self.encoding:
            raise ConfigValidationError("encoding cannot be empty", "encoding")
        if self.standalone is not None and self.standalone not in _VALID_STANDALONE:
            raise ConfigValidationError(
                f"standalone must be one of {list(_VALID_STANDALONE)} or None",
                "standalone",
                suggestions=list(_VALID_STANDALONE),
            )

    @property
    def xml_string(self) -> str:
        """The declaration as it appears on the first line of a document."""
        declaration = f'<?xml version="{self.version}" encoding="{self.encoding}"'
        if self.standalone is not None:
            declaration += f' standalone="{self.standalone}"'
        return declaration + "?>"


@dataclass(frozen=True)
class ParserSettings:
    """Settings applied while feeding parser events into a tree."""

    should_process_namespaces: bool = False
    should_trim_whitespace: bool = True
    should_resolve_external_entities: bool = False


@dataclass(frozen=True)
class DocumentOptions:
    """Document-level options.

    Instances are immutable and are handed down from the document to the
    elements below it, so two documents with different options can coexist.
    """

    header: DocumentHeader = field(default_factory=DocumentHeader)
    parser_settings: ParserSettings = field(default_factory=ParserSettings)
    subscript_follows_key_path: bool = False

    def __post_init__(self) -> None:
        """Validate nested option types."""
        if not isinstance(self.header, DocumentHeader):
            raise ConfigValidationError(
                "header must be a DocumentHeader instance", "header"
            )
        if not isinstance(self.parser_settings, ParserSettings):
            raise ConfigValidationError(
                "parser_settings must be a ParserSettings instance",
                "parser_settings",
            )

    @classmethod
    def strict(cls) -> "DocumentOptions":
        """Options where ``element[key]`` only ever matches a direct child."""
        return cls(subscript_follows_key_path=False)

    @classmethod
    def lenient(cls) -> "DocumentOptions":
        """Options where ``element["a.b.c"]`` walks a dotted key path."""
        return cls(subscript_follows_key_path=True)

    def override(self, **kwargs: Any) -> "DocumentOptions":
        """Return a copy with the given top-level fields replaced.

        Raises:
            ConfigValidationError: If an unknown field name is given
        """
        known = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in known:
                raise ConfigValidationError(
                    f"Unknown option: {key}", key, suggestions=sorted(known)
                )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize options to JSON."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentOptions":
        """Build options from a dictionary produced by ``to_dict``."""
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Invalid options data: expected an object, got {type(data).__name__}"
            )
        try:
            return cls(
                header=DocumentHeader(**data.get("header", {})),
                parser_settings=ParserSettings(**data.get("parser_settings", {})),
                subscript_follows_key_path=bool(
                    data.get("subscript_follows_key_path", False)
                ),
            )
        except TypeError as e:
            raise ConfigValidationError(f"Invalid options data: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "DocumentOptions":
        """Build options from a JSON string produced by ``to_json``."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON: {e}") from e
        return cls.from_dict(data)
