"""Main CLI entry point for the xmldoc-tree command-line tool.

Provides two commands: ``show`` re-serializes a document (indented or
compact) and ``get`` prints the element or typed value at a key path.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xmldoc_tree import __version__
from xmldoc_tree.api import parse_bytes
from xmldoc_tree.shared import (
    ConfigError,
    DocumentOptions,
    ParserSettings,
    XMLParseError,
    get_logger,
)
from xmldoc_tree.tree import XMLDocument, as_bool, as_float, as_int, as_string

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2

VALUE_FORMATTERS = {
    "string": as_string,
    "int": as_int,
    "float": as_float,
    "bool": lambda element: "true" if as_bool(element) else "false",
}

logger = get_logger(__name__, None, "cli")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xmldoc-tree",
        description="Read, query and re-serialize XML documents"
    )

    parser.add_argument("--version", action="version", version=__version__)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "file",
        help="XML file to read ('-' for stdin)"
    )
    common.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON file with document options"
    )
    common.add_argument(
        "--process-namespaces",
        action="store_true",
        help="Use local names and record namespace URIs"
    )
    common.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Do not trim whitespace around element values"
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_parser = subparsers.add_parser(
        "show", parents=[common], help="Print the document as XML"
    )
    show_parser.add_argument(
        "--compact",
        action="store_true",
        help="Print without newlines and indentation"
    )
    show_parser.add_argument(
        "--no-header",
        action="store_true",
        help="Print the root element without the XML declaration"
    )

    get_parser = subparsers.add_parser(
        "get", parents=[common], help="Print the element at a key path"
    )
    get_parser.add_argument(
        "path",
        help="Dotted key path below the root element, e.g. 'channel.item.title'"
    )
    get_parser.add_argument(
        "--as",
        dest="value_type",
        choices=sorted(VALUE_FORMATTERS),
        help="Print the element value converted to this type"
    )
    get_parser.add_argument(
        "--compact",
        action="store_true",
        help="Print the element without newlines and indentation"
    )

    return parser


def load_options(args: argparse.Namespace) -> DocumentOptions:
    """Build document options from the config file and command-line flags."""
    options = DocumentOptions()
    if args.config is not None:
        options = DocumentOptions.from_json(args.config.read_text())

    settings = options.parser_settings
    if args.process_namespaces or args.keep_whitespace:
        settings = ParserSettings(
            should_process_namespaces=(
                args.process_namespaces or settings.should_process_namespaces
            ),
            should_trim_whitespace=(
                settings.should_trim_whitespace and not args.keep_whitespace
            ),
            should_resolve_external_entities=settings.should_resolve_external_entities,
        )
    return options.override(parser_settings=settings)


def read_document(args: argparse.Namespace) -> XMLDocument:
    """Parse the file named on the command line."""
    options = load_options(args)
    if args.file == "-":
        content = sys.stdin.buffer.read()
    else:
        content = Path(args.file).read_bytes()
    return parse_bytes(content, options)


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the show command."""
    document = read_document(args)
    node = document.require_root() if args.no_header else document
    print(node.xml_compact if args.compact else node.xml)
    return EXIT_OK


def cmd_get(args: argparse.Namespace) -> int:
    """Handle the get command."""
    document = read_document(args)
    element = document.require_root().at_path(args.path)

    if element is None:
        print(f"Element not found: {args.path}", file=sys.stderr)
        return EXIT_NOT_FOUND

    if args.value_type:
        print(VALUE_FORMATTERS[args.value_type](element))
    else:
        print(element.xml_compact if args.compact else element.xml)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.command == "show":
            return cmd_show(args)
        return cmd_get(args)

    except XMLParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except (ConfigError, OSError) as e:
        logger.warning("Could not read input", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error("Command failed", extra={"command": args.command, "error": str(e)})
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
