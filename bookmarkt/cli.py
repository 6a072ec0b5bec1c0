"""
Command-line interface for bookmarkt.

This module provides the CLI for converting Netscape bookmark exports
(Firefox, Chrome, Edge) to JSON, re-rendering them as normalized HTML, or
displaying them as a tree.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from bookmarkt import __version__
from bookmarkt.config.pydantic_config import ConfigurationManager, format_config_error
from bookmarkt.core.data_models import Document, Folder, Item
from bookmarkt.core.exporters import ExportError, HTMLExporter, JSONExporter
from bookmarkt.core.netscape_parser import NetscapeError, NetscapeParser
from bookmarkt.utils.logging_setup import setup_logging
from bookmarkt.utils.validation import (
    ValidationError,
    validate_config_file,
    validate_indent,
    validate_input_file,
    validate_output_file,
)

FORMAT_BY_SUFFIX = {".json": "json", ".html": "html", ".htm": "html"}


def build_tree(document: Document) -> Tree:
    """Build a rich Tree mirroring the folder structure of a document."""
    label = document.title or document.heading or "Bookmarks"
    tree = Tree(Text(label, style="bold"))
    _add_items(tree, document.children)
    return tree


def _add_items(branch: Tree, items) -> None:
    for item in items:
        if isinstance(item, Folder):
            sub = branch.add(Text(item.title or "(untitled folder)", style="bold blue"))
            _add_items(sub, item.children)
        else:
            label = Text(item.title or item.href)
            if item.href and item.title:
                label.append(f"  {item.href}", style="dim")
            branch.add(label)


class CLIInterface:
    """Command line interface for bookmarkt."""

    def __init__(self):
        self.parser = self._create_parser()
        self.logger = logging.getLogger(__name__)

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmarkt",
            description=(
                "Convert browser bookmark exports (Netscape bookmark file "
                "format) to JSON or normalized HTML"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmarkt --input bookmarks.html
  bookmarkt --input bookmarks.html --output bookmarks.json --indent 2
  bookmarkt --input firefox.html --output normalized.html
  bookmarkt --input chrome.html --format tree
  bookmarkt --create-config bookmarkt.toml

Output Formats:
  json  JSON projection of the bookmark tree (default)
  html  Netscape bookmark markup, re-rendered from the parsed tree
  tree  Folder tree for the terminal
  When --format is omitted, the --output extension decides, then the
  configuration file.

Configuration:
  Settings are read from --config, or from bookmarkt.toml / bookmarkt.json
  in the current directory. BOOKMARKT_LOG_LEVEL overrides the log level.
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample configuration file (TOML or JSON, by extension) and exit",
        )
        parser.add_argument(
            "--input",
            "-i",
            help="Bookmark export to read (HTML)",
        )
        parser.add_argument(
            "--output",
            "-o",
            help="Output file (default: standard output)",
        )
        parser.add_argument(
            "--format",
            "-f",
            choices=["json", "html", "tree"],
            help="Output format",
        )
        parser.add_argument(
            "--indent",
            type=int,
            help="JSON indentation (default: compact)",
        )
        parser.add_argument(
            "--encoding",
            help="Encoding of the input file (default: utf-8)",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Configuration file path (TOML or JSON)",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Print a summary of the parsed document and log progress",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            ValidationError: If any validation fails
        """
        input_path = validate_input_file(args.input)
        output_path = validate_output_file(args.output)
        config_path = validate_config_file(args.config)
        indent = validate_indent(args.indent)

        output_format = args.format
        if output_format is None and output_path is not None:
            output_format = FORMAT_BY_SUFFIX.get(output_path.suffix.lower())

        return {
            "input_path": input_path,
            "output_path": output_path,
            "config_path": config_path,
            "format": output_format,
            "indent": indent,
            "encoding": args.encoding,
            "verbose": args.verbose,
        }

    def _handle_create_config(self, target: str) -> int:
        """Write a sample configuration file."""
        output_path = Path(target)
        config_format = "json" if output_path.suffix.lower() == ".json" else "toml"

        if output_path.exists():
            print(f"Configuration file already exists: {output_path}", file=sys.stderr)
            return 1

        try:
            ConfigurationManager.create_sample_config(output_path, config_format)
        except OSError as e:
            print(f"Error creating configuration file: {e}", file=sys.stderr)
            return 1

        print(f"Created configuration file: {output_path}")
        return 0

    def _write_output(self, document: Document, config, output_path: Optional[Path]) -> None:
        output_format = config.output.format

        if output_format == "tree":
            tree = build_tree(document)
            if output_path is None:
                Console().print(tree)
            else:
                with open(output_path, "w", encoding="utf-8") as f:
                    Console(file=f, no_color=True, width=120).print(tree)
            return

        if output_format == "html":
            exporter = HTMLExporter()
        else:
            exporter = JSONExporter(
                indent=config.output.json_indent,
                ensure_ascii=config.output.ensure_ascii,
            )

        if output_path is None:
            sys.stdout.write(exporter.render(document))
            sys.stdout.write("\n")
        else:
            exporter.export(document, output_path)

    def _print_summary(self, document: Document, validated_args: dict, config) -> None:
        console = Console(stderr=True)
        stats = document.stats()

        rows = [("Input", str(validated_args["input_path"])), ("Title", document.title)]
        if document.heading != document.title:
            rows.append(("Heading", document.heading))
        rows.append(("Bookmarks", str(stats["bookmarks"])))
        rows.append(("Folders", str(stats["folders"])))
        rows.append(("Format", config.output.format))
        if validated_args["output_path"]:
            rows.append(("Output", str(validated_args["output_path"])))

        for name, value in rows:
            console.print(Text.assemble((f"{name}: ", "bold"), value))

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)

            manager = ConfigurationManager(validated_args["config_path"])
            manager.update_from_cli_args(validated_args)
            config = manager.config

            setup_logging(config)
            self.logger.info("bookmarkt CLI starting")
            self.logger.info(f"Input file: {validated_args['input_path']}")

            parser = NetscapeParser.from_config(config)
            document = parser.parse_file(validated_args["input_path"])

            self._write_output(document, config, validated_args["output_path"])

            if validated_args["verbose"]:
                self._print_summary(document, validated_args, config)

            return 0

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except FileNotFoundError as e:
            print(format_config_error(e), file=sys.stderr)
            return 1
        except (NetscapeError, ExportError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
