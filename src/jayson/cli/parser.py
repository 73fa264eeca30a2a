"""CLI argument parser for jayson.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace

from jayson.report import ReportFormat


class CLIParser:
    """Command-line argument parser for jayson."""

    def __init__(self, default_format: str = ReportFormat.TERMINAL.value):
        """Initialize the CLI parser.

        Args:
            default_format: Report format used when --format is omitted

        """
        self.default_format = default_format

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; defaults to ``sys.argv[1:]``

        Returns:
            Parsed arguments namespace

        """
        return self.build().parse_args(argv)

    def build(self) -> argparse.ArgumentParser:
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="jayson",
            description="jayson - JSON Schema utility tool",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s init
  %(prog)s validate data.json --schema schema.json
  %(prog)s report data.json --schema schema.json --format html
  %(prog)s generate schema.json --output ./types
  %(prog)s template schema.json --output data.json
  %(prog)s detect schema.json
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show jayson version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_init_command(subparsers)
        self._add_validate_command(subparsers)
        self._add_report_command(subparsers)
        self._add_generate_command(subparsers)
        self._add_template_command(subparsers)
        self._add_detect_command(subparsers)
        self._add_check_command(subparsers)

    def _add_init_command(self, subparsers) -> None:
        init_parser = subparsers.add_parser(
            "init",
            help="Create jayson.json and a json-schema/ directory",
        )
        init_parser.add_argument(
            "-d",
            "--dir",
            default=".",
            help="Target directory (default: current directory)",
        )
        init_parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing jayson.json",
        )

    def _add_validate_command(self, subparsers) -> None:
        validate_parser = subparsers.add_parser(
            "validate",
            help="Validate JSON files against a schema",
            epilog="""
Examples:
  %(prog)s data.json --schema schema.json
  %(prog)s a.json b.json c.json -s schema.json --quiet
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        validate_parser.add_argument(
            "files", nargs="+", help="JSON files to validate"
        )
        validate_parser.add_argument(
            "-s", "--schema", required=True, help="Schema file"
        )
        validate_parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Only print failures",
        )

    def _add_report_command(self, subparsers) -> None:
        report_parser = subparsers.add_parser(
            "report",
            help="Generate a validation report",
            epilog="""
Examples:
  %(prog)s data.json -s schema.json
  %(prog)s data.json -s schema.json --format markdown -o report.md
  %(prog)s data.json -s schema.json --all -o ./reports
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        report_parser.add_argument("file", help="JSON file to validate")
        report_parser.add_argument(
            "-s", "--schema", required=True, help="Schema file"
        )
        report_parser.add_argument(
            "-f",
            "--format",
            choices=[f.value for f in ReportFormat],
            default=self.default_format,
            help="Report format (default: %(default)s)",
        )
        report_parser.add_argument(
            "-o",
            "--output",
            help="Output file, or directory when --all is given",
        )
        report_parser.add_argument(
            "-a",
            "--all",
            action="store_true",
            help="Write the report in every format",
        )

    def _add_generate_command(self, subparsers) -> None:
        generate_parser = subparsers.add_parser(
            "generate",
            aliases=["gen"],
            help="Generate TypeScript/JavaScript types from a schema",
        )
        generate_parser.add_argument("schema", help="Schema file")
        generate_parser.add_argument(
            "-o", "--output", help="Output directory"
        )
        generate_parser.add_argument(
            "-n", "--name", help="Exported type name and file base name"
        )
        target = generate_parser.add_mutually_exclusive_group()
        target.add_argument(
            "-t",
            "--typescript",
            action="store_true",
            help="Only generate TypeScript",
        )
        target.add_argument(
            "-j",
            "--javascript",
            action="store_true",
            help="Only generate JavaScript",
        )
        generate_parser.add_argument(
            "--no-comments",
            action="store_true",
            help="Omit descriptions from the generated code",
        )
        generate_parser.add_argument(
            "--no-timestamp",
            action="store_true",
            help="Omit the generation time from file headers",
        )

    def _add_template_command(self, subparsers) -> None:
        template_parser = subparsers.add_parser(
            "template",
            help="Create a default document from a schema",
        )
        template_parser.add_argument("schema", help="Schema file")
        template_parser.add_argument(
            "-o", "--output", help="Write to a file instead of stdout"
        )

    def _add_detect_command(self, subparsers) -> None:
        detect_parser = subparsers.add_parser(
            "detect",
            help="Detect the JSON Schema version a schema declares",
        )
        detect_parser.add_argument("file", help="Schema file")

    def _add_check_command(self, subparsers) -> None:
        check_parser = subparsers.add_parser(
            "check",
            help="Check schema files against the draft-07 meta-schema",
        )
        check_parser.add_argument("schemas", nargs="+", help="Schema files")
