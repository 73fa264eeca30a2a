"""Report command: validate one file and render a report."""

from argparse import Namespace
from pathlib import Path

from jayson.logger import get_logger
from jayson.report import ReportOptions

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ReportHandler(BaseCommandHandler):
    """Validate a file and print or write the report."""

    def execute(self, args: Namespace) -> int:
        file = Path(args.file)
        if not file.is_file():
            print(f"❌ File not found: {args.file}")
            return 1

        if args.all and not args.output:
            print("❌ --output directory is required when using --all")
            return 1

        schema_path = self.resolve_schema(args.schema)
        maker = self.make_maker(schema_path)
        result = maker.validate_file(file, schema_path)
        options = ReportOptions(
            title=f"Validation Report: {file.name}",
            file_path=args.file,
            schema_path=args.schema,
        )

        if args.all:
            paths = maker.generate_all_formats(
                result, args.output, f"{file.stem}-report", options
            )
            print("✅ Generated reports:")
            for path in paths:
                print(f"  {path}")
        elif args.output:
            path = maker.generate_report(
                result, args.output, args.format, options
            )
            print(f"✅ Generated: {path}")
        else:
            print(maker.format_report(result, args.format, options))

        logger.debug("Report for %s: valid=%s", file, result.valid)
        return 0 if result.valid else 1
