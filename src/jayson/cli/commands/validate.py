"""Validate command: check JSON files against a schema."""

from argparse import Namespace
from pathlib import Path

from jayson.logger import get_logger
from jayson.report.base import display_path

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ValidateHandler(BaseCommandHandler):
    """Validate one or more files and print PASS/FAIL per file."""

    def execute(self, args: Namespace) -> int:
        schema_path = self.resolve_schema(args.schema)
        maker = self.make_maker(schema_path)
        failed = 0

        for file in args.files:
            if not Path(file).is_file():
                print(f"❌ File not found: {file}")
                failed += 1
                continue

            result = maker.validate_file(file, schema_path)
            if result.valid:
                if not args.quiet:
                    print(f"✅ PASS {file}")
                continue

            failed += 1
            print(f"❌ FAIL {file}")
            for error in result.errors:
                print(f"  {display_path(error.path)}: {error.message}")

        logger.info(
            "Validated %d file(s) against %s: %d failed",
            len(args.files),
            schema_path.name,
            failed,
        )
        return 1 if failed else 0
