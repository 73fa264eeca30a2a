"""Detect command: report the JSON Schema version a file declares."""

from argparse import Namespace
from pathlib import Path

from jayson.schemas import detect_standard

from .base import BaseCommandHandler


class DetectHandler(BaseCommandHandler):
    """Print the detected JSON Schema standard."""

    def execute(self, args: Namespace) -> int:
        if not Path(args.file).is_file():
            print(f"❌ File not found: {args.file}")
            return 1

        detected = detect_standard(Path(args.file))
        if detected.version:
            print(f"✅ Detected: JSON Schema {detected.version}")
            print(f"  $schema: {detected.schema_url}")
            print(f"  {detected.description}")
            return 0

        print("⚠️  Unknown: could not detect JSON Schema version")
        if detected.schema_url:
            print(f"  $schema: {detected.schema_url}")
        else:
            print(f"  {detected.description}")
        return 0
