"""Generate command: write TypeScript and/or JavaScript from a schema."""

import re
from argparse import Namespace
from pathlib import Path

from jayson.codegen import GenerateOptions
from jayson.maker import JsonMaker

from .base import BaseCommandHandler

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


class GenerateHandler(BaseCommandHandler):
    """Generate source files from a schema."""

    def execute(self, args: Namespace) -> int:
        schema_path = self.resolve_schema(args.schema)
        if not schema_path.is_file():
            print(f"❌ Schema file not found: {args.schema}")
            return 1

        maker = self.make_maker(schema_path)
        output_dir = Path(args.output) if args.output else self.output_dir
        options = GenerateOptions(
            export_name=args.name,
            include_descriptions=not args.no_comments,
            include_timestamp=not args.no_timestamp,
        )
        base_name = args.name or self._base_name(maker, schema_path)

        if args.typescript:
            path = maker.generate_typescript_file(
                schema_path, output_dir / f"{base_name}.ts", options
            )
            print(f"✅ Generated: {path}")
        elif args.javascript:
            path = maker.generate_javascript_file(
                schema_path, output_dir / f"{base_name}.js", options
            )
            print(f"✅ Generated: {path}")
        else:
            ts_path, js_path = maker.generate_types(
                schema_path, output_dir, base_name, options
            )
            print(f"✅ Generated:\n  {ts_path}\n  {js_path}")
        return 0

    @staticmethod
    def _base_name(maker: JsonMaker, schema_path: Path) -> str:
        """File stem from the schema title, else from the file name."""
        title = maker.load_schema(schema_path).get("title")
        stem = schema_path.name.split(".")[0]
        name = title if isinstance(title, str) and title else stem
        return _NON_ALNUM.sub("", name) or stem
