"""Template command: build a default document from a schema."""

from argparse import Namespace

from jayson.json_io import dumps, write_json

from .base import BaseCommandHandler


class TemplateHandler(BaseCommandHandler):
    """Print or write the template document for a schema."""

    def execute(self, args: Namespace) -> int:
        schema_path = self.resolve_schema(args.schema)
        template = self.make_maker(schema_path).generate_template(schema_path)

        if args.output:
            path = write_json(template, args.output)
            print(f"✅ Generated: {path}")
        else:
            print(dumps(template).decode())
        return 0
