"""Check command: meta-validate schema files."""

from argparse import Namespace

from jayson.exceptions import JaysonError
from jayson.logger import get_logger
from jayson.schemas import check_schema

from .base import BaseCommandHandler

logger = get_logger(__name__)


class CheckHandler(BaseCommandHandler):
    """Check each schema against the draft-07 meta-schema.

    A schema that passes is also parsed, which rejects draft-07 forms the
    validator does not support (tuple ``items``, for one).
    """

    def execute(self, args: Namespace) -> int:
        failed = 0
        for schema in args.schemas:
            schema_path = self.resolve_schema(schema)
            try:
                maker = self.make_maker(schema_path)
                check_schema(maker.loader.read(schema_path), schema)
                maker.load_schema(schema_path)
            except JaysonError as e:
                failed += 1
                print(f"❌ {e}")
                continue
            print(f"✅ OK {schema}")
        return 1 if failed else 0
