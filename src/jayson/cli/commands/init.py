"""Init command: create jayson.json and the schema directory."""

from argparse import Namespace
from pathlib import Path

from jayson.config import ProjectConfig, write_project_config
from jayson.exceptions import ConfigError
from jayson.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class InitHandler(BaseCommandHandler):
    """Initialize a jayson project directory."""

    def execute(self, args: Namespace) -> int:
        target_dir = Path(args.dir)
        config = ProjectConfig()

        try:
            config_path = write_project_config(
                target_dir, config, force=args.force
            )
        except ConfigError as e:
            print(f"❌ {e}")
            return 1

        schema_dir = target_dir / config.schema_dir
        if not schema_dir.exists():
            schema_dir.mkdir(parents=True)
            print(f"✅ Created: {schema_dir}")
        print(f"✅ Created: {config_path}")

        logger.info("Initialized jayson project in %s", target_dir)
        print(
            "\nNext steps:\n"
            f"  1. Add your JSON schemas to {config.schema_dir}/\n"
            "  2. Validate files: jayson validate data.json -s schema.json\n"
            "  3. Generate types: jayson generate schema.json"
        )
        return 0
