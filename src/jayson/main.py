"""Main CLI entry point for jayson.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to CLIRunner.
"""

import sys

from jayson.cli import CLIRunner
from jayson.logger import get_logger, update_logger_from_config

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run the CLI application and exit with the command's status."""
    update_logger_from_config()
    logger.debug("CLI started")
    try:
        code = CLIRunner().run(argv)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
