"""CLI runner for jayson.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from pathlib import Path

from jayson import __version__
from jayson.cli.commands import (
    BaseCommandHandler,
    CheckHandler,
    DetectHandler,
    GenerateHandler,
    InitHandler,
    ReportHandler,
    TemplateHandler,
    ValidateHandler,
)
from jayson.cli.parser import CLIParser
from jayson.config import (
    GlobalSettingsManager,
    ProjectConfig,
    load_project_config,
)
from jayson.exceptions import ConfigError, JaysonError
from jayson.logger import get_logger, set_console_level
from jayson.schemas import SchemaCache

logger = get_logger(__name__)

COMMAND_HANDLERS: dict[str, type[BaseCommandHandler]] = {
    "init": InitHandler,
    "validate": ValidateHandler,
    "report": ReportHandler,
    "generate": GenerateHandler,
    "gen": GenerateHandler,
    "template": TemplateHandler,
    "detect": DetectHandler,
    "check": CheckHandler,
}


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        project_dir: Path | None = None,
        settings_manager: GlobalSettingsManager | None = None,
    ) -> None:
        """Load settings and project configuration.

        Args:
            project_dir: Directory searched for jayson.json (default: cwd)
            settings_manager: Source of global settings

        """
        self.project_dir = project_dir or Path.cwd()
        self.cache = SchemaCache()
        manager = settings_manager or GlobalSettingsManager()
        try:
            self.settings = manager.load()
        except ConfigError as e:
            logger.warning("Ignoring settings file: %s", e)
            self.settings = manager.defaults()
        try:
            self.project = load_project_config(self.project_dir)
        except ConfigError as e:
            logger.warning("Ignoring project config: %s", e)
            self.project = ProjectConfig()

    def run(self, argv: list[str] | None = None) -> int:
        """Parse ``argv``, run the command and return the exit code."""
        parser = CLIParser(self.project.default_format)
        args = parser.parse_args(argv)

        if args.version:
            print(f"jayson version {__version__}")
            return 0

        if not args.command:
            parser.build().print_help()
            return 1

        if args.verbose:
            set_console_level("DEBUG")

        try:
            return self._execute_command(args)
        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            return 1
        except JaysonError as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"❌ {e}")
            return 1

    def _execute_command(self, args: Namespace) -> int:
        handler_cls = COMMAND_HANDLERS[args.command]
        handler = handler_cls(
            self.settings, self.project, self.project_dir, self.cache
        )
        logger.debug("Running command %s", args.command)
        return handler.execute(args)
