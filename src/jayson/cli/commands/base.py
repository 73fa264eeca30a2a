"""Base command handler for jayson CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace
from pathlib import Path

from jayson.config import GlobalSettings, ProjectConfig
from jayson.logger import get_logger
from jayson.maker import JsonMaker
from jayson.schemas import SchemaCache

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Handlers print user-facing output to stdout and return a process exit
    code. Dependencies are injected by CLIRunner.
    """

    def __init__(
        self,
        settings: GlobalSettings,
        project: ProjectConfig,
        project_dir: Path | None = None,
        cache: SchemaCache | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings: Global settings from settings.conf
            project: Project configuration from jayson.json
            project_dir: Directory holding jayson.json
            cache: Schema cache shared across handlers

        """
        self.settings = settings
        self.project = project
        self.project_dir = project_dir or Path.cwd()
        self.cache = cache if cache is not None else SchemaCache()

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Execute the command and return its exit code."""

    @property
    def schema_dir(self) -> Path:
        return self.project_dir / self.project.schema_dir

    @property
    def output_dir(self) -> Path:
        return self.project_dir / self.project.output_dir

    def resolve_schema(self, schema: str) -> Path:
        """Find a schema given on the command line.

        The path is used as given when it exists; otherwise it is looked
        up in the project's schema directory. The result is absolute.
        """
        path = Path(schema).expanduser()
        if not path.exists() and not path.is_absolute():
            candidate = self.schema_dir / path
            if candidate.exists():
                logger.debug("Resolved schema %s to %s", schema, candidate)
                path = candidate
        return path.resolve()

    def make_maker(self, schema_path: Path) -> JsonMaker:
        return JsonMaker(schema_path.parent, self.cache)
