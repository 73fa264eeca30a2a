"""Constants shared across jayson modules."""

from typing import Final

APP_NAME: Final[str] = "jayson"
CONFIG_DIR_NAME: Final[str] = "jayson"
DEFAULT_CONFIG_SUBDIR: Final[str] = ".config"
SETTINGS_FILE_NAME: Final[str] = "settings.conf"
PROJECT_CONFIG_FILE_NAME: Final[str] = "jayson.json"
DEFAULT_SCHEMA_DIR: Final[str] = "./json-schema"
DEFAULT_OUTPUT_DIR: Final[str] = "./dist"

# Logging
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
LOG_FILE_NAME: Final[str] = "jayson.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}

# Code generation
DEFAULT_INDENT_SIZE: Final[int] = 4
DEFAULT_TYPE_NAME: Final[str] = "GeneratedType"
DEFAULT_CLASS_NAME: Final[str] = "GeneratedClass"

# Validation
PATTERN_CACHE_SIZE: Final[int] = 256

# Reports
REPORT_RULE_WIDTH: Final[int] = 60
TERMINAL_VALUE_LIMIT: Final[int] = 50
MARKDOWN_VALUE_LIMIT: Final[int] = 100
HTML_VALUE_LIMIT: Final[int] = 100

# JSON Schema meta-schema URLs by version
JSON_SCHEMA_VERSIONS: Final[dict[str, str]] = {
    "draft-04": "http://json-schema.org/draft-04/schema#",
    "draft-06": "http://json-schema.org/draft-06/schema#",
    "draft-07": "http://json-schema.org/draft-07/schema#",
    "2019-09": "https://json-schema.org/draft/2019-09/schema",
    "2020-12": "https://json-schema.org/draft/2020-12/schema",
}
