"""Top-level package for jayson.

JSON Schema validation, template generation, and TypeScript/JavaScript
type generation.

License: GPL-3.0
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jayson")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

from jayson.codegen import GenerateOptions, GeneratedSources, generate_types
from jayson.core.template import generate_template
from jayson.core.validator import Validator, validate
from jayson.exceptions import JaysonError, SchemaError
from jayson.maker import JsonMaker
from jayson.models import SchemaNode, ValidationError, ValidationResult
from jayson.schemas import SchemaCache, SchemaLoader

__all__ = [
    "GenerateOptions",
    "GeneratedSources",
    "JaysonError",
    "JsonMaker",
    "SchemaCache",
    "SchemaError",
    "SchemaLoader",
    "SchemaNode",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "__version__",
    "generate_template",
    "generate_types",
    "validate",
]
