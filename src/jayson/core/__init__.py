"""Schema traversals: validation and template generation."""

from jayson.core.references import ReferenceResolver, ref_name
from jayson.core.template import generate_template
from jayson.core.validator import (
    Validator,
    get_value_type,
    validate,
    validate_value,
)

__all__ = [
    "ReferenceResolver",
    "Validator",
    "generate_template",
    "get_value_type",
    "ref_name",
    "validate",
    "validate_value",
]
