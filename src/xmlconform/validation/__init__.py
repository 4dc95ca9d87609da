"""Schema validation engine for xmlconform."""

from xmlconform.validation.collector import ProblemCollector
from xmlconform.validation.schema_set import (
    ByParsedSchema,
    BySources,
    InvalidSchemaSourcesError,
    SchemaSourceSet,
    build_schema_source_set,
)
from xmlconform.validation.validator import (
    InvalidSchemaError,
    MalformedInstanceError,
    SchemaUnreadableError,
    SchemaValidationNotSupportedError,
    Validator,
)

__all__ = [
    "ByParsedSchema",
    "BySources",
    "InvalidSchemaError",
    "InvalidSchemaSourcesError",
    "MalformedInstanceError",
    "ProblemCollector",
    "SchemaSourceSet",
    "SchemaUnreadableError",
    "SchemaValidationNotSupportedError",
    "Validator",
    "build_schema_source_set",
]
