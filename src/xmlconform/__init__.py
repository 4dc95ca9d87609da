"""xmlconform: validate XML against schemas and report every problem."""

__version__ = "0.1.0"

from xmlconform.assertion import SchemaValidMatcher, assert_schema_valid  # noqa: E402
from xmlconform.language import Languages, LanguageRegistry, UnsupportedSchemaLanguageError  # noqa: E402
from xmlconform.models import Severity, ValidationProblem, ValidationResult  # noqa: E402
from xmlconform.source import Input, Source, SourceReadError  # noqa: E402
from xmlconform.validation import (  # noqa: E402
    InvalidSchemaError,
    InvalidSchemaSourcesError,
    MalformedInstanceError,
    SchemaUnreadableError,
    SchemaValidationNotSupportedError,
    Validator,
)

__all__ = [
    "Input",
    "InvalidSchemaError",
    "InvalidSchemaSourcesError",
    "LanguageRegistry",
    "Languages",
    "MalformedInstanceError",
    "SchemaUnreadableError",
    "SchemaValidMatcher",
    "SchemaValidationNotSupportedError",
    "Severity",
    "Source",
    "SourceReadError",
    "UnsupportedSchemaLanguageError",
    "ValidationProblem",
    "ValidationResult",
    "Validator",
    "__version__",
]
