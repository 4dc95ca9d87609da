"""Schema languages supported by xmlconform."""

from xmlconform.language.base import Languages, SchemaDocument, SchemaLanguage
from xmlconform.language.registry import LanguageRegistry, UnsupportedSchemaLanguageError

__all__ = [
    "LanguageRegistry",
    "Languages",
    "SchemaDocument",
    "SchemaLanguage",
    "UnsupportedSchemaLanguageError",
]
