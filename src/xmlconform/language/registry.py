"""Schema language resolution table: language URI to strategy."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from xmlconform.language.base import SchemaLanguage
from xmlconform.language.dtd import DtdLanguage
from xmlconform.language.relaxng import RelaxNGLanguage
from xmlconform.language.schematron import SchematronLanguage
from xmlconform.language.xsd import XmlSchemaLanguage


class UnsupportedSchemaLanguageError(Exception):
    """Raised when a requested schema language is not in the table."""

    def __init__(self, language: object, available: list[str]) -> None:
        self.language = language
        self.available = available
        super().__init__(
            f"Unsupported schema language '{language}'. Available: {', '.join(available)}"
        )


# Built once at import, never mutated
_LANGUAGES: Mapping[str, type[SchemaLanguage]] = MappingProxyType(
    {
        language_class().uri: language_class
        for language_class in (
            XmlSchemaLanguage,
            DtdLanguage,
            RelaxNGLanguage,
            SchematronLanguage,
        )
    }
)


class LanguageRegistry:
    """Read-only lookup of schema languages by URI."""

    @classmethod
    def get(cls, language: str) -> SchemaLanguage:
        """Get a strategy instance for the language URI."""
        language_class = _LANGUAGES.get(language) if isinstance(language, str) else None
        if language_class is None:
            raise UnsupportedSchemaLanguageError(language, available=cls.available())
        return language_class()

    @classmethod
    def available(cls) -> list[str]:
        """List supported language URIs."""
        return sorted(_LANGUAGES.keys())
