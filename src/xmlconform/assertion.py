"""Schema-conformance assertions for test suites.

Usage with plain pytest ``assert``::

    matcher = SchemaValidMatcher("schemas/book.xsd")
    assert matcher.matches(document), matcher.describe()

or simply ``assert_schema_valid(document, "schemas/book.xsd")``.
"""

from __future__ import annotations

from xmlconform.language.base import Languages
from xmlconform.language.registry import LanguageRegistry
from xmlconform.models.problems import ValidationResult
from xmlconform.settings import Settings
from xmlconform.source import Input
from xmlconform.validation.schema_set import InvalidSchemaSourcesError
from xmlconform.validation.validator import Validator


class SchemaValidMatcher:
    """Matches documents that validate against the given schema(s).

    Pass one or more schema sources, or a single schema already compiled
    by lxml for the language.
    """

    def __init__(
        self,
        *schema: object,
        language: str = Languages.W3C_XML_SCHEMA_NS_URI,
        settings: Settings | None = None,
    ) -> None:
        if not schema:
            raise InvalidSchemaSourcesError("At least one schema is required")
        if any(s is None for s in schema):
            raise InvalidSchemaSourcesError("Schemas must not contain None")
        schema_type = LanguageRegistry.get(language).schema_type
        if len(schema) == 1 and isinstance(schema[0], schema_type):
            self._validator = Validator(
                language, schema_sources=None, schema=schema[0], settings=settings
            )
        else:
            self._validator = Validator(language, schema_sources=schema, settings=settings)
        self._result: ValidationResult | None = None
        self._instance_id: str | None = None

    @property
    def result(self) -> ValidationResult | None:
        """Result of the last :meth:`matches` call, ``None`` before the first."""
        return self._result

    def matches(self, candidate: object) -> bool:
        source = Input.from_any(candidate, self._validator.settings)
        self._instance_id = source.system_id
        self._result = self._validator.validate_instance(source)
        return self._result.valid

    def describe(self) -> str:
        """Describe the last match; never validates again."""
        schema_ids = [s.system_id for s in self._validator.schema_sources if s.system_id]
        if self._result is None:
            target = "\n".join(schema_ids) if schema_ids else "the configured schema"
            return f"a document that validates against {target}"

        instance = self._instance_id or "instance"
        verb = "validates" if self._result.valid else "does not validate"
        if schema_ids:
            header = f"{instance} {verb} against\n" + "\n".join(schema_ids)
        else:
            header = f"{instance} {verb}"
        if not self._result.problems:
            return header
        return header + "\n" + ", ".join(str(p) for p in self._result.problems)


def assert_schema_valid(
    candidate: object,
    *schema: object,
    language: str = Languages.W3C_XML_SCHEMA_NS_URI,
    settings: Settings | None = None,
) -> None:
    """Raise ``AssertionError`` with a full problem report unless *candidate* is valid."""
    matcher = SchemaValidMatcher(*schema, language=language, settings=settings)
    if not matcher.matches(candidate):
        raise AssertionError(matcher.describe())
