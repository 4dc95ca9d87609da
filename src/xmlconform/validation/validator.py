"""Validates XML instances against schemas in a supported schema language.

Configuration problems (bad arguments, unknown language, unreadable or
uncompilable schema, malformed instance) are raised.  Conformance problems
are never raised: they are collected, in detection order, into the returned
:class:`~xmlconform.models.problems.ValidationResult`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence

from lxml import etree

from xmlconform.language.base import SchemaDocument
from xmlconform.language.registry import LanguageRegistry
from xmlconform.models.problems import ValidationProblem, ValidationResult
from xmlconform.parsing import InMemoryResolver, build_parser, parse_document
from xmlconform.settings import Settings
from xmlconform.source import Input, Source
from xmlconform.validation.collector import ProblemCollector
from xmlconform.validation.schema_set import (
    ByParsedSchema,
    BySources,
    InvalidSchemaSourcesError,
    SchemaSourceSet,
    build_schema_source_set,
)

logger = logging.getLogger("xmlconform.validation")


class SchemaUnreadableError(Exception):
    """Raised when a configured schema source cannot be read."""

    def __init__(self, system_id: str | None, cause: OSError) -> None:
        self.system_id = system_id
        super().__init__(f"Schema is not readable: {system_id or '<anonymous source>'} ({cause})")


class InvalidSchemaError(Exception):
    """Raised when schema sources were read but do not compile."""

    def __init__(self, problems: Sequence[ValidationProblem]) -> None:
        self.problems = tuple(problems)
        detail = "; ".join(p.message for p in self.problems)
        super().__init__(f"Schema is invalid: {detail}")


class MalformedInstanceError(Exception):
    """Raised when the instance is not well-formed XML."""

    def __init__(self, system_id: str | None, problems: Sequence[ValidationProblem]) -> None:
        self.system_id = system_id
        self.problems = tuple(problems)
        first = self.problems[0] if self.problems else None
        self.line = first.line if first else 0
        self.column = first.column if first else 0
        reason = first.message if first else "parse error"
        super().__init__(
            f"{system_id or 'instance'} is not well-formed "
            f"(line {self.line}, column {self.column}): {reason}"
        )


class SchemaValidationNotSupportedError(NotImplementedError):
    """Raised when schema-only validation is requested for a parsed schema."""


class Validator:
    """Validates a piece of XML against a schema in one schema language.

    The schema language is resolved once, here.  Schema sources are read and
    compiled on first use and the compiled schema is kept; a failed
    compilation is retried on the next call.  One instance may validate
    many documents, also from several threads: compilation happens once
    under a lock and each lxml validator is used by one thread at a time.
    """

    def __init__(
        self,
        language: str,
        schema_sources: Iterable[object] | None = (),
        schema: object | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._language = LanguageRegistry.get(language)
        self._settings = settings if settings is not None else Settings()
        if schema is not None and not isinstance(schema, self._language.schema_type):
            raise InvalidSchemaSourcesError(
                f"A {self._language.name} schema must be a "
                f"{self._language.schema_type.__name__}, got {type(schema).__name__}"
            )
        self._source_set = build_schema_source_set(schema_sources, schema, self._settings)
        if isinstance(self._source_set, ByParsedSchema) and schema_sources:
            logger.debug("Parsed schema given, schema sources will not be used")
        self._validators: list[etree._Validator] | None = None
        self._compile_lock = threading.Lock()
        self._validate_lock = threading.Lock()

    @classmethod
    def for_language(
        cls,
        language: str,
        schema_sources: Iterable[object] | None = (),
        schema: object | None = None,
        settings: Settings | None = None,
    ) -> Validator:
        """Factory that obtains a validator for the schema language URI."""
        return cls(language, schema_sources=schema_sources, schema=schema, settings=settings)

    @property
    def language(self) -> str:
        return self._language.uri

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def source_set(self) -> SchemaSourceSet:
        return self._source_set

    @property
    def schema_sources(self) -> tuple[Source, ...]:
        if isinstance(self._source_set, BySources):
            return self._source_set.sources
        return ()

    @property
    def schema(self) -> object | None:
        if isinstance(self._source_set, ByParsedSchema):
            return self._source_set.schema
        return None

    # -- public API ----------------------------------------------------------

    def validate_schema(self) -> ValidationResult:
        """Check every schema source on its own and report what is wrong with it.

        Broken schemas are reported as problems, not raised.  Raises
        :class:`SchemaUnreadableError` if a source cannot be read.
        """
        if not isinstance(self._source_set, BySources):
            raise SchemaValidationNotSupportedError(
                "Schema validation needs schema sources; a parsed schema is assumed valid"
            )
        documents = self._read_schema_documents()
        parser = build_parser(
            self._settings,
            load_dtd=self._language.loads_dtd,
            resolver=self._resolver_for(documents),
        )
        collector = ProblemCollector()
        for document in documents:
            try:
                self._language.check(document, parser)
            except etree.LxmlError as exc:
                collector.extend_from_error(exc)
        result = collector.result()
        logger.debug(
            "Checked %d %s schema source(s): %d problem(s)",
            len(documents), self._language.name, len(result.problems),
        )
        return result

    def validate_instance(self, instance: object) -> ValidationResult:
        """Validate a whole instance document against the configured schema.

        *instance* is anything :meth:`Input.from_any` accepts.  Every problem
        found anywhere in the document is returned; the walk never stops at
        the first one.
        """
        validators = self._schema_validators()
        source = Input.from_any(instance, self._settings)
        content = source.read()
        tree = self._parse_instance(source, content)

        collector = ProblemCollector()
        if validators:
            with self._validate_lock:
                for validator in validators:
                    self._language.collect(validator, tree, collector)
        else:
            logger.debug("No %s schema configured", self._language.name)
            self._language.validate_declared(
                tree, content, source.system_id, self._settings, collector
            )
        result = collector.result()
        logger.debug(
            "Validated %s: %d problem(s)", source.system_id or "instance", len(result.problems)
        )
        return result

    # -- internal ------------------------------------------------------------

    def _read_schema_documents(self) -> list[SchemaDocument]:
        documents: list[SchemaDocument] = []
        for index, source in enumerate(self.schema_sources):
            try:
                content = source.read()
            except OSError as exc:
                raise SchemaUnreadableError(source.system_id, exc) from exc
            location = source.system_id or f"urn:xmlconform:schema:{index}"
            documents.append(SchemaDocument(location=location, content=content))
        return documents

    @staticmethod
    def _resolver_for(documents: Sequence[SchemaDocument]) -> InMemoryResolver:
        return InMemoryResolver({d.location: d.content for d in documents})

    def _schema_validators(self) -> list[etree._Validator]:
        if self._validators is None:
            with self._compile_lock:
                if self._validators is None:
                    self._validators = self._compile()
        return self._validators

    def _compile(self) -> list[etree._Validator]:
        if isinstance(self._source_set, ByParsedSchema):
            return [self._source_set.schema]
        documents = self._read_schema_documents()
        if not documents:
            return []
        parser = build_parser(
            self._settings,
            load_dtd=self._language.loads_dtd,
            resolver=self._resolver_for(documents),
        )
        try:
            validators = self._language.compile(documents, parser)
        except etree.LxmlError as exc:
            collector = ProblemCollector()
            collector.extend_from_error(exc)
            raise InvalidSchemaError(collector.problems) from exc
        logger.debug("Compiled %d %s schema source(s)", len(documents), self._language.name)
        return validators

    def _parse_instance(self, source: Source, content: bytes) -> etree._ElementTree:
        parser = build_parser(self._settings, load_dtd=self._language.loads_dtd)
        try:
            return parse_document(content, parser, source.system_id)
        except etree.XMLSyntaxError as exc:
            collector = ProblemCollector()
            collector.extend_from_error(exc)
            raise MalformedInstanceError(source.system_id, collector.problems) from exc
