"""Abstract schema language: compile schema material, run it over an instance."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lxml import etree

from xmlconform.settings import Settings

if TYPE_CHECKING:
    from xmlconform.validation.collector import ProblemCollector


class Languages:
    """Identifiers of schema languages."""

    W3C_XML_SCHEMA_NS_URI = "http://www.w3.org/2001/XMLSchema"
    XML_DTD_NS_URI = "http://www.w3.org/TR/REC-xml"
    RELAXNG_NS_URI = "http://relaxng.org/ns/structure/1.0"
    SCHEMATRON_NS_URI = "http://purl.oclc.org/dsdl/schematron"
    # XML-Data Reduced; libxml2 cannot validate it
    XDR_NS_URI = "urn:schemas-microsoft-com:xml-data"


@dataclass(frozen=True)
class SchemaDocument:
    """Raw content of one schema source and the location it is served under."""

    location: str
    content: bytes


class SchemaLanguage(ABC):
    """Abstract base for all schema languages.

    Compilation errors surface as ``etree.LxmlError`` subclasses carrying an
    ``error_log``; callers decide whether to collect or raise them.
    """

    @property
    @abstractmethod
    def uri(self) -> str: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def schema_type(self) -> type:
        """lxml class of a compiled schema in this language."""

    @property
    def loads_dtd(self) -> bool:
        """Whether instances are parsed with their external DTD subset loaded."""
        return False

    @abstractmethod
    def check(self, document: SchemaDocument, parser: etree.XMLParser) -> etree._Validator:
        """Compile a single schema document on its own."""

    def compile(
        self, documents: Sequence[SchemaDocument], parser: etree.XMLParser
    ) -> list[etree._Validator]:
        """Compile all schema documents; by default one validator per source."""
        return [self.check(document, parser) for document in documents]

    def collect(
        self, validator: etree._Validator, tree: etree._ElementTree, collector: ProblemCollector
    ) -> None:
        """Validate the whole *tree* and feed every reported event to *collector*."""
        validator.validate(tree)
        collector.extend(validator.error_log)

    def validate_declared(
        self,
        tree: etree._ElementTree,
        content: bytes,
        system_id: str | None,
        settings: Settings,
        collector: ProblemCollector,
    ) -> None:
        """Validation when no schema is configured: well-formedness only."""
