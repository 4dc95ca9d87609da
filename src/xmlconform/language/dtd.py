"""Document Type Definitions, external or declared by the instance itself."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lxml import etree

from xmlconform.language.base import Languages, SchemaDocument, SchemaLanguage
from xmlconform.parsing import build_parser, parse_document
from xmlconform.settings import Settings

if TYPE_CHECKING:
    from xmlconform.validation.collector import ProblemCollector

logger = logging.getLogger("xmlconform.language")


class DtdLanguage(SchemaLanguage):
    """DTD validity checking.

    With schema sources, the instance is checked against each DTD in turn.
    Without, the DOCTYPE of the instance is used if it has one.
    """

    @property
    def uri(self) -> str:
        return Languages.XML_DTD_NS_URI

    @property
    def name(self) -> str:
        return "DTD"

    @property
    def schema_type(self) -> type:
        return etree.DTD

    @property
    def loads_dtd(self) -> bool:
        return True

    def check(self, document: SchemaDocument, parser: etree.XMLParser) -> etree._Validator:
        """Load the DTD by location as the external subset of a stub document.

        Going through *parser* serves the DTD from its resolver and resolves
        relative parameter entities against ``document.location``.
        """
        quote = "'" if '"' in document.location else '"'
        stub = f"<!DOCTYPE dtd SYSTEM {quote}{document.location}{quote}><dtd/>".encode()
        dtd = parse_document(stub, parser, document.location).docinfo.externalDTD
        if dtd is None:
            raise etree.DTDParseError(
                f"Cannot load DTD {document.location}", parser.error_log
            )
        return dtd

    def validate_declared(
        self,
        tree: etree._ElementTree,
        content: bytes,
        system_id: str | None,
        settings: Settings,
        collector: ProblemCollector,
    ) -> None:
        if not tree.docinfo.doctype:
            logger.debug("%s has no DOCTYPE, checking well-formedness only", system_id or "instance")
            return
        parser = build_parser(settings, dtd_validation=True)
        try:
            parse_document(content, parser, system_id)
        except etree.XMLSyntaxError as exc:
            # Validity errors fail the parse but every one of them is logged
            error_log = exc.error_log
        else:
            error_log = parser.error_log
        collector.extend(entry for entry in error_log if entry.domain == etree.ErrorDomains.VALID)
