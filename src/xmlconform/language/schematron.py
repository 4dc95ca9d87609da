"""ISO Schematron language, reported through SVRL."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree, isoschematron

from xmlconform.language.base import Languages, SchemaDocument, SchemaLanguage
from xmlconform.models.problems import SVRL_NS, ValidationProblem
from xmlconform.parsing import parse_document

if TYPE_CHECKING:
    from xmlconform.validation.collector import ProblemCollector


def _source_line(tree: etree._ElementTree, location: str | None) -> int:
    """Line of the node an SVRL ``location`` XPath points at, 0 if unknown."""
    if not location:
        return 0
    try:
        found = tree.xpath(location)
    except etree.XPathError:
        return 0
    if isinstance(found, list) and found and isinstance(found[0], etree._Element):
        return found[0].sourceline or 0
    return 0


class SchematronLanguage(SchemaLanguage):
    """Rule-based checks; each failed assert or successful report is one problem."""

    @property
    def uri(self) -> str:
        return Languages.SCHEMATRON_NS_URI

    @property
    def name(self) -> str:
        return "ISO Schematron"

    @property
    def schema_type(self) -> type:
        return isoschematron.Schematron

    def check(self, document: SchemaDocument, parser: etree.XMLParser) -> etree._Validator:
        tree = parse_document(document.content, parser, document.location)
        return isoschematron.Schematron(tree, store_report=True)

    def collect(
        self, validator: etree._Validator, tree: etree._ElementTree, collector: ProblemCollector
    ) -> None:
        validator.validate(tree)
        report = getattr(validator, "validation_report", None)
        if report is None:
            # Schematron built without store_report: only the error log is available
            collector.extend(validator.error_log)
            return
        for event in report.iter(f"{{{SVRL_NS}}}failed-assert", f"{{{SVRL_NS}}}successful-report"):
            line = _source_line(tree, event.get("location"))
            collector.add(ValidationProblem.from_svrl(event, line=line))
