"""RELAX NG (XML syntax) language."""

from __future__ import annotations

from lxml import etree

from xmlconform.language.base import Languages, SchemaDocument, SchemaLanguage
from xmlconform.parsing import parse_document


class RelaxNGLanguage(SchemaLanguage):
    @property
    def uri(self) -> str:
        return Languages.RELAXNG_NS_URI

    @property
    def name(self) -> str:
        return "RELAX NG"

    @property
    def schema_type(self) -> type:
        return etree.RelaxNG

    def check(self, document: SchemaDocument, parser: etree.XMLParser) -> etree._Validator:
        tree = parse_document(document.content, parser, document.location)
        return etree.RelaxNG(tree)
