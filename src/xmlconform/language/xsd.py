"""W3C XML Schema language, with aggregation of several schema sources."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lxml import etree

from xmlconform.language.base import Languages, SchemaDocument, SchemaLanguage
from xmlconform.parsing import InMemoryResolver, parse_document

logger = logging.getLogger("xmlconform.language")

_XSD = Languages.W3C_XML_SCHEMA_NS_URI


class XmlSchemaLanguage(SchemaLanguage):
    """XSD 1.0 as implemented by libxml2, identity constraints included."""

    @property
    def uri(self) -> str:
        return Languages.W3C_XML_SCHEMA_NS_URI

    @property
    def name(self) -> str:
        return "W3C XML Schema"

    @property
    def schema_type(self) -> type:
        return etree.XMLSchema

    def check(self, document: SchemaDocument, parser: etree.XMLParser) -> etree._Validator:
        tree = parse_document(document.content, parser, document.location)
        return etree.XMLSchema(tree)

    def compile(
        self, documents: Sequence[SchemaDocument], parser: etree.XMLParser
    ) -> list[etree._Validator]:
        """Compile one schema, or a wrapper importing every source.

        Namespaced sources are ``xs:import``-ed, no-namespace sources
        ``xs:include``-d.  libxml2 honours only the first import of a
        namespace, so sources sharing a target namespace are first
        ``xs:include``-d into a generated schema for that namespace, which
        is registered on *parser* and imported once.  *parser* must resolve
        each document location, since libxml2 loads them by location while
        compiling the wrapper.
        """
        if len(documents) == 1:
            return [self.check(documents[0], parser)]

        by_namespace: dict[str, list[SchemaDocument]] = {}
        no_namespace: list[SchemaDocument] = []
        for document in documents:
            root = parse_document(document.content, parser, document.location).getroot()
            namespace = root.get("targetNamespace")
            if namespace:
                by_namespace.setdefault(namespace, []).append(document)
            else:
                no_namespace.append(document)

        generated = InMemoryResolver()
        wrapper = _schema_element()
        for index, (namespace, members) in enumerate(by_namespace.items()):
            location = members[0].location
            if len(members) > 1:
                location = f"urn:xmlconform:namespace:{index}"
                part = _schema_element(namespace)
                for member in members:
                    etree.SubElement(part, f"{{{_XSD}}}include", schemaLocation=member.location)
                generated.add(location, etree.tostring(part))
                logger.debug("Including %d XSD sources for namespace %s", len(members), namespace)
            etree.SubElement(
                wrapper, f"{{{_XSD}}}import", namespace=namespace, schemaLocation=location
            )
        for document in no_namespace:
            etree.SubElement(wrapper, f"{{{_XSD}}}include", schemaLocation=document.location)
        parser.resolvers.add(generated)

        logger.debug("Aggregating %d XSD sources in a wrapper schema", len(documents))
        # Re-parse so the wrapper document carries the resolving parser
        wrapper_root = etree.fromstring(etree.tostring(wrapper), parser)
        return [etree.XMLSchema(wrapper_root)]


def _schema_element(target_namespace: str | None = None) -> etree._Element:
    schema = etree.Element(f"{{{_XSD}}}schema", nsmap={"xs": _XSD})
    if target_namespace:
        schema.set("targetNamespace", target_namespace)
    return schema
