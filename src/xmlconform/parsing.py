"""lxml parser construction and in-memory resolution of schema locations."""

from __future__ import annotations

import io
from collections.abc import Mapping

from lxml import etree

from xmlconform.settings import Settings


class InMemoryResolver(etree.Resolver):
    """Serves registered URLs from memory; anything else is left to libxml2."""

    def __init__(self, documents: Mapping[str, bytes] | None = None) -> None:
        super().__init__()
        self._documents: dict[str, bytes] = dict(documents or {})

    def add(self, url: str, content: bytes) -> None:
        self._documents[url] = content

    def resolve(self, url, pubid, context):  # type: ignore[no-untyped-def]
        content = self._documents.get(url)
        if content is None:
            return None
        return self.resolve_string(content, context, base_url=url)


def build_parser(
    settings: Settings,
    *,
    load_dtd: bool = False,
    dtd_validation: bool = False,
    resolver: etree.Resolver | None = None,
) -> etree.XMLParser:
    """Create a parser that never expands entities and honours ``no_network``."""
    parser = etree.XMLParser(
        load_dtd=load_dtd or dtd_validation,
        dtd_validation=dtd_validation,
        no_network=settings.no_network,
        huge_tree=settings.huge_tree,
        resolve_entities=False,
    )
    if resolver is not None:
        parser.resolvers.add(resolver)
    return parser


def parse_document(
    content: bytes, parser: etree.XMLParser, system_id: str | None = None
) -> etree._ElementTree:
    """Parse *content*; raises ``etree.XMLSyntaxError`` if it is not well-formed."""
    return etree.parse(io.BytesIO(content), parser, base_url=system_id)
