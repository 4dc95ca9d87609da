"""Where schema material comes from: a list of sources, or one parsed schema."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from xmlconform.settings import Settings
from xmlconform.source import Input, Source


class InvalidSchemaSourcesError(ValueError):
    """Raised when schema sources or a schema object cannot be used."""


@dataclass(frozen=True)
class BySources:
    """Schema material read lazily from an ordered list of sources."""

    sources: tuple[Source, ...] = ()

    @property
    def system_ids(self) -> list[str]:
        return [s.system_id for s in self.sources if s.system_id]


@dataclass(frozen=True)
class ByParsedSchema:
    """A schema compiled by the caller, used as is."""

    schema: Any


SchemaSourceSet = BySources | ByParsedSchema


def _normalize_sources(sources: object, settings: Settings | None) -> tuple[Source, ...]:
    if (
        isinstance(sources, (str, bytes, bytearray))
        or hasattr(sources, "read")
        or not isinstance(sources, Iterable)
    ):
        raise InvalidSchemaSourcesError(
            f"Schema sources must be a sequence of sources, got {type(sources).__name__}"
        )
    normalized: list[Source] = []
    for index, item in enumerate(sources):
        if item is None:
            raise InvalidSchemaSourcesError(f"Schema sources must not contain None (index {index})")
        try:
            normalized.append(Input.from_any(item, settings))
        except (TypeError, ValueError) as exc:
            raise InvalidSchemaSourcesError(f"Schema source {index}: {exc}") from exc
    return tuple(normalized)


def build_schema_source_set(
    sources: Iterable[object] | None,
    schema: object | None = None,
    settings: Settings | None = None,
) -> SchemaSourceSet:
    """Build the source set; a parsed *schema* takes precedence over *sources*.

    Sources given next to a parsed schema are still checked, then ignored.
    The caller's sequence is copied, so later changes to it have no effect.
    """
    if sources is None:
        if schema is None:
            raise InvalidSchemaSourcesError("Either schema sources or a parsed schema is required")
        return ByParsedSchema(schema)
    normalized = _normalize_sources(sources, settings)
    if schema is not None:
        return ByParsedSchema(schema)
    return BySources(normalized)
