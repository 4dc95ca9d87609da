"""Uniform readable sources for schemas and instance documents."""

from __future__ import annotations

import os
import re
import threading
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

import httpx
from lxml import etree

from xmlconform.settings import Settings

_HTTP_TIMEOUT = 30.0

# Encoding named in an XML declaration, e.g. <?xml version="1.0" encoding="ISO-8859-1"?>
_ENCODING_RE = re.compile(r"""^\s*<\?xml[^>]*?\sencoding\s*=\s*["']([A-Za-z][\w.\-]*)["']""")


class SourceReadError(OSError):
    """Raised when the content behind a source cannot be fetched."""


class Source:
    """A readable XML input with an optional system identifier.

    The content is read on first use and kept, so one-shot streams can be
    validated more than once.  A failed read is not cached.
    """

    def __init__(self, reader: Callable[[], bytes], system_id: str | None = None) -> None:
        self._reader = reader
        self._system_id = system_id or None
        self._content: bytes | None = None
        self._lock = threading.Lock()

    @property
    def system_id(self) -> str | None:
        return self._system_id

    def read(self) -> bytes:
        with self._lock:
            if self._content is None:
                self._content = self._reader()
            return self._content

    def __repr__(self) -> str:
        return f"Source(system_id={self._system_id!r})"


def _encode_text(text: str) -> bytes:
    match = _ENCODING_RE.match(text)
    encoding = match.group(1) if match else "utf-8"
    try:
        return text.encode(encoding, errors="xmlcharrefreplace")
    except LookupError:
        return text.encode("utf-8")


def _fetch(uri: str, settings: Settings) -> bytes:
    if settings.no_network:
        raise SourceReadError(f"Network access is disabled, cannot fetch '{uri}'")
    try:
        response = httpx.get(uri, timeout=_HTTP_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SourceReadError(f"Cannot fetch '{uri}': {exc}") from exc
    return response.content


class Input:
    """Builds :class:`Source` objects from files, URIs, strings, streams and trees."""

    @staticmethod
    def from_file(path: str | os.PathLike[str]) -> Source:
        resolved = Path(path).resolve()
        return Source(resolved.read_bytes, system_id=resolved.as_uri())

    @staticmethod
    def from_string(text: str, system_id: str | None = None) -> Source:
        return Source(lambda: _encode_text(text), system_id=system_id)

    @staticmethod
    def from_bytes(data: bytes, system_id: str | None = None) -> Source:
        content = bytes(data)
        return Source(lambda: content, system_id=system_id)

    @staticmethod
    def from_stream(stream: IO[Any]) -> Source:
        """Wrap a binary or text stream; file streams keep their path as system id."""
        system_id = None
        name = getattr(stream, "name", None)
        if isinstance(name, str) and Path(name).is_file():
            system_id = Path(name).resolve().as_uri()

        def _read() -> bytes:
            data = stream.read()
            return _encode_text(data) if isinstance(data, str) else data

        return Source(_read, system_id=system_id)

    @staticmethod
    def from_uri(uri: str, settings: Settings | None = None) -> Source:
        """Read ``file:`` URIs from disk and fetch ``http(s):`` URIs with httpx."""
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            path = Path(url2pathname(unquote(parsed.path)))
            return Source(path.read_bytes, system_id=uri)
        if parsed.scheme in ("http", "https"):
            effective = settings if settings is not None else Settings()
            return Source(lambda: _fetch(uri, effective), system_id=uri)
        return Input.from_file(uri)

    @staticmethod
    def from_document(node: etree._Element | etree._ElementTree) -> Source:
        tree = node if isinstance(node, etree._ElementTree) else node.getroottree()
        content = etree.tostring(node)
        return Source(lambda: content, system_id=tree.docinfo.URL)

    @staticmethod
    def from_any(obj: object, settings: Settings | None = None) -> Source:
        """Turn any supported input descriptor into a :class:`Source`.

        Strings starting with ``<`` are markup, strings containing ``://`` are
        URIs, other strings are file paths. Blank strings raise ``ValueError``.
        """
        if isinstance(obj, Source):
            return obj
        if isinstance(obj, (etree._Element, etree._ElementTree)):
            return Input.from_document(obj)
        if isinstance(obj, (bytes, bytearray)):
            return Input.from_bytes(obj)
        if isinstance(obj, str):
            if not obj.strip():
                raise ValueError("An empty string is not an XML source")
            if obj.lstrip().startswith("<"):
                return Input.from_string(obj)
            if "://" in obj:
                return Input.from_uri(obj, settings)
            return Input.from_file(obj)
        if isinstance(obj, os.PathLike):
            return Input.from_file(obj)
        if hasattr(obj, "read"):
            return Input.from_stream(obj)  # type: ignore[arg-type]
        raise TypeError(f"Cannot build an XML source from {type(obj).__name__}")
