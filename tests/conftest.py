"""Shared test fixtures for xmlconform."""

from __future__ import annotations

from pathlib import Path

import pytest

from xmlconform.language.base import Languages
from xmlconform.settings import Settings
from xmlconform.validation.validator import Validator

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BOOK_XSD = FIXTURES_DIR / "book.xsd"
BOOK_XML = FIXTURES_DIR / "book.xml"
INVALID_BOOK_XML = FIXTURES_DIR / "invalid_book.xml"
A_B_XSD = FIXTURES_DIR / "a_b.xsd"
READINGS_XSD = FIXTURES_DIR / "readings.xsd"
CATALOG_XSD = FIXTURES_DIR / "catalog.xsd"
BROKEN_XSD = FIXTURES_DIR / "broken.xsd"
ORDERS_XSD = FIXTURES_DIR / "orders.xsd"
CUSTOMERS_XSD = FIXTURES_DIR / "customers.xsd"
NOTE_DTD = FIXTURES_DIR / "note.dtd"
NOTE_RNG = FIXTURES_DIR / "note.rng"
NOTE_SCH = FIXTURES_DIR / "note.sch"
MODULAR_NOTE_DTD = FIXTURES_DIR / "modular" / "note.dtd"
PARTS_ONE_XSD = FIXTURES_DIR / "parts_one.xsd"
PARTS_TWO_XSD = FIXTURES_DIR / "parts_two.xsd"

XSD = Languages.W3C_XML_SCHEMA_NS_URI


@pytest.fixture
def settings() -> Settings:
    """Settings independent of any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def book_validator(settings: Settings) -> Validator:
    return Validator.for_language(XSD, schema_sources=[BOOK_XSD], settings=settings)


@pytest.fixture
def a_b_validator(settings: Settings) -> Validator:
    return Validator.for_language(XSD, schema_sources=[A_B_XSD], settings=settings)


NOTE_WITH_DOCTYPE = """\
<?xml version="1.0"?>
<!DOCTYPE note [
  <!ELEMENT note (to, body)>
  <!ELEMENT to (#PCDATA)>
  <!ELEMENT body (#PCDATA)>
]>
<note><to>Tove</to><body>Don't forget me this weekend!</body></note>
"""

INVALID_NOTE_WITH_DOCTYPE = """\
<?xml version="1.0"?>
<!DOCTYPE note [
  <!ELEMENT note (to, body)>
  <!ELEMENT to (#PCDATA)>
  <!ELEMENT body (#PCDATA)>
]>
<note><body>Don't forget me this weekend!</body></note>
"""
