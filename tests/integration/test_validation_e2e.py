"""End-to-end validation scenarios through the public API."""

from __future__ import annotations

import pytest

import xmlconform
from xmlconform import (
    InvalidSchemaError,
    Languages,
    SchemaValidMatcher,
    UnsupportedSchemaLanguageError,
    ValidationResult,
    Validator,
)
from tests.conftest import (
    A_B_XSD,
    BOOK_XML,
    BOOK_XSD,
    BROKEN_XSD,
    CATALOG_XSD,
    INVALID_BOOK_XML,
    NOTE_DTD,
    NOTE_RNG,
    NOTE_SCH,
    READINGS_XSD,
)


class TestEndToEndValidation:
    def test_book_round(self) -> None:
        validator = Validator.for_language(
            Languages.W3C_XML_SCHEMA_NS_URI, schema_sources=[BOOK_XSD]
        )
        assert validator.validate_schema().valid is True
        assert validator.validate_instance(BOOK_XML).valid is True

        result = validator.validate_instance(INVALID_BOOK_XML)
        assert isinstance(result, ValidationResult)
        assert [p.line for p in result.problems] == [2, 6]
        assert result.model_dump()["valid"] is False

    def test_all_bad_readings_are_found(self) -> None:
        validator = Validator(Languages.W3C_XML_SCHEMA_NS_URI, [READINGS_XSD])
        doc = "<readings>\n" + "\n".join(
            f"<reading>{v}</reading>" for v in ("1", "two", "3", "four", "five")
        ) + "\n</readings>"
        result = validator.validate_instance(doc)
        assert [p.line for p in result.problems] == [3, 5, 6]

    def test_duplicate_keys(self) -> None:
        validator = Validator(Languages.W3C_XML_SCHEMA_NS_URI, [CATALOG_XSD])
        result = validator.validate_instance('<catalog><item id="x"/><item id="x"/></catalog>')
        assert result.valid is False

    def test_broken_schema_two_ways(self) -> None:
        validator = Validator(Languages.W3C_XML_SCHEMA_NS_URI, [BROKEN_XSD])
        assert validator.validate_schema().valid is False
        with pytest.raises(InvalidSchemaError):
            validator.validate_instance(BOOK_XML)

    @pytest.mark.parametrize(
        ("language", "schema"),
        [
            (Languages.XML_DTD_NS_URI, NOTE_DTD),
            (Languages.RELAXNG_NS_URI, NOTE_RNG),
            (Languages.SCHEMATRON_NS_URI, NOTE_SCH),
        ],
    )
    def test_note_in_every_language(self, language: str, schema: object) -> None:
        matcher = SchemaValidMatcher(schema, language=language)
        assert matcher.matches("<note><to>a</to><body>b</body></note>") is True
        assert matcher.matches("<note><body>b</body></note>") is False
        assert "does not validate against" in matcher.describe()

    def test_xdr_is_rejected(self) -> None:
        with pytest.raises(UnsupportedSchemaLanguageError):
            Validator(Languages.XDR_NS_URI, [A_B_XSD])

    def test_public_names(self) -> None:
        for name in xmlconform.__all__:
            assert hasattr(xmlconform, name)
