"""Tests for validation problem and result models."""

from __future__ import annotations

import pytest
from lxml import etree
from pydantic import ValidationError

from xmlconform.models.problems import (
    SVRL_NS,
    Severity,
    ValidationProblem,
    ValidationResult,
)
from tests.conftest import READINGS_XSD


class TestSeverity:
    def test_severity_values(self) -> None:
        assert Severity.ERROR == "error"
        assert Severity.WARNING == "warning"


class TestValidationProblem:
    def test_trivial_to_string(self) -> None:
        problem = ValidationProblem(message="foo", line=1, column=2, severity=Severity.ERROR)
        rendered = str(problem)
        assert "line=1" in rendered
        assert "column=2" in rendered
        assert "type=Error" in rendered
        assert "message='foo'" in rendered

    def test_defaults_mean_unknown_position(self) -> None:
        problem = ValidationProblem(message="foo")
        assert problem.line == 0
        assert problem.column == 0
        assert problem.severity == Severity.ERROR

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ValidationProblem(message="foo", line=-1)

    def test_problem_is_immutable(self) -> None:
        problem = ValidationProblem(message="foo", line=1)
        with pytest.raises(ValidationError):
            problem.line = 2  # type: ignore[misc]

    def test_from_log_entry(self) -> None:
        schema = etree.XMLSchema(etree.parse(str(READINGS_XSD)))
        doc = etree.fromstring(b"<readings>\n<reading>x</reading>\n</readings>").getroottree()
        assert schema.validate(doc) is False
        entry = schema.error_log[0]

        problem = ValidationProblem.from_log_entry(entry)

        assert problem.severity == Severity.ERROR
        assert problem.line == 2
        assert "reading" in problem.message
        assert problem.message == problem.message.strip()

    def test_from_warning_log_entry(self) -> None:
        parser = etree.XMLParser()
        etree.fromstring(b'<a xmlns="relative"/>', parser)
        warnings = [e for e in parser.error_log if e.level == etree.ErrorLevels.WARNING]
        assert warnings

        problem = ValidationProblem.from_log_entry(warnings[0])

        assert problem.severity == Severity.WARNING
        assert "relative" in problem.message
        assert problem.line == 1

    def test_from_svrl_failed_assert(self) -> None:
        event = etree.fromstring(
            f'<svrl:failed-assert xmlns:svrl="{SVRL_NS}" test="to" location="/note">'
            "<svrl:text>  A note must\n have a recipient. </svrl:text>"
            "</svrl:failed-assert>"
        )
        problem = ValidationProblem.from_svrl(event, line=3)
        assert problem.message == "A note must have a recipient."
        assert problem.line == 3
        assert problem.severity == Severity.ERROR

    def test_from_svrl_successful_report_is_warning(self) -> None:
        event = etree.fromstring(
            f'<svrl:successful-report xmlns:svrl="{SVRL_NS}" test="cc" location="/note"/>'
        )
        problem = ValidationProblem.from_svrl(event)
        assert problem.severity == Severity.WARNING
        assert problem.message == "Assertion failed (test: cc)"
        assert problem.line == 0


class TestValidationResult:
    def test_empty_result_is_valid(self) -> None:
        result = ValidationResult()
        assert result.valid is True
        assert result.problems == ()

    def test_result_with_problems_is_invalid(self) -> None:
        result = ValidationResult(problems=(ValidationProblem(message="foo"),))
        assert result.valid is False

    def test_validity_cannot_be_set(self) -> None:
        with pytest.raises(ValidationError):
            ValidationResult(valid=False)  # type: ignore[call-arg]

    def test_validity_is_serialized(self) -> None:
        dumped = ValidationResult(problems=(ValidationProblem(message="foo"),)).model_dump()
        assert dumped["valid"] is False
        assert dumped["problems"][0]["message"] == "foo"

    def test_problem_order_is_kept(self) -> None:
        problems = tuple(ValidationProblem(message=m) for m in ("c", "a", "b"))
        result = ValidationResult(problems=problems)
        assert [p.message for p in result.problems] == ["c", "a", "b"]

    def test_errors_and_warnings(self) -> None:
        result = ValidationResult(
            problems=(
                ValidationProblem(message="w", severity=Severity.WARNING),
                ValidationProblem(message="e", severity=Severity.ERROR),
            )
        )
        assert [p.message for p in result.errors] == ["e"]
        assert [p.message for p in result.warnings] == ["w"]

    def test_summary_lines(self) -> None:
        result = ValidationResult(
            problems=(ValidationProblem(message="bad", line=4, column=7),)
        )
        assert result.summary_lines("doc.xml") == ["doc.xml:4:7: error: bad"]

    def test_result_is_immutable(self) -> None:
        result = ValidationResult()
        with pytest.raises(ValidationError):
            result.problems = ()  # type: ignore[misc]
