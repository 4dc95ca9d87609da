"""Append-only sink for the problems of one validation pass."""

from __future__ import annotations

from collections.abc import Iterable

from lxml import etree

from xmlconform.models.problems import ValidationProblem, ValidationResult


class ProblemCollector:
    """Collects problems in the order the backend reports them.

    Nothing is deduplicated, reordered or raised.
    """

    def __init__(self) -> None:
        self._problems: list[ValidationProblem] = []

    def add(self, problem: ValidationProblem) -> None:
        self._problems.append(problem)

    def extend(self, entries: Iterable[etree._LogEntry]) -> None:
        for entry in entries:
            self._problems.append(ValidationProblem.from_log_entry(entry))

    def extend_from_error(self, exc: etree.LxmlError) -> None:
        """Collect the error log carried by an lxml exception.

        Falls back to the exception text when lxml logged nothing.
        """
        before = len(self._problems)
        self.extend(exc.error_log or ())
        if len(self._problems) == before:
            self._problems.append(ValidationProblem(message=str(exc)))

    @property
    def problems(self) -> tuple[ValidationProblem, ...]:
        return tuple(self._problems)

    def result(self) -> ValidationResult:
        return ValidationResult(problems=self.problems)
