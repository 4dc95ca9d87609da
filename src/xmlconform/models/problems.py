"""Validation problems and the aggregate result of one validation pass."""

from __future__ import annotations

from enum import StrEnum

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field, computed_field

SVRL_NS = "http://purl.oclc.org/dsdl/svrl"


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class ValidationProblem(BaseModel):
    """One conformance defect reported by the validation backend.

    ``line`` and ``column`` are 1-based; ``0`` means the backend did not
    report a position.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)
    severity: Severity = Severity.ERROR

    @classmethod
    def from_log_entry(cls, entry: etree._LogEntry) -> ValidationProblem:
        """Build a problem from an lxml error-log entry."""
        if entry.level == etree.ErrorLevels.WARNING:
            severity = Severity.WARNING
        else:
            severity = Severity.ERROR
        return cls(
            message=entry.message.strip(),
            line=max(entry.line, 0),
            column=max(entry.column, 0),
            severity=severity,
        )

    @classmethod
    def from_svrl(cls, event: etree._Element, line: int = 0) -> ValidationProblem:
        """Build a problem from an SVRL ``failed-assert`` or ``successful-report``."""
        text = event.findtext(f"{{{SVRL_NS}}}text") or ""
        message = " ".join(text.split())
        if not message:
            message = f"Assertion failed (test: {event.get('test', '')})"
        if event.tag == f"{{{SVRL_NS}}}successful-report":
            severity = Severity.WARNING
        else:
            severity = Severity.ERROR
        return cls(message=message, line=max(line, 0), severity=severity)

    def __str__(self) -> str:
        return (
            f"line={self.line}, column={self.column}, "
            f"type={self.severity.name.title()}, message='{self.message}'"
        )


class ValidationResult(BaseModel):
    """Result of validating one schema set or one instance.

    ``valid`` is derived from ``problems`` and cannot be passed in.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    problems: tuple[ValidationProblem, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.problems

    @property
    def errors(self) -> list[ValidationProblem]:
        return [p for p in self.problems if p.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationProblem]:
        return [p for p in self.problems if p.severity == Severity.WARNING]

    def summary_lines(self, label: str = "instance") -> list[str]:
        """Render each problem as ``label:line:column: severity: message``."""
        return [
            f"{label}:{p.line}:{p.column}: {p.severity}: {p.message}" for p in self.problems
        ]
