"""Pydantic result models for xmlconform."""

from xmlconform.models.problems import Severity, ValidationProblem, ValidationResult

__all__ = [
    "Severity",
    "ValidationProblem",
    "ValidationResult",
]
