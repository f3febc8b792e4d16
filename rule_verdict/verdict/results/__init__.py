"""Validation failure and result model."""

from verdict.results.failure import ValidationFailure
from verdict.results.result import WHOLE_OBJECT_KEY, ValidationResult

__all__ = [
    "ValidationFailure",
    "ValidationResult",
    "WHOLE_OBJECT_KEY",
]
