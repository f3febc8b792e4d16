"""Validation result model and validator contract."""

from verdict.exceptions import AsyncValidatorInvokedSynchronouslyError, ValidationException
from verdict.models import ApplyConditionTo, CascadeMode, Severity
from verdict.results import WHOLE_OBJECT_KEY, ValidationFailure, ValidationResult
from verdict.validator import (
    CancellationToken,
    Check,
    Rule,
    RuleValidator,
    ValidationContext,
    Validator,
    ValidatorDescriptor,
)

__all__ = [
    "ApplyConditionTo",
    "AsyncValidatorInvokedSynchronouslyError",
    "CancellationToken",
    "CascadeMode",
    "Check",
    "Rule",
    "RuleValidator",
    "Severity",
    "ValidationContext",
    "ValidationException",
    "ValidationFailure",
    "ValidationResult",
    "Validator",
    "ValidatorDescriptor",
    "WHOLE_OBJECT_KEY",
]
