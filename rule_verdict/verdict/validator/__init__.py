"""Validator contract and the reference rule validator."""

from verdict.validator.base import Validator
from verdict.validator.cancellation import CancellationToken
from verdict.validator.context import ValidationContext
from verdict.validator.descriptor import (
    CheckDescription,
    RuleDescription,
    ValidatorDescriptor,
)
from verdict.validator.engine import RuleValidator
from verdict.validator.rules import Check, Rule

__all__ = [
    "CancellationToken",
    "Check",
    "CheckDescription",
    "Rule",
    "RuleDescription",
    "RuleValidator",
    "ValidationContext",
    "Validator",
    "ValidatorDescriptor",
]
