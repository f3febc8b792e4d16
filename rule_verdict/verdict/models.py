"""Shared vocabulary consumed by rule engines and rule builders."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity attached to a validation failure.

    Severity never affects ``ValidationResult.is_valid``; callers that only
    care about errors must filter explicitly.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CascadeMode(str, Enum):
    """Whether evaluation carries on after a rule fails."""

    CONTINUE = "continue"  # every rule in the chain runs
    STOP = "stop"          # the chain halts at its first failure


class ApplyConditionTo(str, Enum):
    """Scope of a When/Unless condition over a chain of rule declarations."""

    ALL_VALIDATORS = "all_validators"
    CURRENT_VALIDATOR = "current_validator"
