"""The outcome of a validation run, and how several outcomes combine."""

from __future__ import annotations

import os
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from verdict.results.failure import ValidationFailure

# Group key used by to_field_map() for failures that carry no property name
WHOLE_OBJECT_KEY = ""


class ValidationResult(BaseModel):
    """Aggregated failures from one validation run (or a merge of several).

    ``errors`` never holds ``None``: missing entries are dropped both when the
    result is built and whenever the list is reassigned, and the caller's
    iterable is always copied. Assigning ``None`` itself is rejected.
    """

    model_config = ConfigDict(validate_assignment=True)

    errors: list[ValidationFailure] = Field(default_factory=list)
    rule_sets_executed: list[str] | None = None

    @field_validator("errors", mode="before")
    @classmethod
    def _drop_missing_failures(cls, value: Any) -> list[Any]:
        if value is None:
            raise ValueError("errors cannot be None; assign an empty list to clear")
        return [failure for failure in value if failure is not None]

    @field_validator("rule_sets_executed")
    @classmethod
    def _distinct_rule_sets(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return list(dict.fromkeys(value))

    @classmethod
    def from_failures(
        cls,
        failures: Iterable[ValidationFailure | None],
        rule_sets_executed: Iterable[str] | None = None,
    ) -> ValidationResult:
        """Build a result from any iterable of failures."""
        return cls(
            errors=list(failures),
            rule_sets_executed=(
                list(rule_sets_executed) if rule_sets_executed is not None else None
            ),
        )

    @classmethod
    def combine(cls, results: Iterable[ValidationResult]) -> ValidationResult:
        """Merge several results into one.

        Failures are concatenated in source order. Rule set names are the
        distinct union of every source that reports them, in first-seen order;
        sources without rule set metadata contribute nothing.
        """
        sources = list(results)
        errors = [failure for result in sources for failure in result.errors]
        rule_sets: list[str] = []
        for result in sources:
            if result.rule_sets_executed is None:
                continue
            for name in result.rule_sets_executed:
                if name not in rule_sets:
                    rule_sets.append(name)
        return cls(errors=errors, rule_sets_executed=rule_sets)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def render(self, separator: str = os.linesep) -> str:
        """Join every failure's message with ``separator``."""
        return separator.join(failure.render() for failure in self.errors)

    def to_field_map(self) -> dict[str, list[str]]:
        """Group error messages by property name, keeping first-seen order."""
        field_map: dict[str, list[str]] = {}
        for failure in self.errors:
            key = failure.property_name
            if key is None:
                key = WHOLE_OBJECT_KEY
            field_map.setdefault(key, []).append(failure.render())
        return field_map

    def __str__(self) -> str:
        return self.render()
