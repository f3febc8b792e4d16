"""Rule validator — evaluates declared rules and honours cascade modes.

Usage:
    validator = RuleValidator([
        Rule("name", [Check(bool, "Name is required")]),
        Rule("age", [Check(lambda v: v >= 0, "Age must be positive")]),
    ])
    result = validator.validate(person)
    if not result.is_valid:
        print(result.to_field_map())
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterable

from verdict.config import get_options
from verdict.exceptions import AsyncValidatorInvokedSynchronouslyError
from verdict.models import CascadeMode
from verdict.results.failure import ValidationFailure
from verdict.results.result import ValidationResult
from verdict.validator.base import T, Validator
from verdict.validator.cancellation import CancellationToken
from verdict.validator.context import ValidationContext
from verdict.validator.descriptor import (
    CheckDescription,
    RuleDescription,
    ValidatorDescriptor,
)
from verdict.validator.rules import Check, Rule

logger = logging.getLogger(__name__)

ALL_RULE_SETS = "*"


class RuleValidator(Validator[T]):
    """Runs an ordered list of rules against an instance.

    Rule-level STOP ends a rule's check chain at its first failure;
    class-level STOP skips every remaining rule once any rule has failed.
    Checks backed by coroutine functions are awaited on the async path and
    raise AsyncValidatorInvokedSynchronouslyError on the sync path.
    """

    def __init__(
        self,
        rules: Iterable[Rule] | None = None,
        *,
        name: str | None = None,
        class_level_cascade_mode: CascadeMode | None = None,
        rule_level_cascade_mode: CascadeMode | None = None,
        instance_type: type | None = None,
    ) -> None:
        options = get_options()
        self.rules: list[Rule] = list(rules or [])
        self.class_level_cascade_mode = (
            class_level_cascade_mode or options.class_level_cascade_mode
        )
        self.rule_level_cascade_mode = (
            rule_level_cascade_mode or options.rule_level_cascade_mode
        )
        self.default_rule_set = options.default_rule_set
        self.instance_type = instance_type
        self._name = name

    @property
    def name(self) -> str:
        return self._name or type(self).__name__

    def add_rule(self, rule: Rule) -> None:
        """Append a rule to the end of the chain."""
        self.rules.append(rule)

    def remove_rules(self, property_name: str | None) -> None:
        """Remove every rule declared for a property."""
        self.rules = [r for r in self.rules if r.property_name != property_name]

    # ── Entry points ──

    def validate_context(self, context: ValidationContext) -> ValidationResult:
        rules, rule_sets = self._select_rules(context)
        failures: list[ValidationFailure] = []

        for rule in rules:
            value = rule.resolve(context.instance)
            rule_failed = False
            for check in rule.checks:
                if check.is_async:
                    raise AsyncValidatorInvokedSynchronouslyError(
                        check.name, rule.property_name,
                    )
                outcome = check.evaluate(value, context)
                if inspect.isawaitable(outcome):
                    if inspect.iscoroutine(outcome):
                        outcome.close()
                    raise AsyncValidatorInvokedSynchronouslyError(
                        check.name, rule.property_name,
                    )
                if not self._record(rule, check, value, outcome, failures):
                    continue
                rule_failed = True
                if self._cascade_for(rule) is CascadeMode.STOP:
                    break
            if rule_failed and self.class_level_cascade_mode is CascadeMode.STOP:
                break

        return self._finish(context, failures, rule_sets, len(rules))

    async def validate_context_async(
        self,
        context: ValidationContext,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult:
        rules, rule_sets = self._select_rules(context)
        failures: list[ValidationFailure] = []

        for rule in rules:
            if cancellation is not None:
                cancellation.raise_if_cancelled()
            value = rule.resolve(context.instance)
            rule_failed = False
            for check in rule.checks:
                if cancellation is not None:
                    cancellation.raise_if_cancelled()
                outcome = check.evaluate(value, context)
                if inspect.isawaitable(outcome):
                    outcome = await outcome
                if not self._record(rule, check, value, outcome, failures):
                    continue
                rule_failed = True
                if self._cascade_for(rule) is CascadeMode.STOP:
                    break
            if rule_failed and self.class_level_cascade_mode is CascadeMode.STOP:
                break

        if cancellation is not None:
            cancellation.raise_if_cancelled()
        return self._finish(context, failures, rule_sets, len(rules))

    def describe(self) -> ValidatorDescriptor:
        return ValidatorDescriptor(
            validator_name=self.name,
            rules=[
                RuleDescription(
                    property_name=rule.property_name,
                    rule_set=self._rule_set_of(rule),
                    cascade_mode=self._cascade_for(rule),
                    checks=[
                        CheckDescription(
                            name=check.name,
                            severity=check.severity,
                            error_code=check.code,
                            is_async=check.is_async,
                        )
                        for check in rule.checks
                    ],
                )
                for rule in self.rules
            ],
        )

    # ── Helpers ──

    def _select_rules(self, context: ValidationContext) -> tuple[list[Rule], list[str]]:
        """Pick the rules for the requested rule sets (default set when none)."""
        if self.instance_type is not None and not isinstance(
            context.instance, self.instance_type
        ):
            raise TypeError(
                f"{self.name} validates {self.instance_type.__name__} instances, "
                f"got {type(context.instance).__name__}"
            )

        requested = list(dict.fromkeys(context.rule_sets or [self.default_rule_set]))
        if ALL_RULE_SETS in requested:
            return list(self.rules), requested
        selected = [r for r in self.rules if self._rule_set_of(r) in requested]
        return selected, requested

    def _rule_set_of(self, rule: Rule) -> str:
        return rule.rule_set or self.default_rule_set

    def _cascade_for(self, rule: Rule) -> CascadeMode:
        return rule.cascade_mode or self.rule_level_cascade_mode

    @staticmethod
    def _record(
        rule: Rule,
        check: Check,
        value: Any,
        outcome: Any,
        failures: list[ValidationFailure],
    ) -> bool:
        """Append a failure when the check did not pass. Returns True on failure."""
        if outcome:
            return False
        failures.append(check.build_failure(rule.property_name, value))
        return True

    def _finish(
        self,
        context: ValidationContext,
        failures: list[ValidationFailure],
        rule_sets: list[str],
        rule_count: int,
    ) -> ValidationResult:
        logger.debug(
            "%s validated %s: %d failure(s) from %d rule(s)",
            self.name,
            type(context.instance).__name__,
            len(failures),
            rule_count,
        )
        return ValidationResult.from_failures(failures, rule_sets_executed=rule_sets)
