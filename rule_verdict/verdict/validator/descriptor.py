"""Read-only description of a validator's configured rules."""

from __future__ import annotations

from pydantic import BaseModel, Field

from verdict.models import CascadeMode, Severity


class CheckDescription(BaseModel):
    """One check within a rule."""

    name: str
    severity: Severity = Severity.ERROR
    error_code: str | None = None
    is_async: bool = False


class RuleDescription(BaseModel):
    """One declared rule, as seen by tooling."""

    property_name: str | None = None
    rule_set: str
    cascade_mode: CascadeMode = CascadeMode.CONTINUE
    checks: list[CheckDescription] = Field(default_factory=list)

    @property
    def is_async(self) -> bool:
        return any(c.is_async for c in self.checks)


class ValidatorDescriptor(BaseModel):
    """Structural view over every rule a validator declares."""

    validator_name: str = ""
    rules: list[RuleDescription] = Field(default_factory=list)

    def members_with_validators(self) -> list[str]:
        """Property names that have at least one rule, in declaration order."""
        names: list[str] = []
        for rule in self.rules:
            if rule.property_name is not None and rule.property_name not in names:
                names.append(rule.property_name)
        return names

    def get_rules_for_member(self, property_name: str | None) -> list[RuleDescription]:
        return [r for r in self.rules if r.property_name == property_name]

    def get_checks_for_member(self, property_name: str | None) -> list[CheckDescription]:
        return [c for r in self.get_rules_for_member(property_name) for c in r.checks]

    def rule_sets(self) -> list[str]:
        return list(dict.fromkeys(r.rule_set for r in self.rules))
