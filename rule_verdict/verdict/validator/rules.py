"""Rule and check declarations evaluated by RuleValidator."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

from verdict.models import CascadeMode, Severity
from verdict.results.failure import ValidationFailure

if TYPE_CHECKING:
    from verdict.validator.context import ValidationContext

Predicate = Callable[..., Union[bool, Awaitable[bool]]]


@dataclass
class Check:
    """A single predicate applied to a property value.

    The predicate returns a truthy value when the value is valid. Coroutine
    functions are allowed; such checks only run on the async path. With
    ``with_context`` set the predicate also receives the ValidationContext,
    which gives it the root context data of the run.
    """

    predicate: Predicate
    message: str | None = None
    name: str = ""
    severity: Severity = Severity.ERROR
    error_code: str | None = None
    custom_state: Any = None
    with_context: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            self.name = getattr(self.predicate, "__name__", "predicate")

    @property
    def is_async(self) -> bool:
        return inspect.iscoroutinefunction(self.predicate)

    @property
    def code(self) -> str:
        """Error code reported on failures; defaults to the check name."""
        return self.error_code or self.name

    def evaluate(self, value: Any, context: ValidationContext) -> Any:
        """Call the predicate; the result may be awaitable."""
        if self.with_context:
            return self.predicate(value, context)
        return self.predicate(value)

    def build_failure(self, property_name: str | None, value: Any) -> ValidationFailure:
        display_name = property_name or ""
        message = self.message
        if message is None:
            message = f"The specified condition was not met for '{display_name}'."
        return ValidationFailure(
            property_name,
            message,
            value,
            custom_state=self.custom_state,
            severity=self.severity,
            error_code=self.code,
            formatted_message_placeholder_values={
                "PropertyName": display_name,
                "PropertyValue": value,
            },
        )


@dataclass
class Rule:
    """An ordered chain of checks against one property, or the whole object.

    ``cascade_mode`` and ``rule_set`` fall back to the owning validator's
    defaults when left as None.
    """

    property_name: str | None = None
    checks: list[Check] = field(default_factory=list)
    accessor: Callable[[Any], Any] | None = None
    cascade_mode: CascadeMode | None = None
    rule_set: str | None = None

    @property
    def is_async(self) -> bool:
        return any(c.is_async for c in self.checks)

    def resolve(self, instance: Any) -> Any:
        """Pull the value this rule validates out of ``instance``."""
        if self.accessor is not None:
            return self.accessor(instance)
        if self.property_name is None:
            return instance
        if isinstance(instance, Mapping):
            return instance.get(self.property_name)
        return getattr(instance, self.property_name)
