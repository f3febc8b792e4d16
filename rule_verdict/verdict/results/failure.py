"""A single rule violation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from verdict.models import Severity


class ValidationFailure(BaseModel):
    """One failed rule against one property (or the whole object).

    The first three fields may be passed positionally::

        ValidationFailure("name", "must not be empty", "")

    Equality is structural over every field, so two failures built from the
    same values compare equal. Nothing deduplicates them. The hash covers
    only the identifying fields so failures with unhashable attempted values
    can still be put in sets.
    """

    model_config = ConfigDict(validate_assignment=True)

    property_name: str | None = None
    error_message: str | None = None
    attempted_value: Any = None
    custom_state: Any = None
    severity: Severity = Severity.ERROR
    error_code: str | None = None
    formatted_message_placeholder_values: dict[str, Any] = Field(default_factory=dict)

    def __init__(
        self,
        property_name: str | None = None,
        error_message: str | None = None,
        attempted_value: Any = None,
        **data: Any,
    ) -> None:
        super().__init__(
            property_name=property_name,
            error_message=error_message,
            attempted_value=attempted_value,
            **data,
        )

    def render(self) -> str:
        """Return the error message, or an empty string when there is none."""
        return self.error_message if self.error_message is not None else ""

    def __str__(self) -> str:
        return self.render()

    def __hash__(self) -> int:
        return hash((self.property_name, self.error_message, self.severity, self.error_code))
