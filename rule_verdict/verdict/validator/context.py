"""Validation context passed through the non-generic entry points."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ValidationContext(BaseModel):
    """The instance under validation plus ambient state for the run."""

    instance: Any
    rule_sets: list[str] | None = None  # None means the default rule set
    root_context_data: dict[str, Any] = Field(default_factory=dict)
