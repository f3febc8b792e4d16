"""Exceptions raised by validators."""

from __future__ import annotations

from typing import Iterable

from verdict.results.failure import ValidationFailure


class ValidationException(Exception):
    """Raised by the opt-in ``validate_and_raise`` helpers when a result is invalid."""

    def __init__(
        self,
        errors: Iterable[ValidationFailure],
        message: str | None = None,
    ) -> None:
        self.errors: list[ValidationFailure] = [e for e in errors if e is not None]
        super().__init__(message or self._build_message(self.errors))

    @staticmethod
    def _build_message(errors: list[ValidationFailure]) -> str:
        lines = [
            f" -- {e.property_name or ''}: {e.render()} Severity: {e.severity.value}"
            for e in errors
        ]
        return "Validation failed: \n" + "\n".join(lines)


class AsyncValidatorInvokedSynchronouslyError(RuntimeError):
    """An asynchronous check was reached through the synchronous entry point."""

    def __init__(self, validator_name: str, property_name: str | None = None) -> None:
        self.validator_name = validator_name
        self.property_name = property_name
        target = f" on '{property_name}'" if property_name else ""
        super().__init__(
            f"Check '{validator_name}'{target} is asynchronous and cannot run "
            "synchronously. Use validate_async() instead."
        )
