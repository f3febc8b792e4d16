"""Abstract validator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from verdict.exceptions import ValidationException
from verdict.results.result import ValidationResult
from verdict.validator.cancellation import CancellationToken
from verdict.validator.context import ValidationContext
from verdict.validator.descriptor import ValidatorDescriptor

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Capability set every validator for values of type ``T`` exposes.

    Implementations provide the context-based operations and ``describe()``;
    the instance-based forms wrap the instance in a default context.

    Validation failures are reported inside the returned result, never raised.
    Exceptions thrown by a rule body propagate unchanged, and cancellation of
    the asynchronous forms surfaces as ``asyncio.CancelledError`` rather than a
    partial result.
    """

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    def validate(self, instance: T) -> ValidationResult:
        """Run every applicable rule against ``instance`` synchronously."""
        return self.validate_context(ValidationContext(instance=instance))

    async def validate_async(
        self,
        instance: T,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult:
        """Run every applicable rule, awaiting asynchronous checks."""
        return await self.validate_context_async(
            ValidationContext(instance=instance), cancellation,
        )

    @abstractmethod
    def validate_context(self, context: ValidationContext) -> ValidationResult:
        """Validate the instance carried by ``context`` synchronously."""
        ...

    @abstractmethod
    async def validate_context_async(
        self,
        context: ValidationContext,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult:
        """Validate the instance carried by ``context``.

        Cancellation is observed between rules, not inside one.
        """
        ...

    @abstractmethod
    def describe(self) -> ValidatorDescriptor:
        """Describe the configured rules without evaluating any of them."""
        ...

    def validate_and_raise(self, instance: T) -> ValidationResult:
        """Validate and raise ValidationException if any failure was found."""
        result = self.validate(instance)
        if not result.is_valid:
            raise ValidationException(result.errors)
        return result

    async def validate_and_raise_async(
        self,
        instance: T,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult:
        """Validate asynchronously and raise ValidationException on any failure."""
        result = await self.validate_async(instance, cancellation)
        if not result.is_valid:
            raise ValidationException(result.errors)
        return result
