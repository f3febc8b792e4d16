"""Tests for the abstract Validator contract with a hand-written implementation."""

from __future__ import annotations

import asyncio

import pytest

from verdict.results import ValidationFailure, ValidationResult
from verdict.validator import (
    CancellationToken,
    RuleDescription,
    ValidationContext,
    Validator,
    ValidatorDescriptor,
)


class PostcodeValidator(Validator[str]):
    """Implements the sync path as a blocking wait over the async one."""

    def validate_context(self, context: ValidationContext) -> ValidationResult:
        return asyncio.run(self.validate_context_async(context))

    async def validate_context_async(
        self,
        context: ValidationContext,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult:
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        failures = []
        if not context.instance.isalnum():
            failures.append(ValidationFailure(None, "postcode must be alphanumeric", context.instance))
        if len(context.instance) > 8:
            failures.append(ValidationFailure(None, "postcode too long", context.instance))
        return ValidationResult(errors=failures, rule_sets_executed=["default"])

    def describe(self) -> ValidatorDescriptor:
        return ValidatorDescriptor(validator_name=self.name, rules=[RuleDescription(rule_set="default")])


class TestValidatorContract:
    def test_cannot_instantiate_abstract_validator(self) -> None:
        with pytest.raises(TypeError):
            Validator()  # type: ignore[abstract]

    def test_sync_form(self) -> None:
        result = PostcodeValidator().validate("SW1A-1AA-XYZ")
        assert [f.error_message for f in result.errors] == [
            "postcode must be alphanumeric",
            "postcode too long",
        ]

    @pytest.mark.asyncio
    async def test_async_form_matches_sync_form(self) -> None:
        validator = PostcodeValidator()
        async_result = await validator.validate_async("SW1A-1AA-XYZ")
        sync_result = await asyncio.to_thread(validator.validate, "SW1A-1AA-XYZ")
        assert async_result.errors == sync_result.errors

    @pytest.mark.asyncio
    async def test_cancellation_surfaces(self) -> None:
        token = CancellationToken()
        token.cancel()
        with pytest.raises(asyncio.CancelledError):
            await PostcodeValidator().validate_async("SW1A1AA", token)

    def test_describe_and_name(self) -> None:
        validator = PostcodeValidator()
        assert validator.name == "PostcodeValidator"
        assert validator.describe().validator_name == "PostcodeValidator"

    def test_validate_and_raise_uses_contract(self) -> None:
        assert PostcodeValidator().validate_and_raise("SW1A1AA").is_valid
