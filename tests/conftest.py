"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

# Add rule_verdict/ to Python path so `from verdict.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "rule_verdict"))

import pytest

from verdict.config import reset_options
from verdict.results import ValidationFailure


@pytest.fixture(autouse=True)
def _isolated_options(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Every test starts from default options, unaffected by the host env."""
    for var in (
        "VERDICT_CLASS_CASCADE_MODE",
        "VERDICT_RULE_CASCADE_MODE",
        "VERDICT_DEFAULT_RULE_SET",
        "VERDICT_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("VERDICT_OPTIONS_PATH", str(tmp_path / "missing_options.json"))
    reset_options()
    yield
    reset_options()


@pytest.fixture
def name_failures() -> list[ValidationFailure]:
    return [
        ValidationFailure("Name", "required"),
        ValidationFailure("Name", "too long"),
        ValidationFailure("Age", "must be positive"),
    ]
