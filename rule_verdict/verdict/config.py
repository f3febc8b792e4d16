"""Process-wide validator options and logging setup."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel

from verdict.models import CascadeMode

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ValidatorOptions(BaseModel):
    """Defaults applied by rule validators that do not override them."""

    class_level_cascade_mode: CascadeMode = CascadeMode.CONTINUE
    rule_level_cascade_mode: CascadeMode = CascadeMode.CONTINUE
    default_rule_set: str = "default"
    log_level: str = "INFO"


_options: ValidatorOptions | None = None


def load_options() -> ValidatorOptions:
    """Load options from $VERDICT_OPTIONS_PATH or fall back to env variables."""
    opts_path = os.environ.get("VERDICT_OPTIONS_PATH", "verdict_options.json")
    if Path(opts_path).exists():
        logger.debug("Loading validator options from %s", opts_path)
        return ValidatorOptions.model_validate(json.loads(Path(opts_path).read_text()))
    return ValidatorOptions(
        class_level_cascade_mode=os.environ.get("VERDICT_CLASS_CASCADE_MODE", "continue"),
        rule_level_cascade_mode=os.environ.get("VERDICT_RULE_CASCADE_MODE", "continue"),
        default_rule_set=os.environ.get("VERDICT_DEFAULT_RULE_SET", "default"),
        log_level=os.environ.get("VERDICT_LOG_LEVEL", "INFO"),
    )


def get_options() -> ValidatorOptions:
    """Return the shared options, loading them on first use."""
    global _options
    if _options is None:
        _options = load_options()
    return _options


def set_options(options: ValidatorOptions) -> None:
    """Replace the shared options (affects validators created afterwards)."""
    global _options
    _options = options


def reset_options() -> None:
    """Forget the cached options so the next get_options() reloads them."""
    global _options
    _options = None


def configure_logging(options: ValidatorOptions | None = None) -> None:
    """Configure root logging at the level named in the options."""
    options = options or get_options()
    logging.basicConfig(
        level=getattr(logging, options.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
