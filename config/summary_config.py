# summary_config.py — Summarizer settings
# Constants, SummaryConfig dataclass, environment overrides
"""
summary_config.py — Summarizer Configuration

Supports:
1. Built-in defaults (categorical threshold 10, display cap 10)
2. Environment overrides (TABLE_SUMMARY_* variables)

Command-line flags are applied on top of the values returned here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from profiling.errors import ConfigError


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_CATEGORICAL_THRESHOLD = 10
CATEGORICAL_DISPLAY_CAP = 10  # Max frequency-table rows per column
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_EXTENSIONS = {".parquet", ".pq", ".csv"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

ENV_PREFIX = "TABLE_SUMMARY_"
TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"0", "false", "no", "off", ""}


# =============================================================================
# CONFIG OBJECT
# =============================================================================

@dataclass(frozen=True)
class SummaryConfig:
    """Configuration for one summarization run."""
    categorical_threshold: int = DEFAULT_CATEGORICAL_THRESHOLD
    display_cap: int = CATEGORICAL_DISPLAY_CAP
    low_memory: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, **overrides) -> "SummaryConfig":
        """
        Return a copy with every non-None override applied.

        Used by the CLI so that unset flags keep the environment value.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


# =============================================================================
# ENVIRONMENT PARSING
# =============================================================================

def _env(name: str) -> str | None:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def _parse_int(name: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in TRUTHY_VALUES:
        return True
    if lowered in FALSY_VALUES:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean flag, got {raw!r}")


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigError(
            f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(sorted(VALID_LOG_LEVELS))}, got {raw!r}"
        )
    return level


def get_summary_config() -> SummaryConfig:
    """
    Build a SummaryConfig from TABLE_SUMMARY_* environment variables.

    Recognized variables:
        TABLE_SUMMARY_CATEGORICAL_THRESHOLD  (int >= 0)
        TABLE_SUMMARY_DISPLAY_CAP            (int >= 1)
        TABLE_SUMMARY_LOW_MEMORY             (1/0, true/false, yes/no)
        TABLE_SUMMARY_LOG_LEVEL              (DEBUG ... CRITICAL)

    Returns:
        SummaryConfig with defaults for anything unset

    Raises:
        ConfigError: If a variable is set to an invalid value
    """
    config = SummaryConfig()

    raw = _env("CATEGORICAL_THRESHOLD")
    if raw is not None:
        config = replace(config, categorical_threshold=_parse_int("CATEGORICAL_THRESHOLD", raw, 0))

    raw = _env("DISPLAY_CAP")
    if raw is not None:
        config = replace(config, display_cap=_parse_int("DISPLAY_CAP", raw, 1))

    raw = _env("LOW_MEMORY")
    if raw is not None:
        config = replace(config, low_memory=_parse_bool("LOW_MEMORY", raw))

    raw = _env("LOG_LEVEL")
    if raw is not None:
        config = replace(config, log_level=_parse_log_level(raw))

    return config
