"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from claimdiff.models.config import ClaimDiffConfig, LogConfig, OutputConfig

OUTPUT_FORMATS = ("text", "json")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"CLAIMDIFF_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def validate_output_format(value: str) -> str:
    if value.lower() not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid output format: {value}. Must be one of {OUTPUT_FORMATS}")
    return value.lower()


def load_config() -> ClaimDiffConfig:
    """Load configuration from CLAIMDIFF_* environment variables."""
    return ClaimDiffConfig(
        output=OutputConfig(
            format=validate_output_format(_env("OUTPUT_FORMAT", "text")),
            json_indent=_env_int("JSON_INDENT", 2, min_val=0, max_val=8),
        ),
        log=LogConfig(
            level=validate_log_level(_env("LOG_LEVEL", "warning")),
        ),
    )
