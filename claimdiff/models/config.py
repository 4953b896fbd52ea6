"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputConfig:
    """Report rendering configuration."""

    format: str = "text"
    json_indent: int = 2


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"


@dataclass
class ClaimDiffConfig:
    """Top-level claimdiff configuration."""

    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)


@dataclass(frozen=True)
class CompareConfig:
    """Inputs of a single ``compare`` invocation."""

    claim1_path: str
    claim2_path: str
    output_format: str = "text"
    json_indent: int = 2
