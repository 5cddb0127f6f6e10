"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ibanval.domain import OutputFormat


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_output_format(name: str, default: OutputFormat) -> OutputFormat:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return OutputFormat(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(fmt.value for fmt in OutputFormat)
        msg = f"{name} must be one of: {choices}"
        raise ValueError(msg) from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    output_format: OutputFormat = OutputFormat.PAPER
    strict: bool = True

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("IBANVAL_ENV", cls.environment),
            log_level=os.getenv("IBANVAL_LOG_LEVEL", cls.log_level).upper(),
            output_format=_env_output_format("IBANVAL_OUTPUT_FORMAT", cls.output_format),
            strict=_env_bool("IBANVAL_STRICT", cls.strict),
        )


__all__ = ["AppSettings"]
