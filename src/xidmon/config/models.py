#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Runtime settings for the monitor, sourced from the environment."""

from __future__ import annotations

from collections.abc import Mapping
import os
from typing import Any

from attrs import define, field, validators
from provide.foundation.logger import get_logger

log = get_logger(__name__)

DEFAULT_BURST_WINDOW_MS = 250
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_DISPLAY = "DISPLAY"
ENV_BURST_WINDOW_MS = "XIDMON_BURST_WINDOW_MS"
ENV_LOG_LEVEL = "XIDMON_LOG_LEVEL"


class ConfigurationError(Exception):
    """Raised when a setting taken from the environment is invalid."""


def _positive(instance: Any, attribute: Any, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@define(frozen=True, slots=True)
class MonitorConfig:
    """Settings for one monitor run.

    Attributes:
        display: X display name to connect to. ``None`` lets the X library
            fall back to the ``DISPLAY`` environment variable.
        burst_window_ms: Upper bound, in milliseconds, on how long a burst
            of notifications is coalesced onto one output line.
        log_level: Threshold for diagnostics written to stderr.
    """

    display: str | None = field(default=None)
    burst_window_ms: int = field(
        default=DEFAULT_BURST_WINDOW_MS,
        validator=[validators.instance_of(int), _positive],
    )
    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        converter=str.upper,
        validator=validators.in_(LOG_LEVELS),
    )

    @property
    def burst_window(self) -> float:
        """The burst window in seconds."""
        return self.burst_window_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MonitorConfig:
        env = os.environ if environ is None else environ

        display = env.get(ENV_DISPLAY) or None
        raw_window = env.get(ENV_BURST_WINDOW_MS)
        if raw_window is None or raw_window.strip() == "":
            window_ms = DEFAULT_BURST_WINDOW_MS
        else:
            try:
                window_ms = int(raw_window)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_BURST_WINDOW_MS} must be an integer number of milliseconds, got {raw_window!r}"
                ) from e

        log_level = env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
        if log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"{ENV_LOG_LEVEL} must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        try:
            config = cls(display=display, burst_window_ms=window_ms, log_level=log_level)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_BURST_WINDOW_MS}: {e}") from e

        log.debug(
            "Loaded monitor configuration",
            display=display,
            burst_window_ms=window_ms,
            log_level=config.log_level,
        )
        return config


# 🔼⚙️🔚
