#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration module for xidmon."""

from __future__ import annotations

from xidmon.config.models import (
    DEFAULT_BURST_WINDOW_MS,
    ConfigurationError,
    MonitorConfig,
)

__all__ = [
    "DEFAULT_BURST_WINDOW_MS",
    "ConfigurationError",
    "MonitorConfig",
]

# 🔼⚙️🔚
