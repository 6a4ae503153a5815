#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest

from xidmon.config import DEFAULT_BURST_WINDOW_MS
from tests.helpers.scripted_source import RecordingReporter, ScriptedEventSource

WINDOW = DEFAULT_BURST_WINDOW_MS / 1000.0


@pytest.fixture
def window() -> float:
    """The default burst window, in seconds."""
    return WINDOW


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def scripted():
    """Factory building a scripted source and a reporter writing to ``output``."""

    def build(schedule, output: io.StringIO, **kwargs) -> tuple[ScriptedEventSource, RecordingReporter]:
        source = ScriptedEventSource.from_schedule(schedule, **kwargs)
        return source, RecordingReporter(output, source)

    return build


@pytest.fixture(autouse=True)
def _clean_xidmon_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from leaking into configuration tests."""
    for name in ("XIDMON_BURST_WINDOW_MS", "XIDMON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# 🔼⚙️🔚
