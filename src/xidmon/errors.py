#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Outcome taxonomy for the monitor.

Every fault in the monitor is either fatal or a clean shutdown signal; none is
retried. Detection points raise one of the errors below and a single top-level
dispatch reads the attached ``outcome`` to decide how the process ends.
"""

from __future__ import annotations

from enum import Enum

from attrs import frozen


class Outcome(Enum):
    """How a monitor run ended, and the exit code that goes with it."""

    OK = 0
    CONNECTION_FAILURE = 1
    UNEXPECTED_FAILURE = 2
    SOURCE_CLOSED = 3

    @property
    def exit_code(self) -> int:
        return 0 if self in (Outcome.OK, Outcome.SOURCE_CLOSED) else 1

    @property
    def is_fatal(self) -> bool:
        return self.exit_code != 0


class XidmonError(Exception):
    """Base exception for monitor faults."""

    outcome: Outcome = Outcome.UNEXPECTED_FAILURE

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class ConnectionFailure(XidmonError):
    """Raised when the notification service cannot be reached or negotiated with."""

    outcome = Outcome.CONNECTION_FAILURE


class UnexpectedFailure(XidmonError):
    """Raised when an already-received notification cannot be decoded locally."""

    outcome = Outcome.UNEXPECTED_FAILURE


class SourceClosed(XidmonError):
    """Raised when the notification service drops the connection (e.g. logout)."""

    outcome = Outcome.SOURCE_CLOSED


@frozen
class MonitorResult:
    """Outcome of a monitor run plus the diagnostic that explains it."""

    outcome: Outcome
    message: str = ""

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code

    @classmethod
    def from_error(cls, error: XidmonError) -> MonitorResult:
        return cls(outcome=error.outcome, message=error.message)


# 🔼⚙️🔚
