#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The coalescing loop: group notification bursts into single report lines.

The loop has two states. While ``IDLE`` it blocks for the next notification.
The first notification that yields at least one record opens a burst: its
records are written, the burst timer is armed, and the loop alternates
between waiting (readable or timer expiry) and draining whatever the source
has already queued. Once the timer has run out the line is terminated and the
loop returns to ``IDLE``.

The timer is never re-armed while a burst is open. A steady trickle of
notifications is therefore flushed every window instead of being coalesced
indefinitely.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from xidmon.errors import MonitorResult, Outcome, XidmonError
from xidmon.events.classifier import classify
from xidmon.monitor.timer import BurstTimer

if TYPE_CHECKING:
    from xidmon.output.reporter import LineReporter
    from xidmon.source.protocol import EventSource

log: StructLogger = get_logger(__name__)


class MonitorState(Enum):
    IDLE = auto()
    BURST_OPEN = auto()


class CoalescingMonitor:
    """Drives an event source and a reporter through the burst state machine."""

    def __init__(self, source: EventSource, reporter: LineReporter, window: float) -> None:
        self.source = source
        self.reporter = reporter
        self.timer = BurstTimer(window=window)
        self.state = MonitorState.IDLE
        self._burst_records = 0

    def _absorb_next(self) -> int:
        """Read one notification and append its records. Returns the record count."""
        notification = self.source.next_notification()
        if notification is None:
            log.debug("Ignoring non-hierarchy event", state=self.state.name)
            return 0

        records = classify(notification)
        for record in records:
            self.reporter.append(record)
        self._burst_records += len(records)
        return len(records)

    def _open_burst(self) -> None:
        self.timer.arm()
        self.state = MonitorState.BURST_OPEN
        log.debug("Burst opened", window=self.timer.window, records=self._burst_records)

    def _close_burst(self) -> None:
        self.reporter.end_line()
        log.debug("Burst flushed", records=self._burst_records)
        self._burst_records = 0
        self.state = MonitorState.IDLE

    def step(self) -> None:
        """Run one transition of the state machine."""
        if self.state is MonitorState.IDLE:
            if self._absorb_next():
                self._open_burst()
            return

        if self.timer.expired:
            self._close_burst()
            return

        self.source.wait_readable_or_timeout(self.timer)
        while self.source.pending_count() > 0:
            self._absorb_next()

    def run(self) -> None:
        """Run until the source raises; an open line is terminated on the way out."""
        try:
            while True:
                self.step()
        except (XidmonError, KeyboardInterrupt):
            if self.state is MonitorState.BURST_OPEN:
                self._close_burst()
            raise


def run_monitor(source: EventSource, reporter: LineReporter, window: float) -> MonitorResult:
    """Open ``source``, run the monitor on it and report how it ended.

    This is the single point where monitor faults become a ``MonitorResult``;
    the source is closed on every path.
    """
    try:
        source.open()
        source.subscribe_hierarchy_changes()
        CoalescingMonitor(source, reporter, window).run()
    except XidmonError as e:
        result = MonitorResult.from_error(e)
        if result.outcome.is_fatal:
            log.error("Monitor stopped", outcome=result.outcome.name, reason=result.message)
        else:
            log.info("Notification source closed", reason=result.message)
        return result
    finally:
        source.close()
    return MonitorResult(outcome=Outcome.OK)


# 🔼⚙️🔚
