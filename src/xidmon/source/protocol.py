#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Backend-neutral view of hierarchy notifications and the source contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from attrs import field, frozen

if TYPE_CHECKING:
    from xidmon.monitor.timer import BurstTimer


@frozen
class DeviceHierarchyInfo:
    """One entry of a hierarchy-change notification."""

    flags: int
    use: int
    device_id: int = 0
    enabled: bool = False


@frozen
class HierarchyNotification:
    """A decoded hierarchy-change notification.

    Holds copies of the wire values only; nothing from the backend's event
    buffers outlives the call that produced it.
    """

    infos: tuple[DeviceHierarchyInfo, ...] = field(converter=tuple, factory=tuple)
    flags: int = 0
    time: int = 0


class EventSource(Protocol):
    """Contract between the coalescing monitor and a notification backend."""

    def open(self) -> None:
        """Connect and negotiate; raises ConnectionFailure."""
        ...

    def subscribe_hierarchy_changes(self) -> None:
        """Select hierarchy-change notifications for all devices on the root window."""
        ...

    def next_notification(self) -> HierarchyNotification | None:
        """Block for one event; ``None`` when it is not a hierarchy change.

        Raises:
            SourceClosed: The connection went away.
            UnexpectedFailure: The event payload could not be decoded.
        """
        ...

    def pending_count(self) -> int:
        """Number of events already queued, without blocking."""
        ...

    def wait_readable_or_timeout(self, timer: BurstTimer) -> None:
        """Block until readable or the timer runs out, deducting the time spent."""
        ...

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...


# 🔼⚙️🔚
