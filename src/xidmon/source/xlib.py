#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XInput2 event source backed by python-xlib."""

from __future__ import annotations

from collections.abc import Callable
import select
import time
from typing import TYPE_CHECKING, Any

from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger
import Xlib.display
import Xlib.error
from Xlib.ext import ge, xinput

from xidmon.errors import ConnectionFailure, SourceClosed, UnexpectedFailure
from xidmon.source.protocol import DeviceHierarchyInfo, HierarchyNotification

if TYPE_CHECKING:
    from xidmon.monitor.timer import BurstTimer

log: StructLogger = get_logger(__name__)

XINPUT_EXTENSION = "XInputExtension"
REQUIRED_VERSION = (2, 0)

_CONNECT_ERRORS = (Xlib.error.DisplayError, Xlib.error.ConnectionClosedError, OSError)
_CLOSED_ERRORS = (Xlib.error.ConnectionClosedError, OSError)


class XlibEventSource:
    """Hierarchy-change notifications from an X server.

    Usable as a context manager: entering opens the connection and subscribes,
    leaving always closes it.
    """

    def __init__(
        self,
        display_name: str | None = None,
        *,
        display_factory: Callable[[str | None], Any] = Xlib.display.Display,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._display_name = display_name
        self._display_factory = display_factory
        self._clock = clock
        self._display: Any = None
        self._opcode: int | None = None

    def __enter__(self) -> XlibEventSource:
        self.open()
        self.subscribe_hierarchy_changes()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._display is not None

    @property
    def opcode(self) -> int | None:
        return self._opcode

    def open(self) -> None:
        try:
            self._display = self._display_factory(self._display_name)
        except _CONNECT_ERRORS as e:
            log.debug("Display connection failed", display=self._display_name, error=str(e))
            raise ConnectionFailure("Unable to connect to X display. Is DISPLAY set?") from e

        try:
            self._check_xinput()
        except BaseException:
            self.close()
            raise

    def _check_xinput(self) -> None:
        info = self._display.query_extension(XINPUT_EXTENSION)
        if info is None:
            raise ConnectionFailure("X Input extension not available.")
        self._opcode = info.major_opcode

        wanted = "{}.{}".format(*REQUIRED_VERSION)
        try:
            reply = self._display.xinput_query_version()
        except (Xlib.error.XError, AttributeError) as e:
            raise ConnectionFailure(
                f"XInputExtension: requested version {wanted}, but the server refused it."
            ) from e

        available = (int(reply.major_version), int(reply.minor_version))
        if available < REQUIRED_VERSION:
            raise ConnectionFailure(
                f"XInputExtension: requested version {wanted}, "
                f"but only {available[0]}.{available[1]} is available."
            )

        log.debug(
            "Connected to X display",
            display=self._display.get_display_name(),
            opcode=self._opcode,
            xinput_version=f"{available[0]}.{available[1]}",
        )

    def subscribe_hierarchy_changes(self) -> None:
        root = self._display.screen().root
        try:
            root.xinput_select_events([(xinput.AllDevices, xinput.HierarchyChangedMask)])
            self._display.flush()
        except _CLOSED_ERRORS as e:
            raise ConnectionFailure("Lost connection to X display while subscribing to hierarchy changes.") from e
        log.debug("Subscribed to hierarchy changes", window=root.id)

    def next_notification(self) -> HierarchyNotification | None:
        try:
            event = self._display.next_event()
        except _CLOSED_ERRORS as e:
            raise SourceClosed(str(e)) from e

        if event.type != ge.GenericEventCode:
            return None
        if getattr(event, "extension", None) != self._opcode:
            return None
        if getattr(event, "evtype", None) != xinput.HierarchyChanged:
            return None
        return self._decode(event)

    def _decode(self, event: Any) -> HierarchyNotification:
        try:
            data = event.data
            infos = tuple(
                DeviceHierarchyInfo(
                    flags=int(info.flags),
                    use=int(info.type),
                    device_id=int(info.deviceid),
                    enabled=bool(info.enabled),
                )
                for info in data.info
            )
            return HierarchyNotification(infos=infos, flags=int(data.flags), time=int(data.time))
        except (AttributeError, TypeError, ValueError) as e:
            log.error("Unable to decode XInput event data", evtype=getattr(event, "evtype", None))
            raise UnexpectedFailure("Unable to decode XInput event data") from e

    def pending_count(self) -> int:
        try:
            return int(self._display.pending_events())
        except _CLOSED_ERRORS as e:
            raise SourceClosed(str(e)) from e

    def wait_readable_or_timeout(self, timer: BurstTimer) -> None:
        start = self._clock()
        try:
            fd = self._display.fileno()
            select.select([fd], [], [], timer.remaining)
        except (OSError, ValueError) as e:
            raise SourceClosed(str(e)) from e
        finally:
            timer.consume(self._clock() - start)

    def close(self) -> None:
        display, self._display = self._display, None
        if display is None:
            return
        try:
            display.close()
        except _CLOSED_ERRORS as e:
            log.debug("Display already gone while closing", error=str(e))


# 🔼⚙️🔚
