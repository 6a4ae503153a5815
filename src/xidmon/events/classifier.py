#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Classification of hierarchy-change notifications into reportable records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrs import frozen
from provide.foundation.logger import get_logger

from xidmon.events.types import DeviceUse, HierarchyFlag

if TYPE_CHECKING:
    from xidmon.source.protocol import HierarchyNotification

log = get_logger(__name__)

UNKNOWN_HIERARCHY_FLAG = "UnknownHierarchyFlag"
UNKNOWN_DEVICE_USE = "UnknownDeviceType"

# Topology-only changes (attach/detach, add/remove) are dropped. Name lookups
# after a disable would already observe stale state, so only enable/disable
# is reported.
ACTIONABLE_FLAGS = HierarchyFlag.DeviceEnabled | HierarchyFlag.DeviceDisabled

_FLAG_NAMES: dict[int, str] = {flag.value: flag.name for flag in HierarchyFlag}
_USE_NAMES: dict[int, str] = {use.value: use.name for use in DeviceUse}


@frozen
class ClassifiedRecord:
    """One reportable enable/disable transition."""

    hierarchy_flag_name: str
    device_use_name: str


def hierarchy_flag_name(flags: int) -> str:
    """Name of a single hierarchy flag; combined or unknown bits get the fallback."""
    return _FLAG_NAMES.get(int(flags), UNKNOWN_HIERARCHY_FLAG)


def device_use_name(use: int) -> str:
    return _USE_NAMES.get(int(use), UNKNOWN_DEVICE_USE)


def classify(notification: HierarchyNotification) -> list[ClassifiedRecord]:
    """Extract enable/disable records from a notification, in input order.

    No deduplication is done: identical entries produce identical records.
    """
    records: list[ClassifiedRecord] = []
    for info in notification.infos:
        if not info.flags & ACTIONABLE_FLAGS:
            continue
        record = ClassifiedRecord(
            hierarchy_flag_name=hierarchy_flag_name(info.flags),
            device_use_name=device_use_name(info.use),
        )
        log.debug(
            "Classified hierarchy change",
            device_id=info.device_id,
            flags=info.flags,
            use=info.use,
            flag_name=record.hierarchy_flag_name,
            use_name=record.device_use_name,
        )
        records.append(record)
    return records


# 🔼⚙️🔚
