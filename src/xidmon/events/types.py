#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XInput2 hierarchy enumerations, with the values the protocol puts on the wire."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class HierarchyFlag(IntFlag):
    """Bits of ``XIHierarchyInfo.flags``."""

    MasterAdded = 1 << 0
    MasterRemoved = 1 << 1
    SlaveAdded = 1 << 2
    SlaveRemoved = 1 << 3
    SlaveAttached = 1 << 4
    SlaveDetached = 1 << 5
    DeviceEnabled = 1 << 6
    DeviceDisabled = 1 << 7


class DeviceUse(IntEnum):
    """Role of a device in the input topology (``XIHierarchyInfo.use``)."""

    MasterPointer = 1
    MasterKeyboard = 2
    SlavePointer = 3
    SlaveKeyboard = 4
    FloatingSlave = 5


# 🔼⚙️🔚
