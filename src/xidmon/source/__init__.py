#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Event source adapters for the device-hierarchy notification service."""

from xidmon.source.protocol import DeviceHierarchyInfo, EventSource, HierarchyNotification
from xidmon.source.xlib import XlibEventSource

__all__ = [
    "DeviceHierarchyInfo",
    "EventSource",
    "HierarchyNotification",
    "XlibEventSource",
]

# 🔼⚙️🔚
