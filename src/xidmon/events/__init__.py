#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Xidmon Events Package.

Turns raw hierarchy-change notifications into the records the monitor reports."""

from xidmon.events.classifier import (
    ACTIONABLE_FLAGS,
    UNKNOWN_DEVICE_USE,
    UNKNOWN_HIERARCHY_FLAG,
    ClassifiedRecord,
    classify,
    device_use_name,
    hierarchy_flag_name,
)
from xidmon.events.types import DeviceUse, HierarchyFlag

__all__ = [
    "ACTIONABLE_FLAGS",
    "UNKNOWN_DEVICE_USE",
    "UNKNOWN_HIERARCHY_FLAG",
    "ClassifiedRecord",
    "DeviceUse",
    "HierarchyFlag",
    "classify",
    "device_use_name",
    "hierarchy_flag_name",
]

# 🔼⚙️🔚
