#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Burst coalescing for hierarchy-change notifications."""

from .loop import CoalescingMonitor, MonitorState, run_monitor
from .timer import BurstTimer

__all__ = ["BurstTimer", "CoalescingMonitor", "MonitorState", "run_monitor"]

# 🔼⚙️🔚
