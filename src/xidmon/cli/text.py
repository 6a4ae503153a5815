#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Static help and version text."""

from __future__ import annotations

PROG_NAME = "xidmon"

HELP_TEXT = """\
xidmon: wait for device enable/disable over XInput2 and print notifications on
stdout. Each notification is composed of two tab-delimited fields:
\t<XInput2 hierarchy flag> <XInput2 device use>

Notifications arriving within a short window are coalesced onto a single line.

Usage: xidmon [-h] [-V]

Environment:
\tDISPLAY                  X display to monitor
\tXIDMON_BURST_WINDOW_MS   coalescing window in milliseconds (default 250)
\tXIDMON_LOG_LEVEL         diagnostics written to stderr (default WARNING)

Sample output:

\tDeviceDisabled\tSlaveKeyboard\tDeviceDisabled\tSlavePointer
\tDeviceEnabled\tSlaveKeyboard\tDeviceEnabled\tSlavePointer
"""

COPYRIGHT = "Copyright (c) 2025 provide.io llc. All rights reserved."
LICENSE = "License Apache-2.0 <https://www.apache.org/licenses/LICENSE-2.0>"


def version_text(version: str) -> str:
    return f"{PROG_NAME} {version}\n{COPYRIGHT}\n{LICENSE}\n"


# 🔼⚙️🔚
