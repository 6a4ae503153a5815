#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Line-oriented report output."""

from xidmon.output.reporter import FIELD_SEPARATOR, LineReporter

__all__ = ["FIELD_SEPARATOR", "LineReporter"]

# 🔼⚙️🔚
