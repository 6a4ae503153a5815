#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test helper modules for xidmon.

This package contains a scripted event source that replays notifications on a
virtual clock, plus builders for hierarchy notifications."""

from __future__ import annotations

# 🔼⚙️🔚
