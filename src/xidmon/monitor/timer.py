#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Countdown bounding how long one burst may stay open."""

from __future__ import annotations

from attrs import define, field


@define
class BurstTimer:
    """A re-armable countdown, in seconds.

    ``arm`` starts a full window; ``consume`` deducts elapsed time and
    saturates at zero. The timer is armed once per burst and only ever
    consumed afterwards, so the window bounds the whole burst rather than
    the gap between events.
    """

    window: float
    remaining: float = field(default=0.0)

    def arm(self) -> None:
        self.remaining = self.window

    def consume(self, elapsed: float) -> None:
        self.remaining = max(0.0, self.remaining - max(0.0, elapsed))

    @property
    def expired(self) -> bool:
        return self.remaining <= 0.0


# 🔼⚙️🔚
