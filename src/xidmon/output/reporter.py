#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Writes classified records as tab-separated fields, one line per burst."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from xidmon.events.classifier import ClassifiedRecord

FIELD_SEPARATOR = "\t"


class LineReporter:
    """Formats records onto the current output line.

    Each record contributes ``<flag><TAB><use><TAB>``; ``end_line`` adds the
    newline and flushes so pipes see the burst immediately.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.line_open = False

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    @staticmethod
    def format_record(record: ClassifiedRecord) -> str:
        return f"{record.hierarchy_flag_name}{FIELD_SEPARATOR}{record.device_use_name}{FIELD_SEPARATOR}"

    def append(self, record: ClassifiedRecord) -> None:
        self.stream.write(self.format_record(record))
        self.line_open = True

    def end_line(self) -> None:
        if not self.line_open:
            return
        self.stream.write("\n")
        self.stream.flush()
        self.line_open = False


# 🔼⚙️🔚
