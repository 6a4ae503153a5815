#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the outcome taxonomy."""

import pytest

from xidmon.errors import (
    ConnectionFailure,
    MonitorResult,
    Outcome,
    SourceClosed,
    UnexpectedFailure,
    XidmonError,
)


@pytest.mark.parametrize(
    ("outcome", "exit_code"),
    [
        (Outcome.OK, 0),
        (Outcome.SOURCE_CLOSED, 0),
        (Outcome.CONNECTION_FAILURE, 1),
        (Outcome.UNEXPECTED_FAILURE, 1),
    ],
)
def test_exit_codes(outcome, exit_code):
    assert outcome.exit_code == exit_code
    assert outcome.is_fatal is (exit_code != 0)


@pytest.mark.parametrize(
    ("error_type", "outcome"),
    [
        (ConnectionFailure, Outcome.CONNECTION_FAILURE),
        (UnexpectedFailure, Outcome.UNEXPECTED_FAILURE),
        (SourceClosed, Outcome.SOURCE_CLOSED),
    ],
)
def test_errors_carry_their_outcome(error_type, outcome):
    error = error_type("details")
    assert isinstance(error, XidmonError)
    assert error.outcome is outcome
    assert error.message == "details"


def test_result_from_error():
    result = MonitorResult.from_error(ConnectionFailure("X Input extension not available."))
    assert result.outcome is Outcome.CONNECTION_FAILURE
    assert result.message == "X Input extension not available."
    assert result.exit_code == 1


# 🔼⚙️🔚
