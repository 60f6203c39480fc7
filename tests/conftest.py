# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

import math
import pytest
from bigrational import BigRational

@pytest.fixture
def assert_canonical():
    """Returns a checker for the sign and coprimality invariants."""
    def check(r):
        assert isinstance(r, BigRational)
        assert r.denominator > 0
        assert math.gcd(abs(r.numerator), r.denominator) == 1
        if r.numerator == 0:
            assert r.denominator == 1
    return check

def pytest_assertrepr_compare(op, left, right):
    if isinstance(left, BigRational) and isinstance(right, BigRational) and op == "==":
        return [
            f"{left!r} == {right!r}",
            f"\tnumerator: {left.numerator} vs. {right.numerator}",
            f"\tdenominator: {left.denominator} vs. {right.denominator}",
        ]
