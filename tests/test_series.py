# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

import math
import pytest
from bigrational import BigRational as R
from bigrational import RationalInvalidArgument, series

def assert_close_to(actual, expected: float):
    """actual lies strictly between the neighbours of the double expected."""
    assert R(math.nextafter(expected, -math.inf)) < actual < R(math.nextafter(expected, math.inf))

@pytest.mark.parametrize("terms,expected", [
    (0, R(0)),
    (1, R(1)),
    (2, R(3, 2)),
    (3, R(13, 8)),
    (4, R(79, 48)),
])
def test_exp_partial_sums(terms, expected, assert_canonical):
    actual = series.exp(R(7, 14), terms)
    assert_canonical(actual)
    assert actual == expected

def test_exp():
    assert_close_to(series.exp(R(2), 40), math.exp(2))
    assert_close_to(series.exp(R(-1, 3), 30), math.exp(-1 / 3))
    assert series.exp(0, 10) == R(1)

def test_log():
    assert_close_to(series.log(R(2), 40), math.log(2))
    assert_close_to(series.log(R(25), 400), math.log(25))
    assert_close_to(series.log(R(1, 2), 40), math.log(0.5))
    assert series.log(1, 10) == R(0)

def test_invalid_arguments():
    with pytest.raises(RationalInvalidArgument):
        series.exp(R(1), -1)
    with pytest.raises(RationalInvalidArgument):
        series.log(R(2), -1)
    with pytest.raises(RationalInvalidArgument):
        series.log(R(0), 10)
    with pytest.raises(RationalInvalidArgument):
        series.log(R(-1), 10)
