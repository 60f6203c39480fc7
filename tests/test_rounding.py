# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

import math
import pytest
from bigrational import BigRational as R
from bigrational import RationalRounding, RationalInvalidArgument, \
    floor, ceiling, round_to_tick, round_to_int, round_toward_zero

Mode = RationalRounding

@pytest.mark.parametrize("value,expected", [
    ("1/2", "1"), ("-1/2", "0"), ("1", "1"), ("-1", "-1"), ("7/3", "3"), ("-7/3", "-2"),
])
def test_ceiling(value, expected):
    assert ceiling(R(value)) == R(expected)
    assert R(value).ceiling() == R(expected)
    assert type(ceiling(R(value))) is R

@pytest.mark.parametrize("value,tick,expected", [
    ("1/6", "1/3", "1/3"),
    ("3/6", "1/3", "2/3"),
    ("2/6", "1/3", "1/3"),
    ("-1/6", "1/3", "0"),
    ("-3/6", "1/3", "-1/3"),
    ("5", "2", "6"),
])
def test_ceiling_with_tick(value, tick, expected):
    assert ceiling(R(value), R(tick)) == R(expected)
    assert R(value).ceiling(tick) == R(expected)

@pytest.mark.parametrize("value,expected", [
    ("3/2", 1), ("-3/2", -2), ("1", 1), ("-1", -1), ("0", 0),
])
def test_floor(value, expected):
    assert floor(R(value)) == expected
    assert R(value).floor() == expected
    assert math.floor(R(value)) == expected

@pytest.mark.parametrize("value,tick,expected", [
    ("1/6", "1/3", "0"),
    ("3/6", "1/3", "1/3"),
    ("2/6", "1/3", "1/3"),
    ("-1/6", "1/3", "-1/3"),
    ("-3/6", "1/3", "-2/3"),
    ("-2/6", "1/3", "-1/3"),
    ("-2", "1/3", "-2"),
    ("2", "1", "2"),
])
def test_floor_with_tick(value, tick, expected):
    assert floor(R(value), R(tick)) == R(expected)
    assert R(value).floor(R(tick)) == R(expected)

@pytest.mark.parametrize("value,mode,expected", [
    ("1/6", Mode.DOWN, "0"),
    ("3/6", Mode.DOWN, "1/3"),
    ("1/6", Mode.UP, "1/3"),
    ("3/6", Mode.UP, "2/3"),
    ("1/6", Mode.TOWARD_ZERO, "0"),
    ("3/6", Mode.TOWARD_ZERO, "1/3"),
    ("1/6", Mode.AWAY_FROM_ZERO, "1/3"),
    ("3/6", Mode.AWAY_FROM_ZERO, "2/3"),
    ("1/6", Mode.TO_EVEN, "0"),
    ("3/6", Mode.TO_EVEN, "2/3"),
    ("-1/6", Mode.DOWN, "-1/3"),
    ("-3/6", Mode.DOWN, "-2/3"),
    ("-1/6", Mode.UP, "0"),
    ("-3/6", Mode.UP, "-1/3"),
    ("-1/6", Mode.TOWARD_ZERO, "0"),
    ("-3/6", Mode.TOWARD_ZERO, "-1/3"),
    ("-1/6", Mode.AWAY_FROM_ZERO, "-1/3"),
    ("-3/6", Mode.AWAY_FROM_ZERO, "-2/3"),
    ("-1/6", Mode.TO_EVEN, "0"),
    ("-3/6", Mode.TO_EVEN, "-2/3"),
])
def test_round_to_tick_at_midpoint(value, mode, expected, assert_canonical):
    actual = round_to_tick(R(value), R(1, 3), mode)
    assert_canonical(actual)
    assert actual == R(expected)
    assert R(value).round_to_tick(R(1, 3), mode) == R(expected)

@pytest.mark.parametrize("mode", list(Mode))
def test_round_to_tick_not_at_midpoint(mode):
    epsilon = R(1, 12)
    tick = R(1, 3)
    for k in range(-6, 7):
        multiple = k * tick
        assert round_to_tick(multiple + epsilon, tick, mode) == multiple
        assert round_to_tick(multiple - epsilon, tick, mode) == multiple
        assert round_to_tick(multiple, tick, mode) == multiple

def test_round_to_tick_invalid_mode():
    with pytest.raises(RationalInvalidArgument):
        round_to_tick(R(1), R(1, 2), 100)
    with pytest.raises(RationalInvalidArgument):
        round_to_tick(R(1), R(1, 2), "sideways")
    with pytest.raises(ValueError):
        R(1).round_to_tick(R(1, 2), 100)

@pytest.mark.parametrize("tick", [R(0), R(-1, 2), -3])
def test_invalid_tick(tick):
    with pytest.raises(RationalInvalidArgument):
        round_to_tick(R(1), tick, Mode.TO_EVEN)
    with pytest.raises(RationalInvalidArgument):
        floor(R(1, 3), tick)
    with pytest.raises(RationalInvalidArgument):
        ceiling(R(1, 3), tick)

@pytest.mark.parametrize("value,mode,expected", [
    ("1/2", Mode.DOWN, 0),
    ("-1/2", Mode.DOWN, -1),
    ("1/2", Mode.UP, 1),
    ("-1/2", Mode.UP, 0),
    ("1/2", Mode.TOWARD_ZERO, 0),
    ("-1/2", Mode.TOWARD_ZERO, 0),
    ("1/2", Mode.AWAY_FROM_ZERO, 1),
    ("-1/2", Mode.AWAY_FROM_ZERO, -1),
    ("1/2", Mode.TO_EVEN, 0),
    ("-1/2", Mode.TO_EVEN, 0),
    ("3/2", Mode.TO_EVEN, 2),
    ("-3/2", Mode.TO_EVEN, -2),
    ("5/2", Mode.TO_EVEN, 2),
])
def test_round_to_int_at_midpoint(value, mode, expected):
    actual = round_to_int(R(value), mode)
    assert type(actual) is int
    assert actual == expected
    assert R(value).round_to_int(mode) == expected

@pytest.mark.parametrize("mode", list(Mode))
def test_round_to_int_not_at_midpoint(mode):
    epsilon = R(1, 3)
    for k in range(-3, 4):
        assert round_to_int(k + epsilon, mode) == k
        assert round_to_int(k - epsilon, mode) == k
        assert round_to_int(R(k), mode) == k

def test_round_to_int_invalid_mode():
    with pytest.raises(RationalInvalidArgument):
        round_to_int(R(1), 100)
    with pytest.raises(RationalInvalidArgument):
        round_to_int(R(1, 2), object())

def test_mode_coercion():
    assert round_to_int(R(1, 2), "up") == 1
    assert round_to_int(R(1, 2), "AWAY_FROM_ZERO") == 1
    assert round_to_int(R(1, 2), 2) == 0
    assert round_to_tick(R(1, 6), "1/3", "up") == R(1, 3)

def test_non_rational_arguments():
    assert round_to_int(2.5, Mode.TO_EVEN) == 2
    assert round_to_tick(0.3, "1/10", Mode.TO_EVEN) == R(3, 10)
    assert floor("7/2") == R(3)

def test_round_toward_zero():
    assert round_toward_zero(R(7, 2)) == 3
    assert round_toward_zero(R(-7, 2)) == -3
    assert round_toward_zero(R(-4)) == -4
    assert math.trunc(R(-7, 2)) == -3

def test_builtin_round():
    assert round(R(1, 2)) == 0
    assert round(R(3, 2)) == 2
    assert round(R(-5, 2)) == -2
    assert round(R(7, 3)) == 2
    assert round(R(1, 8), 2) == R(12, 100)
    assert round(R(3, 8), 2) == R(38, 100)
    assert round(R(1250), -2) == R(1200)
    assert round(R(1350), -2) == R(1400)
    assert type(round(R(1, 8), 2)) is R
    assert math.ceil(R(1, 2)) == 1
    assert math.ceil(R(-1, 2)) == 0

def test_default_mode_is_to_even(monkeypatch):
    monkeypatch.setenv("BIGRATIONAL_ROUNDING", "UP")
    assert round_to_int(R(1, 2)) == 0
    assert round_to_int(R(3, 2)) == 2
    assert round_to_tick(R(1, 6), R(1, 3)) == R(0)
    assert round_to_tick(R(3, 6), R(1, 3)) == R(2, 3)
    assert R(1, 2).round_to_int() == 0
    assert R(1, 6).round_to_tick(R(1, 3)) == R(0)

@pytest.mark.parametrize("mode", [True, False, 1.0, 2.5, None, R(1)])
def test_mode_must_be_member_name_or_int(mode):
    with pytest.raises(RationalInvalidArgument):
        round_to_int(R(1, 2), mode)
    with pytest.raises(RationalInvalidArgument):
        round_to_tick(R(1, 6), R(1, 3), mode)
