# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

"""
Rounding of :class:`BigRational` values to integers and to multiples of a
tick size, with the tie-breaking policies of :class:`RationalRounding`.

The *_impl helpers expect a value that is not an integer; the public
functions return integral values unchanged before calling them.
"""

from public import public
from .errors import RationalInvalidArgument
from .rounding_mode import RationalRounding, coerce_rounding
from .rational import BigRational, truncated_quotient

def _floor_impl(value) -> int:
    quotient = truncated_quotient(value.numerator, value.denominator)
    return quotient - 1 if value.is_negative else quotient

def _ceiling_impl(value) -> int:
    quotient = truncated_quotient(value.numerator, value.denominator)
    return quotient if value.is_negative else quotient + 1

def _compare_to_half(fraction) -> int:
    twice = 2 * fraction.numerator
    return (twice > fraction.denominator) - (twice < fraction.denominator)

# Each rule decides whether to step up from the floor, given the comparison
# of the fractional part with 1/2, the value itself and its floor.

def _up(half, value, floor):
    return half >= 0

def _down(half, value, floor):
    return half > 0

def _toward_zero(half, value, floor):
    return half > 0 if value.is_positive else half >= 0

def _away_from_zero(half, value, floor):
    return half >= 0 if value.is_positive else half > 0

def _to_even(half, value, floor):
    return half > 0 or (half == 0 and floor % 2 == 1)

_rules = {
    RationalRounding.TO_EVEN: _to_even,
    RationalRounding.UP: _up,
    RationalRounding.DOWN: _down,
    RationalRounding.AWAY_FROM_ZERO: _away_from_zero,
    RationalRounding.TOWARD_ZERO: _toward_zero,
}

def _round_impl(value, mode: RationalRounding) -> int:
    try:
        rule = _rules[mode]
    except KeyError:
        raise RationalInvalidArgument(f"Invalid RationalRounding: {mode!r}.") from None
    floor = _floor_impl(value)
    half = _compare_to_half(value - floor)
    return floor + 1 if rule(half, value, floor) else floor

def _checked_tick(tick) -> BigRational:
    tick = BigRational(tick)
    if not tick.is_positive:
        raise RationalInvalidArgument(f"Invalid tick size {tick}. Tick must be greater than zero.")
    return tick

@public
def floor(value, tick=None) -> BigRational:
    """
    Largest multiple of tick that is less than or equal to value. Without
    tick, the largest integer less than or equal to value.
    """
    value = BigRational(value)
    if tick is None:
        return value if value.is_integer() else BigRational(_floor_impl(value))
    tick = _checked_tick(tick)
    ticks = value / tick
    return value if ticks.is_integer() else _floor_impl(ticks) * tick

@public
def ceiling(value, tick=None) -> BigRational:
    """
    Smallest multiple of tick that is greater than or equal to value. Without
    tick, the smallest integer greater than or equal to value.
    """
    value = BigRational(value)
    if tick is None:
        return value if value.is_integer() else BigRational(_ceiling_impl(value))
    tick = _checked_tick(tick)
    ticks = value / tick
    return value if ticks.is_integer() else _ceiling_impl(ticks) * tick

@public
def round_to_tick(value, tick, mode=RationalRounding.TO_EVEN) -> BigRational:
    """
    Rounds value to the nearest multiple of tick. Ties are broken according
    to mode.

    Raises RationalInvalidArgument for an undefined mode or a tick that is
    not strictly positive.
    """
    mode = coerce_rounding(mode)
    tick = _checked_tick(tick)
    value = BigRational(value)
    ticks = value / tick
    return value if ticks.is_integer() else _round_impl(ticks, mode) * tick

@public
def round_to_int(value, mode=RationalRounding.TO_EVEN) -> int:
    """Rounds value to the nearest integer, ties broken according to mode."""
    mode = coerce_rounding(mode)
    value = BigRational(value)
    return value.numerator if value.is_integer() else _round_impl(value, mode)

@public
def round_toward_zero(value) -> int:
    """Truncates value to an integer."""
    value = BigRational(value)
    return truncated_quotient(value.numerator, value.denominator)
