# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

"""
Conversion between :class:`BigRational` and fixed scale decimals.

The decimal target is modelled after a 128 bit decimal type: a coefficient of
at most 96 bits and at most 28 significant digits. Results are returned as
:class:`decimal.Decimal`.
"""

import logging
from decimal import Decimal
from public import public
from .errors import RationalOverflow
from .rational import BigRational
from .rounding import round_to_int, round_toward_zero
from .rounding_mode import RationalRounding

logger = logging.getLogger(__name__)

DECIMAL_PRECISION = 28
DECIMAL_MAX = 2**96 - 1
DECIMAL_MIN = -DECIMAL_MAX

@public
def digit_count(number: int) -> int:
    """Number of decimal digits of number (0 for zero)."""
    number = abs(number)
    count = 0
    while number:
        number //= 10
        count += 1
    return count

@public
def decimal_to_rational(value: Decimal) -> BigRational:
    """
    Exact value of a :class:`decimal.Decimal`.

    Raises ValueError for NaN and OverflowError for infinities.
    """
    value = Decimal(value)
    if value.is_nan():
        raise ValueError(f"Cannot convert {value!r} to BigRational.")
    if value.is_infinite():
        raise OverflowError(f"Cannot convert {value!r} to BigRational.")
    sign, digits, exponent = value.as_tuple()
    coefficient = 0
    for digit in digits:
        coefficient = coefficient * 10 + digit
    if sign:
        coefficient = -coefficient
    if exponent >= 0:
        return BigRational(coefficient * 10**exponent)
    return BigRational(coefficient, 10**-exponent)

@public
def rational_to_decimal(value: BigRational) -> Decimal:
    """
    Nearest decimal with at most 28 significant digits, ties rounded to even
    in the last digit.

    Raises RationalOverflow if value is outside of the decimal range.
    """
    if value < DECIMAL_MIN or value > DECIMAL_MAX:
        raise RationalOverflow("Value outside of range of valid decimal values.")
    if value.is_integer():
        return Decimal(value.numerator)

    whole = round_toward_zero(value)
    scale_digits = max(DECIMAL_PRECISION - digit_count(whole), 0)
    scale = 10**scale_digits
    scaled_fraction = (value - whole) * scale
    scaled_rounded = round_to_int(scaled_fraction, RationalRounding.TO_EVEN)
    if scaled_rounded != scaled_fraction:
        logger.debug("%s rounded to %d fractional digits.", value, scale_digits)

    coefficient = whole * scale + scaled_rounded
    while scale_digits > 0 and coefficient % 10 == 0:
        coefficient //= 10
        scale_digits -= 1
    return Decimal(f"{coefficient}E-{scale_digits}")
