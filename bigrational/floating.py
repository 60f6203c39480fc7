# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

"""
Conversion between :class:`BigRational` and IEEE 754 binary floating point.

Floats are converted to BigRational exactly. BigRational is converted to
double precision with round-to-nearest, ties-to-even, including gradual
underflow to subnormal numbers and overflow to infinity. Single precision
results are obtained by narrowing the double precision result.
"""

import functools
import logging
import math
import struct
import numpy as np
from public import public
from .rational import BigRational

logger = logging.getLogger(__name__)

EXPONENT_BIAS = 1023
MAX_EXPONENT = 1023
MIN_EXPONENT = -1022
EXPONENT_BITS = 11
FRACTION_BITS = 52
GUARD_BITS = 8

_exponent_mask = (1 << EXPONENT_BITS) - 1
_fraction_mask = (1 << FRACTION_BITS) - 1
_guard_mask = (1 << GUARD_BITS) - 1
_guard_half = 1 << (GUARD_BITS - 1)
_sign_bit = 1 << (FRACTION_BITS + EXPONENT_BITS)
_infinity_bits = _exponent_mask << FRACTION_BITS

@public
def double_to_bits(value: float) -> int:
    """IEEE 754 bit pattern of a double as unsigned 64 bit integer."""
    return struct.unpack('<Q', struct.pack('<d', value))[0]

@public
def bits_to_double(bits: int) -> float:
    """Double with the given IEEE 754 bit pattern."""
    return struct.unpack('<d', struct.pack('<Q', bits))[0]

@functools.cache
def negative_powers_of_two() -> tuple[BigRational, ...]:
    """Table t with t[i] == 2**-i for i in 0..52, built on first use."""
    return tuple(BigRational(2).pow(-i) for i in range(FRACTION_BITS + 1))

@public
def double_to_rational(value) -> BigRational:
    """
    Exact value of a double.

    Raises ValueError for NaN and OverflowError for infinities.
    """
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"Cannot convert {value!r} to BigRational.")
    if math.isinf(value):
        raise OverflowError(f"Cannot convert {value!r} to BigRational.")

    bits = double_to_bits(value)
    biased_exponent = (bits >> FRACTION_BITS) & _exponent_mask
    if biased_exponent == 0:
        # zero or subnormal: no implicit leading one
        mantissa = BigRational.ZERO
        exponent = MIN_EXPONENT
    else:
        mantissa = BigRational.ONE
        exponent = biased_exponent - EXPONENT_BIAS

    fraction = bits & _fraction_mask
    powers = negative_powers_of_two()
    for i in range(1, FRACTION_BITS + 1):
        if fraction & (1 << (FRACTION_BITS - i)):
            mantissa += powers[i]

    sign = -1 if bits & _sign_bit else 1
    return sign * mantissa * BigRational(2).pow(exponent)

@public
def single_to_rational(value) -> BigRational:
    """Exact value of value after narrowing it to single precision."""
    return double_to_rational(float(np.float32(value)))

def _signed_zero(negative: bool) -> float:
    return -0.0 if negative else 0.0

def _signed_infinity(negative: bool) -> float:
    return -math.inf if negative else math.inf

@public
def rational_to_double(value: BigRational) -> float:
    """
    Nearest double to value. Halfway cases are rounded to the value with even
    mantissa. Magnitudes beyond the double range become infinity, magnitudes
    below half the smallest subnormal become zero with the sign of value.

    Zero is converted to positive zero.
    """
    if value.is_zero:
        return 0.0

    negative = value.is_negative
    a = abs(value.numerator)
    b = value.denominator

    # Find exponent such that 2**exponent <= a/b < 2**(exponent + 1).
    exponent = a.bit_length() - b.bit_length()
    if exponent >= 0:
        below = a < (b << exponent)
    else:
        below = (a << -exponent) < b
    if below:
        exponent -= 1

    if exponent > MAX_EXPONENT:
        logger.debug("%s overflows double precision.", value)
        return _signed_infinity(negative)
    if exponent < MIN_EXPONENT - FRACTION_BITS - 1:
        logger.debug("%s underflows double precision.", value)
        return _signed_zero(negative)

    # Subnormals share the scale of the smallest normal exponent and thus
    # keep fewer significant bits.
    scale_exponent = max(exponent, MIN_EXPONENT)
    shift = FRACTION_BITS + GUARD_BITS - scale_exponent
    if shift >= 0:
        quotient, remainder = divmod(a << shift, b)
    else:
        quotient, remainder = divmod(a, b << -shift)

    mantissa = quotient >> GUARD_BITS
    guard = quotient & _guard_mask
    if (guard & _guard_half) and ((guard & (_guard_half - 1)) or remainder or (mantissa & 1)):
        mantissa += 1

    # The mantissa of a normal number still holds the implicit leading one,
    # which adds one to the biased exponent field. A carry out of the
    # mantissa after rounding increments the exponent field once more.
    bits = ((scale_exponent - MIN_EXPONENT) << FRACTION_BITS) + mantissa
    if bits >= _infinity_bits:
        logger.debug("%s rounds to infinity in double precision.", value)
        return _signed_infinity(negative)
    if bits == 0:
        logger.debug("%s rounds to zero in double precision.", value)
        return _signed_zero(negative)
    if negative:
        bits |= _sign_bit
    return bits_to_double(bits)

@public
def rational_to_single(value: BigRational) -> np.float32:
    """Narrows the double precision value of value to single precision."""
    with np.errstate(over='ignore', under='ignore'):
        return np.float32(rational_to_double(value))
