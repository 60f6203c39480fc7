# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

"""
Truncated series expansions evaluated exactly in :class:`BigRational`.
"""

from public import public
from .errors import RationalInvalidArgument
from .rational import BigRational

def _check_terms(terms: int):
    if terms < 0:
        raise RationalInvalidArgument(f"Number of terms must not be negative, got {terms}.")

@public
def exp(x, terms: int) -> BigRational:
    """
    Sum of the first terms terms of the Taylor series of e**x, i.e.
    x**0/0! + x**1/1! + ... + x**(terms-1)/(terms-1)!.
    """
    _check_terms(terms)
    x = BigRational(x)
    total = BigRational.ZERO
    term = BigRational.ONE
    for k in range(terms):
        total += term
        term = term * x / (k + 1)
    return total

@public
def log(x, terms: int) -> BigRational:
    """
    Natural logarithm of x from the first terms terms of the series
    2 * (z + z**3/3 + z**5/5 + ...) with z = (x - 1) / (x + 1).

    The series converges for all positive x, slowly for x far from 1.
    """
    _check_terms(terms)
    x = BigRational(x)
    if not x.is_positive:
        raise RationalInvalidArgument(f"Logarithm of non-positive value {x}.")
    z = (x - 1) / (x + 1)
    z_squared = z * z
    power = z
    total = BigRational.ZERO
    for k in range(terms):
        total += power / (2 * k + 1)
        power *= z_squared
    return 2 * total
