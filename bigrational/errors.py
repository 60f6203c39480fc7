# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by :mod:`bigrational`.

Each exception also derives from the matching built-in exception, so callers
can catch e.g. :class:`ZeroDivisionError` without knowing about this package.
"""

from public import public

@public
class RationalError(Exception):
    """Base class of all errors raised by bigrational."""

@public
class RationalDivideByZero(RationalError, ZeroDivisionError):
    """Zero denominator, division or modulus by zero, reciprocal of zero."""

@public
class RationalInvalidArgument(RationalError, ValueError):
    """Invalid tick size, undefined rounding mode or undefined power."""

@public
class RationalFormatError(RationalError, ValueError):
    """Text that is neither "int" nor "int/int"."""

@public
class RationalOverflow(RationalError, OverflowError):
    """Value outside of the range of the conversion target."""

@public
class RationalSerializationError(RationalError, ValueError):
    """External (numerator, denominator) data that is not in lowest terms."""
