# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

import decimal
import fractions
import math
import numbers
import operator
import re
import numpy as np
from public import public
from .errors import RationalDivideByZero, RationalFormatError, \
    RationalInvalidArgument, RationalSerializationError
from .rounding_mode import RationalRounding

_integer_re = re.compile(r"\s*[+-]?[0-9]+\s*")

def _canonical(numerator: int, denominator: int) -> tuple[int, int]:
    if denominator == 0:
        raise RationalDivideByZero("The denominator of a BigRational cannot be zero.")
    if numerator == 0:
        return 0, 1
    gcd = math.gcd(numerator, denominator)
    if denominator < 0:
        gcd = -gcd
    return numerator // gcd, denominator // gcd

def _is_nonfinite(x) -> bool:
    if isinstance(x, (float, np.floating)):
        return not math.isfinite(x)
    if isinstance(x, decimal.Decimal):
        return not x.is_finite()
    return False

def _lift(cls, x):
    """Returns x as an instance of cls, or None if x is no rational-like number."""
    if isinstance(x, cls):
        return x
    if isinstance(x, (numbers.Rational, float, np.floating, decimal.Decimal)):
        return cls(x)
    return None

def truncated_quotient(numerator: int, denominator: int) -> int:
    """Integer quotient rounded toward zero (denominator must be positive)."""
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient

def _restore(cls, numerator, denominator):
    return cls.from_pair(numerator, denominator)

# Operators are implemented once for two BigRationals. _operators wraps such
# an implementation into forward and reverse methods that lift the other
# operand first.

def _operators(impl, name):
    def forward(a, b):
        b = _lift(type(a), b)
        if b is None:
            return NotImplemented
        return impl(a, b)

    def reverse(b, a):
        a = _lift(type(b), a)
        if a is None:
            return NotImplemented
        return impl(a, b)

    forward.__name__ = f'__{name}__'
    forward.__doc__ = impl.__doc__
    reverse.__name__ = f'__r{name}__'
    reverse.__doc__ = impl.__doc__
    return forward, reverse

def _add(a, b):
    """(a/b) + (c/d) = (ad + cb) / bd"""
    return type(a)(a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator)

def _sub(a, b):
    """(a/b) - (c/d) = (ad - cb) / bd"""
    return type(a)(a.numerator * b.denominator - b.numerator * a.denominator,
        a.denominator * b.denominator)

def _mul(a, b):
    """(a/b) * (c/d) = ac / bd"""
    return type(a)(a.numerator * b.numerator, a.denominator * b.denominator)

def _truediv(a, b):
    """(a/b) / (c/d) = ad / bc"""
    return type(a)(a.numerator * b.denominator, a.denominator * b.numerator)

def _floordiv(a, b):
    """Quotient of a / b, truncated toward zero."""
    quotient = _truediv(a, b)
    return type(a)(truncated_quotient(quotient.numerator, quotient.denominator))

def _mod(a, b):
    """Remainder of a / b with the sign of a: a - trunc(a / b) * b."""
    return _sub(a, _mul(_floordiv(a, b), b))

def _divmod(a, b):
    """(a // b, a % b), both using the truncated quotient."""
    quotient = _floordiv(a, b)
    return quotient, _sub(a, _mul(quotient, b))

@public
class BigRational(fractions.Fraction):
    """
    Exact rational number with arbitrarily large numerator and denominator.

    It extends :class:`fractions.Fraction` from Python's standard library and
    keeps every instance canonical: the denominator is positive, numerator and
    denominator are coprime and zero is always 0/1.

    - The constructor accepts two integers (numerator, denominator), or a
      single integer, rational, float, :class:`decimal.Decimal` or string.
      Floats and decimals are converted exactly.
    - Arithmetic and comparison operators accept integers, fractions, floats
      and decimals and lift them to BigRational exactly before combining.
    - % and // use the quotient truncated toward zero, like math.fmod.
    - float() rounds correctly (half to even), see :mod:`bigrational.floating`.
    - str() yields "[numerator]/[denominator]", repr() yields
      "BigRational('[numerator]/[denominator]')".
      Both are subject to the interpreter's limit on integer string
      conversion (:func:`sys.get_int_max_str_digits`, 4300 digits by
      default), which raises ValueError for larger numerators or
      denominators. parse() reports such text as RationalFormatError.
    """

    __slots__ = ()

    def __new__(cls, numerator=0, denominator=None):
        if denominator is None:
            if isinstance(numerator, numbers.Integral):
                numerator, denominator = int(numerator), 1
            elif isinstance(numerator, numbers.Rational):
                numerator, denominator = _canonical(int(numerator.numerator),
                    int(numerator.denominator))
            elif isinstance(numerator, (float, np.floating)):
                return cls.from_float(numerator)
            elif isinstance(numerator, decimal.Decimal):
                return cls.from_decimal(numerator)
            elif isinstance(numerator, str):
                return cls.parse(numerator)
            else:
                raise TypeError(f"Cannot convert {numerator!r} to {cls.__name__}.")
        elif isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral):
            numerator, denominator = _canonical(int(numerator), int(denominator))
        else:
            raise TypeError(f"{cls.__name__} numerator and denominator must be integers.")
        return super().__new__(cls, numerator, denominator)

    @classmethod
    def from_pair(cls, numerator, denominator):
        """
        Rebuilds a value from external (numerator, denominator) data, which
        must already be in lowest terms with a positive denominator.
        """
        if not (isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral)) \
                or denominator <= 0 or math.gcd(numerator, denominator) != 1:
            raise RationalSerializationError(
                f"({numerator!r}, {denominator!r}) is not a canonical BigRational.")
        return cls(numerator, denominator)

    def __reduce__(self):
        return (_restore, (type(self), self.numerator, self.denominator))

    @classmethod
    def parse(cls, text):
        """
        Parses "[integer]" or "[integer]/[integer]".

        Raises RationalFormatError if text has neither form or the denominator
        is zero, or if an integer exceeds the interpreter's string
        conversion limit.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}.")
        parts = text.split('/')
        if len(parts) <= 2 and all(_integer_re.fullmatch(p) for p in parts):
            try:
                numerator = int(parts[0])
                denominator = int(parts[1]) if len(parts) == 2 else 1
            except ValueError as e:
                # integer string conversion length limit
                raise RationalFormatError(f"Could not parse \"{text[:40]}...\" as a BigRational: {e}") from e
            if denominator != 0:
                return cls(numerator, denominator)
        raise RationalFormatError(f"Could not parse \"{text}\" as a BigRational.")

    @classmethod
    def try_parse(cls, text):
        """Like :meth:`parse`, but returns None when text cannot be parsed."""
        try:
            return cls.parse(text)
        except (RationalFormatError, TypeError):
            return None

    @classmethod
    def from_float(cls, f):
        """Exact value of the double precision float f."""
        from .floating import double_to_rational
        r = double_to_rational(f)
        return r if type(r) is cls else cls(r.numerator, r.denominator)

    @classmethod
    def from_single(cls, f):
        """Exact value of f after narrowing it to single precision."""
        from .floating import single_to_rational
        r = single_to_rational(f)
        return r if type(r) is cls else cls(r.numerator, r.denominator)

    @classmethod
    def from_decimal(cls, dec):
        """Exact value of the :class:`decimal.Decimal` dec."""
        from .decimals import decimal_to_rational
        r = decimal_to_rational(dec)
        return r if type(r) is cls else cls(r.numerator, r.denominator)

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"

    def __format__(self, spec):
        if spec in ('s', ''):
            return str(self)
        return super().__format__(spec)

    @property
    def sign(self) -> int:
        """-1, 0 or 1 depending on the sign of the numerator."""
        return (self.numerator > 0) - (self.numerator < 0)

    @property
    def is_positive(self) -> bool:
        return self.numerator > 0

    @property
    def is_negative(self) -> bool:
        return self.numerator < 0

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    @property
    def is_minus_one(self) -> bool:
        return self.numerator == -1 and self.denominator == 1

    def is_integer(self) -> bool:
        """True if the value can be represented as integer (x/1)."""
        return self.denominator == 1

    # Arithmetic

    __add__, __radd__ = _operators(_add, 'add')
    __sub__, __rsub__ = _operators(_sub, 'sub')
    __mul__, __rmul__ = _operators(_mul, 'mul')
    __truediv__, __rtruediv__ = _operators(_truediv, 'truediv')
    __floordiv__, __rfloordiv__ = _operators(_floordiv, 'floordiv')
    __mod__, __rmod__ = _operators(_mod, 'mod')
    __divmod__, __rdivmod__ = _operators(_divmod, 'divmod')

    def __neg__(self):
        return type(self)(-self.numerator, self.denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self.is_negative else self

    def increment(self):
        """self + 1"""
        return type(self)(self.numerator + self.denominator, self.denominator)

    def decrement(self):
        """self - 1"""
        return type(self)(self.numerator - self.denominator, self.denominator)

    def reciprocal(self):
        """1 / self. Raises RationalDivideByZero for zero."""
        return type(self)(self.denominator, self.numerator)

    def pow(self, exp):
        """
        self raised to the integer power exp.

        Zero can only be raised to positive powers, anything else raises
        RationalInvalidArgument.
        """
        exp = operator.index(exp)
        if self.is_zero:
            if exp <= 0:
                raise RationalInvalidArgument(f"Cannot raise zero to the power {exp}.")
            return self
        if exp >= 0:
            return type(self)(self.numerator ** exp, self.denominator ** exp)
        return type(self)(self.denominator ** -exp, self.numerator ** -exp)

    def __pow__(self, other):
        if isinstance(other, numbers.Integral):
            return self.pow(other)
        elif isinstance(other, numbers.Rational) and other.denominator == 1:
            return self.pow(other.numerator)
        elif isinstance(other, (numbers.Real, np.floating)):
            return float(self) ** float(other)
        return NotImplemented

    def __rpow__(self, other):
        if self.is_integer():
            base = _lift(type(self), other)
            if base is not None:
                return base.pow(self.numerator)
        if isinstance(other, (numbers.Real, np.floating)):
            return float(other) ** float(self)
        return NotImplemented

    # Comparison

    def __eq__(self, other):
        if _is_nonfinite(other):
            return False
        other = _lift(type(self), other)
        if other is None:
            return NotImplemented
        return self.numerator * other.denominator == other.numerator * self.denominator

    __hash__ = fractions.Fraction.__hash__

    def _richcmp(self, other, op):
        if _is_nonfinite(other):
            # Orders like a finite float would: NaN is unordered.
            if isinstance(other, decimal.Decimal) and other.is_nan():
                return False
            return op(0.0, float(other))
        other = _lift(type(self), other)
        if other is None:
            return NotImplemented
        return op(self.numerator * other.denominator, other.numerator * self.denominator)

    def __lt__(self, other):
        return self._richcmp(other, operator.lt)

    def __le__(self, other):
        return self._richcmp(other, operator.le)

    def __gt__(self, other):
        return self._richcmp(other, operator.gt)

    def __ge__(self, other):
        return self._richcmp(other, operator.ge)

    def compare_to(self, other) -> int:
        """Returns -1, 0 or 1 if self is less than, equal to or greater than other."""
        lifted = _lift(type(self), other)
        if lifted is None:
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}.")
        left = self.numerator * lifted.denominator
        right = lifted.numerator * self.denominator
        return (left > right) - (left < right)

    # Rounding

    def floor(self, tick=None):
        """See :func:`bigrational.rounding.floor`."""
        from .rounding import floor
        return floor(self, tick)

    def ceiling(self, tick=None):
        """See :func:`bigrational.rounding.ceiling`."""
        from .rounding import ceiling
        return ceiling(self, tick)

    def round_to_tick(self, tick, mode=RationalRounding.TO_EVEN):
        """See :func:`bigrational.rounding.round_to_tick`."""
        from .rounding import round_to_tick
        return round_to_tick(self, tick, mode)

    def round_to_int(self, mode=RationalRounding.TO_EVEN) -> int:
        """See :func:`bigrational.rounding.round_to_int`."""
        from .rounding import round_to_int
        return round_to_int(self, mode)

    def __trunc__(self) -> int:
        return truncated_quotient(self.numerator, self.denominator)

    def __int__(self) -> int:
        return truncated_quotient(self.numerator, self.denominator)

    def __floor__(self) -> int:
        return self.numerator // self.denominator

    def __ceil__(self) -> int:
        return -(-self.numerator // self.denominator)

    def __round__(self, ndigits=None):
        """
        Like round() for floats: half to even. Without ndigits an int is
        returned, otherwise a BigRational rounded to a multiple of
        10**-ndigits.
        """
        from .rounding import round_to_int, round_to_tick
        if ndigits is None:
            return round_to_int(self, RationalRounding.TO_EVEN)
        if ndigits >= 0:
            tick = type(self)(1, 10 ** ndigits)
        else:
            tick = type(self)(10 ** -ndigits)
        return round_to_tick(self, tick, RationalRounding.TO_EVEN)

    # Conversion

    def __float__(self) -> float:
        from .floating import rational_to_double
        return rational_to_double(self)

    def to_single(self) -> np.float32:
        """Single precision value (rounded to double first, then narrowed)."""
        from .floating import rational_to_single
        return rational_to_single(self)

    def to_decimal(self) -> decimal.Decimal:
        """See :func:`bigrational.decimals.rational_to_decimal`."""
        from .decimals import rational_to_decimal
        return rational_to_decimal(self)

BigRational.ZERO = BigRational(0)
BigRational.ONE = BigRational(1)
BigRational.MINUS_ONE = BigRational(-1)
