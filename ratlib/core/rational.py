# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

import numbers
import decimal
import fractions
import logging
from decimal import Decimal
import numpy as np
from public import public

from .errors import DivisionByZero, RationalOverflow
from .intmath import lowest_common_multiple, fits_int64, INT64_MIN, INT64_MAX
from .config import is_checked
from .gcd import prime_factor_gcd
from .textfmt import parse_fraction, format_proper

log = logging.getLogger(__name__)

DECIMAL_PRECISION = 28

def sign(value) -> int:
    return int(value > 0) - int(value < 0)

def compare_float(a, b) -> int:
    # NaN orders below every number and equal to itself.
    a_nan, b_nan = bool(a != a), bool(b != b)
    if a_nan or b_nan:
        return int(b_nan) - int(a_nan)
    return int(a > b) - int(a < b)

@public
class Rational:
    """
    Exact rational number numerator/denominator.

    The denominator is always positive. Unlike :class:`fractions.Fraction`,
    values are not reduced to lowest terms on construction: Rational(2, 4)
    keeps numerator 2 and denominator 4. :meth:`to_simplified` reduces
    explicitly; arithmetic operators always return simplified results.
    Equality, ordering and hashing work on the value, so
    Rational(2, 4) == Rational(1, 2).

    The constructor accepts:

    - Rational(numerator, denominator), e.g. Rational(3, -4) is -3/4.
    - Rational(integer), e.g. Rational(5) is 5/1.
    - Rational(text) with a mixed number, e.g. Rational("2 1/3") is 7/3.
    - Rational(rational), a copy with identical fields.

    Comparison against integers is exact. Comparison against float,
    numpy.float32 and Decimal converts the rational to that type first and
    is therefore approximate.
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator=0, denominator=None):
        if denominator is None:
            if isinstance(numerator, Rational):
                return cls.from_parts(numerator.numerator, numerator.denominator)
            elif isinstance(numerator, str):
                return cls.from_parts(*parse_fraction(numerator))
            denominator = 1
        return cls.from_parts(numerator, denominator)

    @classmethod
    def from_parts(cls, numerator, denominator):
        """Returns numerator/denominator, moving a negative sign to the numerator."""
        numerator = check_integer(numerator)
        denominator = check_integer(denominator)
        if denominator == 0:
            raise DivisionByZero("Denominator cannot be zero.")
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        if is_checked() and not (fits_int64(numerator) and fits_int64(denominator)):
            log.debug("rejected %d/%d outside of 64-bit range", numerator, denominator)
            raise RationalOverflow(
                f"{numerator}/{denominator} exceeds the range {INT64_MIN}..{INT64_MAX}.")
        self = object.__new__(cls)
        self._numerator = numerator
        self._denominator = denominator
        return self

    @classmethod
    def from_int(cls, value):
        return cls.from_parts(value, 1)

    @classmethod
    def from_text(cls, text):
        return cls.from_parts(*parse_fraction(text))

    @classmethod
    def coerce(cls, value):
        """
        Converts an integer or mixed-number text to Rational. Rational values
        are returned unchanged. Floats and Decimals are rejected, as they would
        silently bring in their rounding errors.
        """
        if isinstance(value, Rational):
            return value
        elif isinstance(value, (numbers.Integral, str)):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to {cls.__name__}.")

    @property
    def numerator(self) -> int:
        """Numerator as stored, not necessarily in lowest terms."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator as stored, always positive."""
        return self._denominator

    # Simplification

    def to_simplified(self, gcd=prime_factor_gcd) -> 'Rational':
        """
        Returns an equal Rational in lowest terms.

        gcd is the divisor strategy, see :mod:`ratlib.core.gcd`.
        """
        divisor = gcd(self._numerator, self._denominator)
        return type(self)(self._numerator // divisor, self._denominator // divisor)

    def is_simplified(self) -> bool:
        simplified = self.to_simplified()
        return (simplified.numerator, simplified.denominator) == (self._numerator, self._denominator)

    # Formatting

    def to_string(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def to_proper_string(self) -> str:
        """Returns mixed-number string such as "2 8/9", "-3" or "0"."""
        return format_proper(self._numerator, self._denominator)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"R('{self}')"

    def __format__(self, spec):
        if spec in ('s', ''):
            return str(self)
        elif spec == 'p':
            return self.to_proper_string()
        else:
            return format(self.to_double(), spec)

    # Conversion

    def to_single(self) -> np.float32:
        return np.float32(self._numerator) / np.float32(self._denominator)

    def to_double(self) -> float:
        return self._numerator / self._denominator

    def to_decimal(self) -> Decimal:
        with decimal.localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            return Decimal(self._numerator) / Decimal(self._denominator)

    def to_fraction(self) -> fractions.Fraction:
        return fractions.Fraction(self._numerator, self._denominator)

    def __float__(self):
        return self.to_double()

    def __int__(self):
        q = abs(self._numerator) // self._denominator
        return -q if self._numerator < 0 else q

    def __bool__(self):
        return self._numerator != 0

    # Comparison

    @staticmethod
    def common_denominator(value1, value2) -> tuple['Rational', 'Rational']:
        """
        Returns value1 and value2 scaled to their lowest common denominator.
        """
        if value1.denominator == value2.denominator:
            return value1, value2
        lcm = lowest_common_multiple(value1.denominator, value2.denominator)
        multiplier1 = lcm // value1.denominator
        multiplier2 = lcm // value2.denominator
        return (Rational(value1.numerator * multiplier1, lcm),
            Rational(value2.numerator * multiplier2, lcm))

    def equals_rational(self, other: 'Rational') -> bool:
        left, right = self.common_denominator(self, other)
        return left.numerator == right.numerator

    def equals_int(self, other: int) -> bool:
        return self.equals_rational(Rational.from_int(int(other)))

    def equals_single(self, other) -> bool:
        return bool(self.to_single() == np.float32(other))

    def equals_double(self, other: float) -> bool:
        # Approximate: R(1, 3) == 1/3, although their hashes differ.
        return self.to_double() == other

    def equals_decimal(self, other: Decimal) -> bool:
        return self.to_decimal() == other

    def compare_to_rational(self, other: 'Rational') -> int:
        left, right = self.common_denominator(self, other)
        return sign(left.numerator - right.numerator)

    def compare_to_int(self, other: int) -> int:
        return self.compare_to_rational(Rational.from_int(int(other)))

    def compare_to_single(self, other) -> int:
        return compare_float(self.to_single(), np.float32(other))

    def compare_to_double(self, other: float) -> int:
        return compare_float(self.to_double(), float(other))

    def compare_to_decimal(self, other: Decimal) -> int:
        value = self.to_decimal()
        if other.is_nan():
            return 1
        return sign(value.compare(other))

    def _dispatch(self, other, suffix):
        """Returns bound equals_*/compare_to_* method for type(other) or None."""
        if isinstance(other, Rational):
            kind = 'rational'
        elif isinstance(other, numbers.Integral):
            kind = 'int'
        elif isinstance(other, np.float32):
            kind = 'single'
        elif isinstance(other, float):
            kind = 'double'
        elif isinstance(other, Decimal):
            kind = 'decimal'
        else:
            return None
        return getattr(self, f"{suffix}_{kind}")

    def equals(self, other) -> bool:
        """
        Equality against Rational, integer, numpy.float32, float or Decimal.
        Returns False for all other types.
        """
        method = self._dispatch(other, 'equals')
        if method is None:
            return False
        return method(other)

    def compare_to(self, other) -> int:
        """
        Returns -1, 0 or 1 if self is less than, equal to or greater than
        other. Supports the same types as :meth:`equals`.
        """
        method = self._dispatch(other, 'compare_to')
        if method is None:
            raise TypeError(f"Cannot compare {type(self).__name__} to {type(other).__name__}.")
        return method(other)

    @staticmethod
    def equal(x: 'Rational', y: 'Rational') -> bool:
        return x.equals_rational(y)

    def __eq__(self, other):
        method = self._dispatch(other, 'equals')
        if method is None:
            return NotImplemented
        return method(other)

    def _richcmp(self, other, op):
        method = self._dispatch(other, 'compare_to')
        if method is None:
            return NotImplemented
        return op(method(other), 0)

    def __lt__(self, other):
        return self._richcmp(other, int.__lt__)

    def __le__(self, other):
        return self._richcmp(other, int.__le__)

    def __gt__(self, other):
        return self._richcmp(other, int.__gt__)

    def __ge__(self, other):
        return self._richcmp(other, int.__ge__)

    def __hash__(self):
        return self.hash_of(self)

    @staticmethod
    def hash_of(value: 'Rational') -> int:
        """
        Hash of the value in lowest terms. Equals hash() of an equal int,
        float or fractions.Fraction.
        """
        return hash(fractions.Fraction(value.numerator, value.denominator))

    # Arithmetic

    def add(self, other) -> 'Rational':
        other = Rational.coerce(other)
        value1, value2 = self.common_denominator(self, other)
        return Rational(value1.numerator + value2.numerator, value1.denominator).to_simplified()

    def subtract(self, other) -> 'Rational':
        other = Rational.coerce(other)
        value1, value2 = self.common_denominator(self, other)
        return Rational(value1.numerator - value2.numerator, value1.denominator).to_simplified()

    def multiply(self, other) -> 'Rational':
        other = Rational.coerce(other)
        return Rational(self.numerator * other.numerator,
            self.denominator * other.denominator).to_simplified()

    def divide(self, other) -> 'Rational':
        other = Rational.coerce(other)
        return Rational(self.numerator * other.denominator,
            self.denominator * other.numerator).to_simplified()

    def _operator(method, reflected=False):
        def forward(self, other):
            if not isinstance(other, (Rational, numbers.Integral, str)):
                return NotImplemented
            return method(self, other)
        def reverse(self, other):
            if not isinstance(other, (numbers.Integral, str)):
                return NotImplemented
            return method(Rational.coerce(other), self)
        return reverse if reflected else forward

    __add__ = _operator(add)
    __radd__ = _operator(add, reflected=True)
    __sub__ = _operator(subtract)
    __rsub__ = _operator(subtract, reflected=True)
    __mul__ = _operator(multiply)
    __rmul__ = _operator(multiply, reflected=True)
    __truediv__ = _operator(divide)
    __rtruediv__ = _operator(divide, reflected=True)

    del _operator

    def __neg__(self):
        return Rational(-self._numerator, self._denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational(abs(self._numerator), self._denominator)

    # Rational values are immutable.

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

def check_integer(value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Expected integer, got {type(value).__name__}.")
    return int(value)

public(R = Rational) # alias
