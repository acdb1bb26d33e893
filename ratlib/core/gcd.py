# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

"""
Greatest common divisor strategies used to simplify a rational number.

A strategy is a callable (numerator, denominator) -> divisor. The numerator
and denominator are divided by the returned divisor, which may be negative;
the sign is then corrected by the denominator normalization of
:class:`ratlib.core.rational.Rational`.

:func:`prime_factor_gcd` is the default. It selects the "smallest" and
"largest" of the two values by comparing the signed values (not their
magnitudes), factors the smallest into primes and collects the factors that
also divide the largest. A negative smallest value contributes a -1 factor,
which divides everything and therefore flips the sign of the divisor.
:func:`euclid_gcd` is the reference strategy; both yield the same magnitude.
"""

import math
from public import public
from .intmath import greatest_common_factor

@public
def prime_factors(value: int):
    """
    Yields the prime factors of value with multiplicity, in ascending order.

    A negative value yields -1 first. If value has no prime factors
    (-1, 0 and 1), value itself is yielded.
    """
    if value < 0:
        yield -1
    remaining = abs(value)
    found = False
    candidate = 2
    while candidate <= remaining:
        if candidate * candidate > remaining:
            # No factor up to sqrt(remaining): remaining itself is prime.
            found = True
            yield remaining
            break
        if remaining % candidate == 0:
            remaining //= candidate
            found = True
            yield candidate
        else:
            candidate += 1
    if not found:
        yield value

@public
def find_divisors(value: int, candidates):
    """
    Yields each candidate that divides what remains of value after
    dividing out the candidates yielded before.
    """
    remaining = value
    for candidate in candidates:
        if remaining % candidate == 0:
            remaining //= candidate
            yield candidate

@public
def prime_factor_gcd(numerator: int, denominator: int) -> int:
    if numerator > denominator:
        smallest, largest = denominator, numerator
    else:
        smallest, largest = numerator, denominator
    if smallest == 0:
        # 0 has no prime factors to test against largest.
        return largest
    return math.prod(find_divisors(largest, prime_factors(smallest)))

@public
def euclid_gcd(numerator: int, denominator: int) -> int:
    return abs(greatest_common_factor(numerator, denominator))
