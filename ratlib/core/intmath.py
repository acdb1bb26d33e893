# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

"""
Integer helpers: greatest common factor, lowest common multiple and the
signed 64-bit range used by checked arithmetic.

Remainders follow truncated division (the sign of the result follows the
dividend), so that the sign of a greatest common factor of negative
arguments is the same as with fixed-width machine integers.
"""

from public import public

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1
public(INT64_MIN = INT64_MIN)
public(INT64_MAX = INT64_MAX)

def trunc_rem(a: int, b: int) -> int:
    """Remainder of a / b rounded toward zero."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r

def trunc_div(a: int, b: int) -> int:
    """Quotient of a / b rounded toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q

@public
def greatest_common_factor(value: int, other: int) -> int:
    while other != 0:
        value, other = other, trunc_rem(value, other)
    return value

@public
def lowest_common_multiple(value: int, other: int) -> int:
    return trunc_div(value, greatest_common_factor(value, other)) * other

@public
def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX
