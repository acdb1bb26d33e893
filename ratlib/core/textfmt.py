# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

"""
Text representation of rational numbers.

The accepted input is a mixed number: an optional whole part followed by a
mandatory fraction, e.g. "3/4", "-1 1/2" or "3 -12/-17". The whole part, the
numerator and the denominator may each carry their own sign. A negative
whole part subtracts the fraction, so "-1 1/2" is -3/2 and "3 -12/-17" is
63/17.
"""

import re
import logging
from public import public
from .errors import FormatInvalid

log = logging.getLogger(__name__)

FRACTION_PATTERN = re.compile(r'^[-+]?\d*\s*[-+]?\d+/[-+]?\d+$', re.ASCII)
INT_PATTERN = re.compile(r'[-+]?\d+', re.ASCII)

def parse_int(token: str, text: str) -> int:
    # int() would also accept surrounding whitespace and underscores.
    if not INT_PATTERN.fullmatch(token):
        raise FormatInvalid(text)
    return int(token)

@public
def parse_fraction(text: str) -> tuple[int, int]:
    """
    Parses text into a raw (numerator, denominator) pair.

    The pair is not simplified. A negative denominator is moved to the
    numerator, but a zero denominator is returned as is; rejecting it is up
    to the caller.

    Raises :class:`ratlib.core.errors.FormatInvalid` if text is not a
    mixed number.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}.")
    data = text.strip()
    if not FRACTION_PATTERN.match(data):
        log.debug("rejected fraction text %r", text)
        raise FormatInvalid(text)

    tokens = [t for t in re.split(r'[ \t]+', data) if t]
    whole = 0
    if '/' not in tokens[0] and INT_PATTERN.fullmatch(tokens[0]):
        whole = int(tokens[0])
        tokens = tokens[1:]
    if len(tokens) != 1:
        # e.g. a lone sign in front of the fraction: "- 3/4"
        log.debug("rejected fraction text %r", text)
        raise FormatInvalid(text)

    num_text, den_text = tokens[0].split('/', 1)
    numerator = parse_int(num_text, text)
    denominator = parse_int(den_text, text)
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    if whole < 0:
        numerator = whole*denominator - numerator
    else:
        numerator = whole*denominator + numerator
    return numerator, denominator

@public
def format_proper(numerator: int, denominator: int) -> str:
    """
    Formats numerator/denominator as mixed number, e.g. "2 8/9" or "-3".
    Zero is formatted as "0".
    """
    if numerator == 0:
        return "0"
    sign = '-' if numerator < 0 else ''
    whole, remainder = divmod(abs(numerator), denominator)
    whole_str = f"{whole} " if whole != 0 else ""
    fraction_str = f"{remainder}/{denominator}" if remainder != 0 else ""
    return f"{sign}{whole_str}{fraction_str}".strip()
