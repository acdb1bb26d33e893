# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

"""
Exact fraction calculator.

Evaluates OPERAND [OPERATOR OPERAND]... strictly from left to right, without
operator precedence. Operands are integers or mixed numbers (quote those
containing spaces), operators are + - * / (quote * for the shell).

Examples:

    ratlib-calc "1 1/2" + 3/4          -> 9/4
    ratlib-calc -p "1 1/2" + 3/4       -> 2 1/4
    ratlib-calc 1/3 '*' 6 / -4         -> -1/2
    ratlib-calc -- -1/2 + 1            -> 1/2
"""

import sys
import logging
import argparse

from .core import *
from .core.textfmt import INT_PATTERN
from .version import version

log = logging.getLogger(__name__)

OPERATORS = {
    '+': Rational.add,
    '-': Rational.subtract,
    '*': Rational.multiply,
    'x': Rational.multiply,
    '/': Rational.divide,
}

def parse_operand(token: str) -> Rational:
    token = token.strip()
    if INT_PATTERN.fullmatch(token):
        return Rational(int(token))
    return Rational(token)

def evaluate(tokens) -> Rational:
    """
    Evaluates a flat list of operand and operator tokens from left to right.
    """
    if len(tokens) % 2 == 0:
        raise ValueError("Expected OPERAND [OPERATOR OPERAND]...")
    result = parse_operand(tokens[0])
    for op, token in zip(tokens[1::2], tokens[2::2]):
        try:
            method = OPERATORS[op]
        except KeyError:
            raise ValueError(f"Unknown operator '{op}'.") from None
        operand = parse_operand(token)
        log.debug("%s %s %s", result, op, operand)
        result = method(result, operand)
    return result

def render(value: Rational, args) -> str:
    if args.simplify:
        value = value.to_simplified()
    if args.float:
        return repr(value.to_double())
    elif args.proper:
        return value.to_proper_string()
    else:
        return str(value)

def main(argv=None):
    parser = argparse.ArgumentParser(prog='ratlib-calc',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('expr', nargs='+', help="Operands and operators.")
    parser.add_argument('-p', '--proper', action='store_true', help="Print result as mixed number, e.g. '2 1/4'.")
    parser.add_argument('-s', '--simplify', action='store_true', help="Simplify result (only relevant for a single operand).")
    parser.add_argument('-f', '--float', action='store_true', help="Print result as floating point number.")
    parser.add_argument('-c', '--checked', action='store_true', help="Fail if a value leaves the signed 64-bit range.")
    parser.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help="Log level (default WARNING).")
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {version}')

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        with checked_arithmetic(args.checked or is_checked()):
            result = evaluate(args.expr)
            output = render(result, args)
    except (ArithmeticError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
