# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

from public import public

@public
class DivisionByZero(ZeroDivisionError):
    """Raised when a zero denominator is supplied or derived."""
    pass

@public
class FormatInvalid(ValueError):
    """Raised when text does not match the mixed-number grammar."""

    def __init__(self, text, message=None):
        self.text = text
        if message is None:
            message = f"Value '{text}' is not in the expected format."
        super().__init__(message)

@public
class RationalOverflow(OverflowError):
    """Raised in checked mode when a field leaves the signed 64-bit range."""
    pass
