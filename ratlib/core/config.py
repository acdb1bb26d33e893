# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

"""
Runtime configuration of checked arithmetic.

Python integers never wrap around, so by default numerators and denominators
can grow past the signed 64-bit range without notice. With checked arithmetic
enabled, constructing a :class:`ratlib.core.rational.Rational` whose fields
do not fit into 64 bits raises :class:`ratlib.core.errors.RationalOverflow`.

The default is read from the environment variable RATLIB_CHECKED. The flag is
stored in a context variable, so :func:`checked_arithmetic` only affects the
current thread or task.
"""

import os
from contextvars import ContextVar
from contextlib import contextmanager
from public import public

ENV_CHECKED = 'RATLIB_CHECKED'

def env_flag(name: str, default: bool=False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')

_checked_var = ContextVar("checked", default=env_flag(ENV_CHECKED))

@public
def is_checked() -> bool:
    """Returns True if checked arithmetic is enabled in the current context."""
    return _checked_var.get()

@public
@contextmanager
def checked_arithmetic(enabled: bool=True):
    """
    Enables (or, with enabled=False, disables) checked arithmetic for the
    duration of the with block.
    """
    token = _checked_var.set(enabled)
    try:
        yield
    finally:
        _checked_var.reset(token)
