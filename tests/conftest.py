# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

import pytest
from hypothesis import settings
from ratlib.core.rational import Rational
from ratlib.core.config import checked_arithmetic

settings.register_profile("ratlib", deadline=None)
settings.load_profile("ratlib")

@pytest.fixture(autouse=True)
def unchecked():
    """Runs each test with checked arithmetic disabled, regardless of RATLIB_CHECKED."""
    with checked_arithmetic(False):
        yield

def pytest_assertrepr_compare(op, left, right):
    if isinstance(left, Rational) and isinstance(right, Rational) and op == "==":
        left_c, right_c = Rational.common_denominator(left, right)
        return [
            f"{left!r} == {right!r}",
            f"\tcommon denominator: {left_c} != {right_c}",
            f"\tsimplified: {left.to_simplified()} != {right.to_simplified()}",
        ]
