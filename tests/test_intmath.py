# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

from ratlib.core.intmath import greatest_common_factor, lowest_common_multiple, \
    fits_int64, trunc_div, trunc_rem, INT64_MIN, INT64_MAX
import pytest

@pytest.mark.parametrize("a, b, expected", [
    (27, 63, 9),
    (105, 15, 15),
    (100, 25, 25),
    (120, 36, 12),
    (7, 0, 7),
    (0, 7, 7),
    (17, 5, 1),
])
def test_greatest_common_factor(a, b, expected):
    assert greatest_common_factor(a, b) == expected
    assert greatest_common_factor(b, a) == expected

def test_greatest_common_factor_signs():
    # Truncated remainders: the sign follows the last nonzero remainder.
    assert greatest_common_factor(-12, 18) == 6
    assert greatest_common_factor(12, -18) == -6
    assert greatest_common_factor(-12, -18) == -6

@pytest.mark.parametrize("a, b, expected", [
    (27, 63, 189),
    (105, 15, 105),
    (100, 25, 100),
    (120, 36, 360),
    (4, 6, 12),
    (1, 9, 9),
])
def test_lowest_common_multiple(a, b, expected):
    assert lowest_common_multiple(a, b) == expected

def test_truncated_division():
    assert trunc_div(7, 2) == 3
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3
    assert trunc_rem(-7, 2) == -1
    assert trunc_rem(7, -2) == 1
    assert trunc_rem(-6, 3) == 0

def test_fits_int64():
    assert fits_int64(0)
    assert fits_int64(INT64_MAX)
    assert fits_int64(INT64_MIN)
    assert not fits_int64(INT64_MAX + 1)
    assert not fits_int64(INT64_MIN - 1)
