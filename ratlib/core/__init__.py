# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

"""
Exact rational numbers and the integer helpers they are built on.
"""

from .errors import *
from .intmath import *
from .config import *
from .gcd import *
from .textfmt import *
from .rational import *
