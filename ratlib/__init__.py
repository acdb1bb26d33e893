# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

from .core import *
