# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
ArgGroup-based option registration for OVDK applications.

This module provides the building blocks shared by application argument parsers:
- Each ArgGroup owns the options of one application domain
- Defaults can be overridden from the environment at construction time
- Help text carries the effective default of every option
"""

from .arg_group import ArgGroup
from .utils import add_argument, env_or_default

__all__ = [
    # Base classes
    "ArgGroup",
    # Utilities
    "add_argument",
    "env_or_default",
]
