# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Datapath application argument parsing."""

from .args import (
    ArgConfig,
    ArgDefaults,
    Configuration,
    DatapathArgGroup,
    split_app_args,
)
from .errors import (
    ArgsError,
    MalformedNumeric,
    MissingRequiredArgument,
    OutOfRange,
    UnknownOption,
)
from .parsers import (
    parse_decimal_int,
    parse_decimal_uint32,
    parse_log_level,
    parse_port_mask,
)

__all__ = [
    "ArgConfig",
    "ArgDefaults",
    "Configuration",
    "DatapathArgGroup",
    "split_app_args",
    # Errors
    "ArgsError",
    "MalformedNumeric",
    "MissingRequiredArgument",
    "OutOfRange",
    "UnknownOption",
    # Value parsers
    "parse_decimal_int",
    "parse_decimal_uint32",
    "parse_log_level",
    "parse_port_mask",
]
