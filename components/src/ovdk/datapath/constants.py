# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Constants for the datapath application arguments."""

from ovdk.common.logging import LogLevel

# Long option names
PARAM_STATS_INTERVAL = "stats_int"
PARAM_STATS_CORE = "stats_core"

# Numeric bases of the option values
PORTMASK_BASE = 16
LOG_LEVEL_BASE = 10
FRAME_SIZE_BASE = 10
STATS_BASE = 10

# Used when '-v' is not supplied
DEFAULT_LOG_LEVEL = LogLevel.ERROR.value
MAX_LOG_LEVEL = LogLevel.DEBUG.value

# Largest standard Ethernet frame, including the FCS
DEFAULT_MAX_FRAME_SIZE = 1518

DEFAULT_PORT_MASK = 0
DEFAULT_STATS_INTERVAL = 0
DEFAULT_STATS_CORE = -1

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Environment overrides for the built-in defaults
ENV_DEFAULT_LOG_LEVEL = "OVDK_DEFAULT_LOG_LEVEL"
ENV_DEFAULT_MAX_FRAME_SIZE = "OVDK_DEFAULT_MAX_FRAME_SIZE"
ENV_DUMP_CONFIG_TO = "OVDK_DUMP_CONFIG_TO"
