# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Logging setup for OVDK applications.

Datapath components express verbosity as an ordinal severity between
EMERGENCY (1) and DEBUG (8). This module maps that scale onto the standard
``logging`` levels and configures the root logger accordingly.
"""

import logging
from enum import IntEnum

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LogLevel(IntEnum):
    """Datapath log severities. Higher values admit more output."""

    EMERGENCY = 1
    ALERT = 2
    CRITICAL = 3
    ERROR = 4
    WARNING = 5
    NOTICE = 6
    INFORMATION = 7
    DEBUG = 8


_SEVERITY_TO_LEVEL = {
    LogLevel.EMERGENCY: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def map_severity_to_level(severity: int) -> int:
    """Map a datapath severity (1-8) to a ``logging`` level.

    Args:
        severity: Datapath severity.

    Returns:
        The matching ``logging`` level constant.

    Raises:
        ValueError: If ``severity`` is not a known datapath severity.
    """
    try:
        return _SEVERITY_TO_LEVEL[LogLevel(severity)]
    except ValueError:
        raise ValueError(f"Unknown datapath log severity: {severity}") from None


def configure_logging(severity: int = LogLevel.ERROR) -> int:
    """Configure the root logger for the given datapath severity.

    Replaces any handlers installed by an earlier call, so it is safe to call
    once with the default severity at startup and again after the command
    line has been parsed.

    Returns:
        The ``logging`` level that was applied.
    """
    level = map_severity_to_level(severity)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    return level
