# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Value parsers for the datapath application options.

Each strict parser converts one option value and raises an ArgsError subclass
when the value is unusable. ``parse_decimal_int`` is the exception: it is
deliberately permissive and never raises.

Numbers are scanned the way the C library's strto* functions scan them:
leading whitespace is skipped, one sign character is accepted, and base 16
values may carry a ``0x``/``0X`` prefix. The strict parsers then require the
whole token to have been consumed.
"""

from typing import Optional, Tuple

from ovdk.datapath.constants import (
    FRAME_SIZE_BASE,
    INT32_MAX,
    INT32_MIN,
    LOG_LEVEL_BASE,
    MAX_LOG_LEVEL,
    PORTMASK_BASE,
    STATS_BASE,
    UINT32_MAX,
    UINT64_MAX,
)
from ovdk.datapath.errors import MalformedNumeric, MissingRequiredArgument, OutOfRange

_DIGITS = "0123456789abcdef"
_WHITESPACE = " \t\n\v\f\r"

# Significant digits needed for the widest bound, UINT64_MAX
_MAX_SIGNIFICANT_DIGITS = {10: 20, 16: 16}
# Stands in for any value with more digits; exceeds every bound
_OVERFLOW = UINT64_MAX + 1


def _is_digit(char: str, base: int) -> bool:
    return len(char) == 1 and char.lower() in _DIGITS[:base]


def _scan_integer(token: str, base: int) -> Tuple[Optional[int], str]:
    """Scan a leading integer from ``token``.

    Returns:
        The signed value and the unconsumed remainder, or ``(None, token)``
        when no digits were found.
    """
    text = token.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    if base == 16 and text[:2] in ("0x", "0X") and _is_digit(text[2:3], 16):
        text = text[2:]

    end = 0
    while end < len(text) and _is_digit(text[end], base):
        end += 1
    if end == 0:
        return None, token

    digits = text[:end].lstrip("0") or "0"
    if len(digits) > _MAX_SIGNIFICANT_DIGITS[base]:
        return sign * _OVERFLOW, text[end:]
    return sign * int(digits, base), text[end:]


def _parse_whole_unsigned(token: Optional[str], base: int, what: str) -> int:
    if token is None:
        raise MissingRequiredArgument(f"no {what} given")
    if token == "":
        raise MalformedNumeric(f"{what} is empty", value=token)

    value, rest = _scan_integer(token, base)
    if value is None or rest:
        kind = "hexadecimal" if base == 16 else "decimal"
        raise MalformedNumeric(
            f"{what} '{token}' is not a {kind} number", value=token
        )
    return value


def parse_port_mask(token: Optional[str]) -> int:
    """Parse a hexadecimal port bitmask.

    The whole token must be a base 16 number, with or without a ``0x``
    prefix. The result is not checked against the ports that actually
    exist; callers must validate the bits themselves.

    Raises:
        MissingRequiredArgument: ``token`` is None.
        MalformedNumeric: ``token`` is empty, negative, or has trailing
            characters.
        OutOfRange: the value does not fit in 64 bits.
    """
    value = _parse_whole_unsigned(token, PORTMASK_BASE, "port mask")
    if value < 0:
        raise MalformedNumeric(f"port mask '{token}' is negative", value=token)
    if value > UINT64_MAX:
        raise OutOfRange(f"port mask '{token}' exceeds 64 bits", value=token)
    return value


def parse_log_level(token: Optional[str], max_level: int = MAX_LOG_LEVEL) -> int:
    """Parse a decimal log severity in the range ``1..max_level``."""
    value = _parse_whole_unsigned(token, LOG_LEVEL_BASE, "log level")
    if value < 1 or value > max_level:
        raise OutOfRange(
            f"log level {value} is outside the range 1-{max_level}", value=token
        )
    return value


def parse_decimal_uint32(token: Optional[str]) -> int:
    """Parse a nonzero decimal value that fits in 32 unsigned bits.

    Zero is rejected explicitly, so this is suitable for sizes.
    """
    value = _parse_whole_unsigned(token, FRAME_SIZE_BASE, "value")
    if value == 0:
        raise OutOfRange("value must be nonzero", value=token)
    if value < 0 or value > UINT32_MAX:
        raise OutOfRange(
            f"value {value} is outside the range 1-{UINT32_MAX}", value=token
        )
    return value


def parse_decimal_int(token: Optional[str]) -> int:
    """Permissive decimal conversion, with C ``atoi`` semantics.

    A leading decimal number is converted and anything after it is ignored.
    Input without a leading number, including None and the empty string,
    yields 0. Values are clamped to the signed 32-bit range. This never
    raises, so malformed input silently degrades to 0.
    """
    if token is None:
        return 0
    value, _ = _scan_integer(token, STATS_BASE)
    if value is None:
        return 0
    return max(INT32_MIN, min(INT32_MAX, value))
