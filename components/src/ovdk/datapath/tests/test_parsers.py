# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the datapath option value parsers."""
import pytest

from ovdk.datapath.constants import INT32_MAX, INT32_MIN, UINT32_MAX, UINT64_MAX
from ovdk.datapath.errors import (
    ArgsError,
    MalformedNumeric,
    MissingRequiredArgument,
    OutOfRange,
)
from ovdk.datapath.parsers import (
    parse_decimal_int,
    parse_decimal_uint32,
    parse_log_level,
    parse_port_mask,
)

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


class TestParsePortMask:
    """Test parse_port_mask function."""

    @pytest.mark.parametrize(
        "token", ["1", "3", "ff", "FF", "0xff", "0X1f", "deadbeef", "ffffffffffffffff"]
    )
    def test_matches_base16_parse(self, token):
        assert parse_port_mask(token) == int(token, 16)

    def test_max_value(self):
        assert parse_port_mask("ffffffffffffffff") == UINT64_MAX

    def test_leading_whitespace_is_skipped(self):
        assert parse_port_mask(" 3") == 3

    @pytest.mark.parametrize("token", ["", "1g", "ff ", "0x", "x1", "1_0", "0xfz"])
    def test_malformed(self, token):
        with pytest.raises(MalformedNumeric):
            parse_port_mask(token)

    def test_negative_rejected(self):
        with pytest.raises(MalformedNumeric, match="negative"):
            parse_port_mask("-1")

    def test_wider_than_64_bits(self):
        with pytest.raises(OutOfRange):
            parse_port_mask("10000000000000000")

    def test_none(self):
        with pytest.raises(MissingRequiredArgument):
            parse_port_mask(None)

    def test_very_long_token(self):
        """Test a token far wider than 64 bits is a range error."""
        with pytest.raises(OutOfRange):
            parse_port_mask("f" * 5000)

    def test_leading_zeros_do_not_count(self):
        assert parse_port_mask("0" * 40 + "1") == 1

    def test_error_carries_value(self):
        with pytest.raises(ArgsError) as excinfo:
            parse_port_mask("zz")

        assert excinfo.value.value == "zz"
        assert excinfo.value.option is None


class TestParseLogLevel:
    """Test parse_log_level function."""

    @pytest.mark.parametrize("level", range(1, 9))
    def test_valid_levels(self, level):
        assert parse_log_level(str(level)) == level

    @pytest.mark.parametrize("token", ["0", "9", "100", "-1"])
    def test_out_of_range(self, token):
        with pytest.raises(OutOfRange):
            parse_log_level(token)

    @pytest.mark.parametrize("token", ["", "abc", "3x", "0x3", "4 "])
    def test_malformed(self, token):
        with pytest.raises(MalformedNumeric):
            parse_log_level(token)

    def test_very_long_token(self):
        with pytest.raises(OutOfRange):
            parse_log_level("9" * 5000)

    def test_custom_max_level(self):
        assert parse_log_level("5", max_level=5) == 5
        with pytest.raises(OutOfRange):
            parse_log_level("6", max_level=5)


class TestParseDecimalUint32:
    """Test parse_decimal_uint32 function."""

    @pytest.mark.parametrize("token", ["1", "64", "1518", "9000", str(UINT32_MAX)])
    def test_valid(self, token):
        assert parse_decimal_uint32(token) == int(token)

    def test_zero_rejected(self):
        with pytest.raises(OutOfRange, match="nonzero"):
            parse_decimal_uint32("0")

    @pytest.mark.parametrize("token", ["", "12a", "abc", "1.5"])
    def test_malformed(self, token):
        with pytest.raises(MalformedNumeric):
            parse_decimal_uint32(token)

    def test_none(self):
        with pytest.raises(MissingRequiredArgument):
            parse_decimal_uint32(None)

    @pytest.mark.parametrize("token", [str(UINT32_MAX + 1), "-1", "9" * 5000])
    def test_outside_uint32(self, token):
        with pytest.raises(OutOfRange):
            parse_decimal_uint32(token)

    def test_leading_zeros_do_not_count(self):
        assert parse_decimal_uint32("0" * 30 + "5") == 5


class TestParseDecimalInt:
    """Test the permissive parse_decimal_int function."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("0", 0),
            ("5", 5),
            ("-3", -3),
            ("+7", 7),
            (" 12", 12),
            ("12abc", 12),
            ("abc", 0),
            ("", 0),
            ("-", 0),
            (None, 0),
        ],
    )
    def test_conversion(self, token, expected):
        assert parse_decimal_int(token) == expected

    def test_clamps_to_int32(self):
        assert parse_decimal_int("99999999999") == INT32_MAX
        assert parse_decimal_int("-99999999999") == INT32_MIN

    def test_very_long_token_saturates(self):
        """Test tokens past the integer string length limit still clamp."""
        assert parse_decimal_int("9" * 5000) == INT32_MAX
        assert parse_decimal_int("-" + "9" * 5000) == INT32_MIN
        assert parse_decimal_int("9" * 5000 + "abc") == INT32_MAX
