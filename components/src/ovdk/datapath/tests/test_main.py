# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ovdk-args command-line entry point."""
import logging

import pytest

from ovdk.common.config_dump import load_config_dump
from ovdk.datapath.__main__ import main

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "OVDK_DEFAULT_LOG_LEVEL",
        "OVDK_DEFAULT_MAX_FRAME_SIZE",
        "OVDK_DUMP_CONFIG_TO",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMain:
    """Test main function."""

    def test_success(self):
        assert main(["ovdk-args", "-c", "0x3", "-n", "4", "--", "-p", "3"]) == 0

    def test_log_level_configures_logging(self, restore_root_logger):
        main(["ovdk-args", "--", "-p", "1", "-v", "8"])

        assert restore_root_logger.level == logging.DEBUG

    def test_recoverable_error_returns_failure(self, capsys):
        assert main(["ovdk-args", "--", "-p", "1", "-J", "0"]) == 1
        assert "Required Arguments:" in capsys.readouterr().out

    def test_fatal_error_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["ovdk-args", "--", "-p", "1", "-v", "9"])

        assert excinfo.value.code != 0

    def test_eal_args_are_not_parsed(self):
        """Test unknown EAL flags before the separator are left alone."""
        assert main(["ovdk-args", "--huge-dir", "/mnt", "--", "-p", "1"]) == 0

    def test_dump_config(self, monkeypatch, tmp_path):
        path = tmp_path / "resolved.yaml"
        monkeypatch.setenv("OVDK_DUMP_CONFIG_TO", str(path))

        assert main(["ovdk-args", "--", "-p", "ff", "--stats_int", "5"]) == 0

        data = load_config_dump(str(path))
        assert data["port_mask"] == "0xff"
        assert data["stats_interval"] == 5
        assert data["log_level"] == 4

    def test_env_defaults(self, monkeypatch, tmp_path):
        path = tmp_path / "resolved.yaml"
        monkeypatch.setenv("OVDK_DUMP_CONFIG_TO", str(path))
        monkeypatch.setenv("OVDK_DEFAULT_MAX_FRAME_SIZE", "9000")

        assert main(["ovdk-args", "--", "-p", "1"]) == 0
        assert load_config_dump(str(path))["max_frame_size"] == 9000
