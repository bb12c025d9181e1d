# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for ArgGroup configuration."""

import os
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def env_or_default(env_var: str, default: T) -> T:
    """
    Get value from environment variable or return default.

    Performs type conversion based on the default value's type.

    Args:
        env_var: Environment variable name (e.g., "OVDK_DEFAULT_LOG_LEVEL")
        default: Default value if env var not set

    Returns:
        Environment variable value (type-converted) or default

    Raises:
        ValueError: If the env var is set but cannot be converted to the
            default's type.

    Examples:
        >>> env_or_default("OVDK_DUMP_CONFIG_TO", None)
        None  # if OVDK_DUMP_CONFIG_TO not set
        >>> env_or_default("OVDK_DEFAULT_MAX_FRAME_SIZE", 1518)
        9000  # if OVDK_DEFAULT_MAX_FRAME_SIZE="9000"
    """
    value = os.environ.get(env_var)
    if value is None:
        return default

    # Type conversion based on default type
    if isinstance(default, int):
        return int(value)  # type: ignore
    return value  # type: ignore


def add_argument(
    parser,
    *,
    flag_name: str,
    default: Any,
    help: str,
    metavar: Optional[str] = None,
    show_default: bool = True,
    **kwargs: Any,
) -> None:
    """
    Add a CLI option with dest and help message construction.

    Args:
        parser: ArgumentParser or argument group
        flag_name: Option string, short ("-p") or long ("--stats_int")
        default: Default value, rendered into the help text
        help: Help text; may span several lines
        metavar: Name of the option value in usage output
        show_default: Append "(default: ...)" to the first help line
        dest: Optional destination name (defaults to flag_name without dashes)
        action: Optional argparse Action class; extra kwargs are passed to it
    """
    arg_dest = _get_dest_name(flag_name, kwargs.pop("dest", None))

    add_arg_opts = {
        "dest": arg_dest,
        "default": default,
        "metavar": metavar,
        "help": _build_help_message(help, default) if show_default else help,
    }
    kwargs.update(add_arg_opts)

    parser.add_argument(flag_name, **kwargs)


def _build_help_message(help_text: str, default: Any) -> str:
    """
    Build help message with the default value on the first line.
    """
    first, _, rest = help_text.partition("\n")
    first = f"{first} (default: {default})"
    return f"{first}\n{rest}" if rest else first


def _get_dest_name(flag_name: str, dest: Optional[str] = None) -> str:
    """
    Get the destination name for the flag.
    """
    return dest if dest else flag_name.lstrip("-").replace("-", "_")
