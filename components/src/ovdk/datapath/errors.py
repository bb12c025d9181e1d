# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while parsing datapath application arguments."""

from typing import Optional


class ArgsError(ValueError):
    """Base class for argument errors.

    Attributes:
        option: Option string the error belongs to (e.g. "-v"), if known.
        value: The offending value, if any.
        fatal: Whether the error ends the process when raised from
            ArgConfig.parse with exit_on_error enabled.
    """

    def __init__(
        self,
        message: str,
        *,
        option: Optional[str] = None,
        value: Optional[str] = None,
        fatal: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.option = option
        self.value = value
        self.fatal = fatal

    def __str__(self) -> str:
        if self.option is None:
            return self.message
        return f"Invalid value for option '{self.option}': {self.message}"


class MissingRequiredArgument(ArgsError):
    """An option that requires a value was given none."""

    def __str__(self) -> str:
        if self.option is None:
            return self.message
        return f"Option '{self.option}' requires an argument"


class MalformedNumeric(ArgsError):
    """The value is not a fully consumed number in the expected base."""


class OutOfRange(ArgsError):
    """The value parsed but violates a semantic bound."""


class UnknownOption(ArgsError):
    """The option is not in the recognized set."""

    def __str__(self) -> str:
        if self.option is None:
            return self.message
        return f"Invalid option '{self.option}'"
