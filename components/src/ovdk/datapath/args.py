# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Datapath application arguments.

The application arguments follow the environment abstraction layer (EAL)
arguments on the command line, separated from them by ``--``:

    ovdk-args [EAL] -- -p PORTMASK [-v LOG_LEVEL] [-J FRAME_SIZE]
                       [--stats_int INT] [--stats_core CORE]

``ArgConfig.parse`` validates the application arguments and returns a frozen
``Configuration``. Errors in ``-p`` or ``-v`` and unknown options end the
process, since a misconfigured datapath must not start; an invalid ``-J``
raises a recoverable ``ArgsError`` instead. Pass ``exit_on_error=False`` to
have every error raised to the caller.
"""

import argparse
import dataclasses
import functools
import logging
import os
import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ovdk.common.config_dump import register_encoder
from ovdk.common.configuration.arg_group import ArgGroup
from ovdk.common.configuration.utils import add_argument, env_or_default
from ovdk.common.logging import LogLevel
from ovdk.datapath.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_FRAME_SIZE,
    DEFAULT_PORT_MASK,
    DEFAULT_STATS_CORE,
    DEFAULT_STATS_INTERVAL,
    ENV_DEFAULT_LOG_LEVEL,
    ENV_DEFAULT_MAX_FRAME_SIZE,
    MAX_LOG_LEVEL,
    PARAM_STATS_CORE,
    PARAM_STATS_INTERVAL,
    UINT32_MAX,
)
from ovdk.datapath.errors import ArgsError, MissingRequiredArgument, UnknownOption
from ovdk.datapath.parsers import (
    parse_decimal_int,
    parse_decimal_uint32,
    parse_log_level,
    parse_port_mask,
)

logger = logging.getLogger(__name__)

ARG_SEPARATOR = "--"

# Tokens argparse takes as values rather than options
_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")

# Conversion used for --stats_int and --stats_core. Swap in a strict parser
# here to reject malformed stats values.
STATS_VALUE_PARSER: Callable[[Optional[str]], int] = parse_decimal_int

_USAGE_COLUMN = 30


@dataclass(frozen=True)
class Configuration:
    """Resolved datapath configuration. Immutable once parsed."""

    port_mask: int = DEFAULT_PORT_MASK
    log_level: int = DEFAULT_LOG_LEVEL
    stats_interval: int = DEFAULT_STATS_INTERVAL
    stats_core: int = DEFAULT_STATS_CORE
    max_frame_size: int = DEFAULT_MAX_FRAME_SIZE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Configuration":
        """Build a Configuration from a config dump, validating each field."""
        values: Dict[str, Any] = {}
        if "port_mask" in data:
            port_mask = data["port_mask"]
            values["port_mask"] = (
                port_mask if isinstance(port_mask, int) else parse_port_mask(port_mask)
            )
        if "log_level" in data:
            values["log_level"] = parse_log_level(str(data["log_level"]))
        if "max_frame_size" in data:
            values["max_frame_size"] = parse_decimal_uint32(str(data["max_frame_size"]))
        for name in ("stats_interval", "stats_core"):
            if name in data:
                values[name] = int(data[name])
        return cls(**values)


@register_encoder(Configuration)
def _encode_configuration(config: Configuration) -> Dict[str, Any]:
    """Render the port mask in hex, the way it is given on the command line."""
    data = dataclasses.asdict(config)
    data["port_mask"] = f"{config.port_mask:#x}"
    return data


@dataclass(frozen=True)
class ArgDefaults:
    """Built-in defaults and bounds injected into ArgConfig."""

    port_mask: int = DEFAULT_PORT_MASK
    log_level: int = DEFAULT_LOG_LEVEL
    max_log_level: int = MAX_LOG_LEVEL
    stats_interval: int = DEFAULT_STATS_INTERVAL
    stats_core: int = DEFAULT_STATS_CORE
    max_frame_size: int = DEFAULT_MAX_FRAME_SIZE

    def __post_init__(self) -> None:
        if not 1 <= self.max_log_level <= MAX_LOG_LEVEL:
            raise ValueError(
                f"Maximum log level {self.max_log_level} is outside the range "
                f"1-{MAX_LOG_LEVEL}"
            )
        if not 1 <= self.log_level <= self.max_log_level:
            raise ValueError(
                f"Default log level {self.log_level} is outside the range "
                f"1-{self.max_log_level}"
            )
        if not 0 < self.max_frame_size <= UINT32_MAX:
            raise ValueError(
                f"Default max frame size {self.max_frame_size} must be in the "
                f"range 1-{UINT32_MAX}"
            )

    @classmethod
    def from_env(cls) -> "ArgDefaults":
        """Defaults with OVDK_DEFAULT_* environment overrides applied."""
        return cls(
            log_level=env_or_default(ENV_DEFAULT_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            max_frame_size=env_or_default(
                ENV_DEFAULT_MAX_FRAME_SIZE, DEFAULT_MAX_FRAME_SIZE
            ),
        )

    def configuration(self) -> Configuration:
        return Configuration(
            port_mask=self.port_mask,
            log_level=self.log_level,
            stats_interval=self.stats_interval,
            stats_core=self.stats_core,
            max_frame_size=self.max_frame_size,
        )


class ValidatedOption(argparse.Action):
    """Store an option value after converting it with ``converter``.

    Conversion errors are tagged with the option string and with the
    option's fatality, then propagated out of the parser untouched. A
    missing value is always fatal.
    """

    def __init__(
        self,
        option_strings,
        dest,
        converter: Callable[[Optional[str]], Any],
        fatal: bool = True,
        **kwargs,
    ):
        # A missing value reaches __call__ as None
        super().__init__(option_strings, dest, nargs="?", **kwargs)
        self.converter = converter
        self.fatal = fatal

    def __call__(self, parser, namespace, values, option_string=None):
        if values is None:
            raise MissingRequiredArgument(
                "option requires an argument", option=option_string
            )
        try:
            value = self.converter(values)
        except ArgsError as err:
            err.option = option_string
            err.fatal = self.fatal
            raise
        logger.debug("%s %r -> %s=%r", option_string, values, self.dest, value)
        setattr(namespace, self.dest, value)


class DatapathArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that renders the datapath usage banner.

    Parse errors detected by argparse itself (ambiguous or unknown options)
    are raised as UnknownOption rather than printed.
    """

    def format_usage(self) -> str:
        return f"usage: {self.prog} [EAL] {ARG_SEPARATOR} [ARG...]\n"

    def format_help(self) -> str:
        lines = [
            f"{self.prog}: {self.description}",
            self.format_usage().rstrip("\n"),
        ]
        for group in self._action_groups:
            actions = [a for a in group._group_actions if a.help != argparse.SUPPRESS]
            if not actions:
                continue
            lines.append("")
            lines.append(f"{group.title}:")
            for action in actions:
                lines.extend(self._format_option(action))
        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_option(action: argparse.Action) -> List[str]:
        head = f"  {action.option_strings[0]}"
        if action.metavar:
            head = f"{head} {action.metavar}"
        help_lines = (action.help or "").splitlines() or [""]
        if len(head) >= _USAGE_COLUMN:
            lines = [head]
        else:
            lines = [head.ljust(_USAGE_COLUMN) + help_lines.pop(0)]
        lines.extend(" " * _USAGE_COLUMN + line for line in help_lines)
        return lines

    def error(self, message):
        raise UnknownOption(message)


class DatapathArgGroup(ArgGroup):
    """Datapath application options."""

    def __init__(self, defaults: Optional[ArgDefaults] = None):
        self.defaults = defaults or ArgDefaults()

    def add_arguments(self, parser) -> None:
        """Add datapath application options to parser."""
        d = self.defaults

        required = parser.add_argument_group("Required Arguments")
        add_argument(
            required,
            flag_name="-p",
            dest="port_mask",
            metavar="PORTMASK",
            default=d.port_mask,
            show_default=False,
            help="hex bitmask of phy ports to use",
            action=ValidatedOption,
            converter=parse_port_mask,
        )

        g = parser.add_argument_group("Optional Arguments")
        severities = ", ".join(
            f"{level}={name}" for level, name in _severity_names(d.max_log_level)
        )
        add_argument(
            g,
            flag_name="-v",
            dest="log_level",
            metavar="LOG_LEVEL",
            default=d.log_level,
            help=(
                "verbosity of ovs-dpdk logging\n"
                f"{severities}\n"
                "** Higher log levels print all lower level logs **"
            ),
            action=ValidatedOption,
            converter=functools.partial(parse_log_level, max_level=d.max_log_level),
        )
        add_argument(
            g,
            flag_name=f"--{PARAM_STATS_INTERVAL}",
            dest="stats_interval",
            metavar="INT",
            default=d.stats_interval,
            help="print stats every INT seconds, 0 disables",
            action=ValidatedOption,
            converter=STATS_VALUE_PARSER,
        )
        add_argument(
            g,
            flag_name=f"--{PARAM_STATS_CORE}",
            metavar="CORE",
            default=d.stats_core,
            help="id of core used to print stats",
            action=ValidatedOption,
            converter=STATS_VALUE_PARSER,
        )
        add_argument(
            g,
            flag_name="-J",
            dest="max_frame_size",
            metavar="FRAME_SIZE",
            default=d.max_frame_size,
            help="maximum frame size",
            action=ValidatedOption,
            converter=parse_decimal_uint32,
            fatal=False,
        )


def _severity_names(max_level: int) -> List[Tuple[int, str]]:
    return [(level.value, level.name) for level in LogLevel if level <= max_level]


def _split_at_separator(args: Sequence[str]) -> Tuple[List[str], Optional[List[str]]]:
    args = list(args)
    if ARG_SEPARATOR not in args:
        return args, None
    index = args.index(ARG_SEPARATOR)
    return args[:index], args[index + 1 :]


def split_app_args(args: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split arguments at the first ``--`` into (EAL args, application args).

    ``args`` excludes the program name. Without a separator every token is
    treated as an application argument.
    """
    before, after = _split_at_separator(args)
    if after is None:
        return [], before
    return before, after


class ArgConfig:
    """Parser and owner of the datapath Configuration.

    Accessors return the most recent successfully parsed Configuration, or
    the defaults before the first successful parse. A failed parse never
    changes what the accessors return.
    """

    description = "Intel DPDK vSwitch datapath application"

    def __init__(
        self,
        prog: Optional[str] = None,
        defaults: Optional[ArgDefaults] = None,
        exit_on_error: bool = True,
    ):
        self.prog = prog or os.path.basename(sys.argv[0])
        self.defaults = defaults or ArgDefaults()
        self.exit_on_error = exit_on_error
        self._config = self.defaults.configuration()
        self._parser = self._build_parser()

    def _build_parser(self) -> DatapathArgumentParser:
        parser = DatapathArgumentParser(
            prog=self.prog,
            description=self.description,
            add_help=False,
            exit_on_error=False,
        )
        parser.add_argument("-h", "--help", action="help", help=argparse.SUPPRESS)
        DatapathArgGroup(self.defaults).add_arguments(parser)
        return parser

    def parse(self, args: Sequence[str]) -> Configuration:
        """Parse application arguments (program name excluded).

        Options are applied left to right and the last occurrence of an
        option wins. Parsing stops at a ``--`` token; anything after it is
        ignored.

        Returns:
            The resolved Configuration, which is also stored for the
            accessors.

        Raises:
            ArgsError: A recoverable error (invalid ``-J``), or any error when
                exit_on_error is False. The usage banner has already been
                printed.
            SystemExit: A fatal error with exit_on_error enabled, or ``-h``.
        """
        app_args, ignored = _split_at_separator(args)
        if ignored:
            logger.warning(
                "Ignoring arguments after '%s': %s", ARG_SEPARATOR, " ".join(ignored)
            )

        # Options before the first unknown one are applied, and may fail, first
        unknown_at = self._find_unknown_option(app_args)
        scanned = app_args if unknown_at is None else app_args[:unknown_at]

        namespace = argparse.Namespace(**dataclasses.asdict(self.defaults.configuration()))
        try:
            namespace, extras = self._parser.parse_known_args(scanned, namespace)
            if unknown_at is not None:
                raise UnknownOption(
                    "unrecognized option",
                    option=app_args[unknown_at].split("=", 1)[0],
                )
            self._check_extras(extras)
        except ArgsError as err:
            self._handle_error(err)
            raise
        except argparse.ArgumentError as err:
            error = UnknownOption(str(err))
            self._handle_error(error)
            raise error from err

        config = Configuration(
            **{f.name: getattr(namespace, f.name) for f in dataclasses.fields(Configuration)}
        )
        if config.port_mask == 0:
            logger.warning("Port mask is 0 (-p not given?); no physical ports enabled")
        self._config = config
        return config

    def _find_unknown_option(self, args: List[str]) -> Optional[int]:
        """Index of the first option token no datapath option resolves to."""
        known = self._parser._option_string_actions
        for index, token in enumerate(args):
            if not token.startswith("-") or token == "-" or _NEGATIVE_NUMBER.match(token):
                continue
            if token.startswith("--"):
                name = token.split("=", 1)[0]
                # Unambiguous or not, a prefix is left to argparse
                if any(opt.startswith(name) for opt in known if opt.startswith("--")):
                    continue
            elif token in known or token[:2] in known:
                continue
            return index
        return None

    def _check_extras(self, extras: List[str]) -> None:
        for token in extras:
            logger.warning("Ignoring non-option argument '%s'", token)

    def _handle_error(self, err: ArgsError) -> None:
        """Print usage, then exit for fatal errors when exit_on_error is set."""
        self.print_usage()
        if err.fatal and self.exit_on_error:
            sys.exit(str(err))
        logger.warning("%s", err)

    def print_usage(self, file=None) -> None:
        """Print the usage banner, to stdout by default."""
        self._parser.print_help(file)

    def format_help(self) -> str:
        return self._parser.format_help()

    @property
    def configuration(self) -> Configuration:
        return self._config

    @property
    def port_mask(self) -> int:
        return self._config.port_mask

    @property
    def log_level(self) -> int:
        return self._config.log_level

    @property
    def stats_interval(self) -> int:
        return self._config.stats_interval

    @property
    def stats_core(self) -> int:
        return self._config.stats_core

    @property
    def max_frame_size(self) -> int:
        return self._config.max_frame_size
