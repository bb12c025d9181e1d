# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import os
import sys
from typing import List, Optional

from ovdk.common.config_dump import dump_config
from ovdk.common.configuration.utils import env_or_default
from ovdk.common.logging import configure_logging
from ovdk.datapath.args import ArgConfig, ArgDefaults, split_app_args
from ovdk.datapath.constants import ENV_DUMP_CONFIG_TO
from ovdk.datapath.errors import ArgsError

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Resolve the datapath configuration from ``[EAL] -- [ARG...]``.

    Returns the process exit status. Fatal argument errors exit directly.
    """
    argv = list(sys.argv if argv is None else argv)
    prog = os.path.basename(argv[0]) if argv else "ovdk-args"

    defaults = ArgDefaults.from_env()
    configure_logging(defaults.log_level)

    eal_args, app_args = split_app_args(argv[1:])
    if eal_args:
        logger.debug("Leaving EAL arguments to the runtime: %s", " ".join(eal_args))

    arg_config = ArgConfig(prog=prog, defaults=defaults)
    try:
        config = arg_config.parse(app_args)
    except ArgsError as err:
        logger.error("Failed to parse application arguments: %s", err)
        return 1

    configure_logging(config.log_level)
    logger.info(f"Resolved datapath configuration: {config}")

    dump_path = env_or_default(ENV_DUMP_CONFIG_TO, None)
    if dump_path:
        dump_config(config, dump_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
