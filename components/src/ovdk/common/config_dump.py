# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Dump resolved configuration objects to YAML.

Configuration classes can register an encoder that turns an instance into a
plain dictionary; dataclasses without an encoder are dumped field by field.
"""

import dataclasses
import logging
from typing import Any, Callable, Dict, Type

import yaml

logger = logging.getLogger(__name__)

Encoder = Callable[[Any], Dict[str, Any]]

_ENCODERS: Dict[type, Encoder] = {}


def register_encoder(cls: Type) -> Callable[[Encoder], Encoder]:
    """Register ``fn`` as the dictionary encoder for instances of ``cls``."""

    def decorator(fn: Encoder) -> Encoder:
        _ENCODERS[cls] = fn
        return fn

    return decorator


def encode_config(config: Any) -> Dict[str, Any]:
    """Convert a configuration object into a dictionary suitable for YAML."""
    for klass in type(config).__mro__:
        encoder = _ENCODERS.get(klass)
        if encoder is not None:
            return encoder(config)

    if dataclasses.is_dataclass(config) and not isinstance(config, type):
        return dataclasses.asdict(config)
    return dict(vars(config))


def dump_config(config: Any, path: str) -> None:
    """Write the encoded configuration to ``path`` as YAML."""
    data = encode_config(config)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    logger.info("Dumped %s to %s", type(config).__name__, path)


def load_config_dump(path: str) -> Dict[str, Any]:
    """Read a dump written by :func:`dump_config` back into a dictionary."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config dump {path} does not contain a mapping")
    return data
