# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Base ArgGroup interface."""
from abc import ABC, abstractmethod


class ArgGroup(ABC):
    """
    Base interface for option groups.

    Each ArgGroup declares the command-line options of one application domain
    and registers them on a parser.
    """

    @abstractmethod
    def add_arguments(self, parser) -> None:
        """
        Register CLI options owned by this group.

        This method must be side-effect free beyond parser mutation.
        It may depend on construction-time defaults, never on parse results.

        Args:
            parser: argparse.ArgumentParser or argument group
        """
        ...
