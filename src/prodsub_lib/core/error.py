# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout prodsub.

Every recoverable failure of a prodsub run (a missing gridpack, a missing driver
script, an unavailable or failing submission command) is reported as a
`ProdsubError`, which carries the exit code used by the command-line tool.
"""

from prodsub_lib.core.config import CFG


class ProdsubError(Exception):
    """Common exception type for all recoverable prodsub errors."""

    exit_code = CFG.exit_codes.default
