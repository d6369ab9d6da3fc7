# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Preparation of per-year production working directories.

`Preparer` makes sure that the working directory of a production year and its
logs subdirectory exist and that the year's driver script is present in it,
fetching the script from the configured search paths when it is missing.
"""

from .preparer import Preparer

__all__ = ["Preparer"]
