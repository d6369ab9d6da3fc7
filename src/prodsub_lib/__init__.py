# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the prodsub command-line tool.

prodsub prepares the working directory of a Monte Carlo production year,
renders an HTCondor submit description for a gridpack-based event generation
job, and submits it to the batch system.
"""

__version__ = "0.1.0"

from .prodsub import cli  # noqa: E402

__all__ = [
    "__version__",
    "cli",
    "core",
    "prepare",
    "properties",
    "submit",
]
