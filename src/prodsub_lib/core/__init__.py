# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for prodsub.

This module collects the configuration, error handling, logging, and
command-line formatting helpers shared by the rest of the prodsub codebase.
"""
