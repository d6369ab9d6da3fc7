# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured metadata for prodsub jobs.

This module provides the data representation of a single production
submission: the production year, sample, gridpack, and requested resources.
"""
