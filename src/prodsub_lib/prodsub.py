# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from prodsub_lib.submit.cli import submit

# prodsub provides a single command
cli = submit
