# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for prodsub.

This module defines dataclasses representing all configurable aspects of prodsub,
including default job parameters, HTCondor directives, the layout of the
per-year working directories, environment variables, and presentation settings.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class JobDefaults:
    """Default values of the command-line options."""

    # Number of events to generate per job.
    events: int = 3000
    # Number of CPUs requested per job.
    cpus: int = 8
    # Memory requested per job, written verbatim into the submit file.
    memory: str = "8 GB"
    # Number of jobs to queue.
    queue: int = 50
    # CERN batch job flavour.
    flavour: str = "nextweek"


@dataclass
class CondorSettings:
    """Settings for HTCondor submission."""

    # Command used to submit the rendered file.
    submit_command: str = "condor_submit"
    # Ask condor_submit for machine-readable output.
    terse: bool = True
    # Operating system required on the execute node.
    want_os: str = "el8"
    # Maximal number of scheduler-level retries of a failed job.
    max_retries: int = 3
    # HTCondor universe.
    universe: str = "vanilla"


@dataclass
class DirectorySettings:
    """Layout of the production working directories."""

    # Directory containing the per-year working directories.
    base_dir: str = "."
    # Name of the logs subdirectory inside a working directory.
    logs_dir: str = "logs"
    # Pattern used for naming the driver script of a production year.
    driver_pattern: str = "{year}.sh"
    # Directories searched for the driver script if it is missing
    # from the working directory.
    driver_search_paths: list[str] = field(default_factory=lambda: ["."])
    # Pattern used for naming the rendered submit file.
    submit_file_pattern: str = "submit_{year}_{sample}.jdl"


@dataclass
class EnvironmentVariables:
    """Environment variable names used by prodsub."""

    # Enables prodsub debug mode.
    debug_mode: str = "PRODSUB_DEBUG"


@dataclass
class SummaryPanelSettings:
    """Settings for the job configuration panel."""

    # Maximal width of the panel.
    max_width: int | None = 80
    # Style of the border lines.
    border_style: str = "white"
    # Style of the title.
    title_style: str = "white bold"
    # Style used for the keys.
    key_style: str = "default bold"
    # Style used for the values.
    value_style: str = "white"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by prodsub.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for usage errors and failed preconditions.
    default: int = 1
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for prodsub."""

    defaults: JobDefaults = field(default_factory=JobDefaults)
    condor: CondorSettings = field(default_factory=CondorSettings)
    directories: DirectorySettings = field(default_factory=DirectorySettings)
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    summary_panel: SummaryPanelSettings = field(default_factory=SummaryPanelSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the prodsub binary.
    binary_name: str = "prodsub"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read prodsub config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("PRODSUB_CONFIG")) else None,
            # 2. Current working directory
            Path.cwd() / "prodsub_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "prodsub"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Nested dictionaries are converted to the nested dataclass fields.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for prodsub.
CFG = Config.load()
