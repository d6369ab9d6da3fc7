# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured representation of a single production submission.

This module defines the `Production` dataclass, which collects the production
year, sample name, gridpack path and the requested resources of one submission,
and derives the names of all files and directories associated with it.
"""

from dataclasses import dataclass
from pathlib import Path

from prodsub_lib.core.config import CFG
from prodsub_lib.core.error import ProdsubError


@dataclass
class Production:
    """
    Dataclass containing validated settings of a production submission.
    """

    # Production-year identifier, e.g. Run3Summer24
    year: str

    # Name of the generated sample
    sample: str

    # Path to the gridpack tarball, passed to the driver script unmodified
    gridpack: Path

    # Number of events to generate per job
    events: int = CFG.defaults.events

    # Number of CPUs requested per job
    cpus: int = CFG.defaults.cpus

    # Memory requested per job (e.g. '8 GB')
    memory: str = CFG.defaults.memory

    # Number of jobs to queue
    queue: int = CFG.defaults.queue

    # Job flavour label
    flavour: str = CFG.defaults.flavour

    # Only render the submit file, do not submit it
    dry_run: bool = False

    def __post_init__(self):
        if not self.year:
            raise ProdsubError("Production year must not be empty.")

        if not self.sample:
            raise ProdsubError("Sample name must not be empty.")

        for name in ("events", "cpus", "queue"):
            if (value := getattr(self, name)) < 1:
                raise ProdsubError(
                    f"Attribute '{name}' must be a positive integer, not '{value}'."
                )

        if not self.gridpack.is_file():
            raise ProdsubError(f"Gridpack file not found: {self.gridpack}")

        # the jobs are submitted from the working directory, not from the current one
        self.gridpack = self.gridpack.absolute()

    def toDict(self) -> dict[str, object]:
        """Return the settings as a dictionary of human-readable labels and values."""
        return {
            "Year": self.year,
            "Sample": self.sample,
            "Gridpack": str(self.gridpack),
            "Events": self.events,
            "CPUs": self.cpus,
            "Memory": self.memory,
            "Queue size": self.queue,
            "Job flavour": self.flavour,
        }

    def getSubmitFileName(self) -> str:
        """Get the name of the rendered submit file."""
        return CFG.directories.submit_file_pattern.format(
            year=self.year, sample=self.sample
        )

    def getDriverName(self) -> str:
        """Get the name of the driver script for the production year."""
        return CFG.directories.driver_pattern.format(year=self.year)

    def getWorkDir(self, base_dir: Path | None = None) -> Path:
        """
        Get the working directory of the production year.

        Args:
            base_dir (Path | None): Directory containing the per-year working directories.
                Defaults to the configured base directory.

        Returns:
            Path: Path to the working directory.
        """
        return (base_dir or Path(CFG.directories.base_dir)) / self.year

    def getLogsDir(self, base_dir: Path | None = None) -> Path:
        """Get the directory for log, output and error files of the jobs."""
        return self.getWorkDir(base_dir) / CFG.directories.logs_dir
