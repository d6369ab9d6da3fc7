# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import re
import shutil
import subprocess
from pathlib import Path

from prodsub_lib.core.config import CFG
from prodsub_lib.core.error import ProdsubError
from prodsub_lib.core.logger import get_logger

logger = get_logger(__name__)

# cluster id in the output of `condor_submit -terse`, e.g. '1234.0 - 1234.49'
_TERSE_CLUSTER_RE = re.compile(r"^\s*(\d+)\.\d+\s*-\s*\d+\.\d+\s*$", re.MULTILINE)
# cluster id in the human-readable output of `condor_submit`
_VERBOSE_CLUSTER_RE = re.compile(r"submitted to cluster (\d+)")

UNKNOWN_CLUSTER = "unknown"


class Submitter:
    """
    Hands a rendered submit file over to HTCondor.

    The submission command is executed exactly once; retries of failed jobs
    are governed by the scheduler itself through the submit file.
    """

    def __init__(self, submit_file: Path, dry_run: bool = False):
        """
        Initialize the Submitter.

        Args:
            submit_file (Path): Path to the rendered submit file.
                The submission command is executed from the file's directory.
            dry_run (bool): If True, the file is only reported, not submitted.
        """
        self._submit_file = submit_file
        self._dry_run = dry_run
        self._command = CFG.condor.submit_command

    def submit(self) -> str | None:
        """
        Submit the rendered file to the batch system.

        In dry-run mode, instructions for manual submission are printed and
        nothing is executed. Otherwise the submit file is removed after
        a successful submission.

        Returns:
            str | None: The cluster id of the submitted jobs (or 'unknown' if it
                could not be determined). None in dry-run mode.

        Raises:
            ProdsubError: If the submission command is not available or fails.
                The submit file is kept in that case.
        """
        if self._dry_run:
            self._printManualInstructions()
            return None

        logger.info("Submitting job to condor...")
        if not Submitter.isAvailable():
            raise ProdsubError(
                f"{self._command} command not found. Please ensure HTCondor is properly installed and configured."
            )

        command = self._buildCommand()
        logger.debug(command)

        result = subprocess.run(
            command,
            cwd=self._submit_file.parent,
            text=True,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            errors="replace",
        )

        output = result.stdout.strip()
        if output:
            print(output)

        if result.returncode != 0:
            raise ProdsubError(
                f"Failed to submit '{self._submit_file}' (exit code {result.returncode}). The submit file was kept."
            )

        self._removeSubmitFile()
        return Submitter.extractClusterId(output)

    @staticmethod
    def isAvailable() -> bool:
        """Check whether the submission command can be found in PATH."""
        return shutil.which(CFG.condor.submit_command) is not None

    @staticmethod
    def extractClusterId(output: str) -> str:
        """
        Extract the cluster id from the output of the submission command.

        Both the terse (`<cluster>.<proc> - <cluster>.<proc>`) and the
        human-readable (`... submitted to cluster <cluster>.`) formats are recognized.

        Args:
            output (str): Captured output of the submission command.

        Returns:
            str: The cluster id or 'unknown' if none was found.
        """
        for regex in (_TERSE_CLUSTER_RE, _VERBOSE_CLUSTER_RE):
            if match := regex.search(output):
                return match.group(1)

        logger.debug(f"Could not find a cluster id in '{output}'.")
        return UNKNOWN_CLUSTER

    def _buildCommand(self) -> list[str]:
        command = [self._command]
        if CFG.condor.terse:
            command.append("-terse")
        command.append(self._submit_file.name)
        return command

    def _removeSubmitFile(self) -> None:
        """Remove the submit file if it still exists."""
        try:
            self._submit_file.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove submit file '{self._submit_file}': {e}.")

    def _printManualInstructions(self) -> None:
        logger.info("Dry run mode - submit file created but not submitted")
        print("To submit manually, run:")
        print(f"  cd {self._submit_file.parent} && {self._command} {self._submit_file.name}")
