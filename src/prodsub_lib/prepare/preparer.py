# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shutil
import stat
from pathlib import Path

from prodsub_lib.core.config import CFG
from prodsub_lib.core.error import ProdsubError
from prodsub_lib.core.logger import get_logger
from prodsub_lib.properties.production import Production

logger = get_logger(__name__)


class Preparer:
    """
    Ensures that the working directory of a production year is ready for submission.

    Responsibilities:
        - Create the working directory and its logs subdirectory.
        - Make the driver script of the production year available in the working directory,
          copying it from one of the search paths if needed.

    Preparation is idempotent: existing directories and driver scripts are left untouched.
    """

    def __init__(
        self,
        production: Production,
        base_dir: Path | None = None,
        search_paths: list[Path] | None = None,
    ):
        """
        Initialize the Preparer.

        Args:
            production (Production): Settings of the production submission.
            base_dir (Path | None): Directory containing the per-year working directories.
                Defaults to the configured base directory.
            search_paths (list[Path] | None): Directories searched for the driver script
                if it is missing from the working directory. Defaults to the configured paths.
        """
        self._production = production
        self._work_dir = production.getWorkDir(base_dir).resolve()
        self._logs_dir = production.getLogsDir(base_dir).resolve()
        self._driver_name = production.getDriverName()
        self._search_paths = (
            search_paths
            if search_paths is not None
            else [Path(p) for p in CFG.directories.driver_search_paths]
        )

    def prepare(self) -> Path:
        """
        Prepare the working directory of the production year.

        Returns:
            Path: Path to the prepared working directory.

        Raises:
            ProdsubError: If a directory cannot be created or the driver script
                cannot be found in any of the search paths.
        """
        self._makeDirs()
        self._ensureDriver()
        return self._work_dir

    def getDriver(self) -> Path:
        """Get path to the driver script inside the working directory."""
        return self._work_dir / self._driver_name

    def _makeDirs(self) -> None:
        """Create the working and logs directories if they do not exist."""
        for directory in (self._work_dir, self._logs_dir):
            if directory.is_dir():
                continue

            logger.debug(f"Creating directory '{directory}'.")
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ProdsubError(
                    f"Could not create directory '{directory}': {e}."
                ) from e

    def _ensureDriver(self) -> None:
        """
        Make sure the driver script is present in the working directory.

        Raises:
            ProdsubError: If the driver script is not found anywhere.
        """
        driver = self.getDriver()
        if driver.is_file():
            logger.debug(f"Driver script '{driver}' already present.")
            self._makeExecutable(driver)
            return

        if not (source := self._findDriver()):
            searched = ", ".join(str(p) for p in [self._work_dir, *self._search_paths])
            raise ProdsubError(
                f"Executable script not found: {self._driver_name} (searched in: {searched})"
            )

        logger.info(f"Copying driver script '{source}' to '{self._work_dir}'.")
        try:
            shutil.copy2(source, driver)
        except OSError as e:
            raise ProdsubError(
                f"Could not copy driver script '{source}' to '{driver}': {e}."
            ) from e

        self._makeExecutable(driver)

    def _findDriver(self) -> Path | None:
        """Return the first driver script found in the search paths."""
        for directory in self._search_paths:
            candidate = directory / self._driver_name
            if candidate.is_file():
                return candidate

            logger.debug(f"Driver script not found in '{directory}'.")

        return None

    @staticmethod
    def _makeExecutable(file_path: Path) -> None:
        """Add execute permissions wherever read permissions are set."""
        current_mode = Path.stat(file_path).st_mode
        new_mode = current_mode | stat.S_IXUSR
        if current_mode & stat.S_IRGRP:
            new_mode |= stat.S_IXGRP
        if current_mode & stat.S_IROTH:
            new_mode |= stat.S_IXOTH

        Path.chmod(file_path, new_mode)
