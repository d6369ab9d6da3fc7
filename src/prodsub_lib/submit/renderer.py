# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from prodsub_lib.core.config import CFG
from prodsub_lib.core.error import ProdsubError
from prodsub_lib.core.logger import get_logger
from prodsub_lib.properties.production import Production

logger = get_logger(__name__)

# width of the directive name column in the submit file
_KEY_WIDTH = 24


class Renderer:
    """
    Renders HTCondor submit descriptions for production jobs.

    All values are interpolated verbatim, without any escaping.
    """

    def __init__(self, production: Production):
        """
        Initialize the Renderer.

        Args:
            production (Production): Settings of the production submission.
        """
        self._production = production

    def render(self) -> str:
        """
        Build the text of the submit description.

        Returns:
            str: Content of the submit file.
        """
        p = self._production
        logs = CFG.directories.logs_dir
        job_files = "$(Cluster).$(Process)"

        blocks = [
            [("executable", p.getDriverName())],
            [("arguments", f"{p.gridpack} {p.sample} {p.events} $(request_cpus)")],
            [
                ("log", f"{logs}/{job_files}.log"),
                ("output", f"{logs}/{job_files}.out"),
                ("error", f"{logs}/{job_files}.err"),
            ],
            [
                ("request_cpus", str(p.cpus)),
                ("request_memory", p.memory),
            ],
            [("universe", CFG.condor.universe)],
            [
                ("+JobFlavour", f'"{p.flavour}"'),
                ("MY.WantOS", f'"{CFG.condor.want_os}"'),
            ],
            [
                ("on_exit_remove", "(ExitBySignal == False) && (ExitCode == 0)"),
                ("max_retries", str(CFG.condor.max_retries)),
                ("requirements", "Machine =!= LastRemoteHost"),
            ],
        ]

        sections = [
            "\n".join(Renderer._directive(key, value) for key, value in block)
            for block in blocks
        ]
        sections.append(f"queue {p.queue}")

        return "\n\n".join(sections) + "\n"

    def write(self, directory: Path) -> Path:
        """
        Render the submit description and write it into the given directory.

        An existing submit file of the same name is overwritten.

        Args:
            directory (Path): Directory to write the submit file into.

        Returns:
            Path: Path to the written submit file.

        Raises:
            ProdsubError: If the file cannot be written.
        """
        submit_file = directory / self._production.getSubmitFileName()
        logger.info(f"Creating condor submit file: {submit_file.name}")

        try:
            submit_file.write_text(self.render())
        except OSError as e:
            raise ProdsubError(
                f"Could not write submit file '{submit_file}': {e}."
            ) from e

        logger.debug(f"Submit file written to '{submit_file}'.")
        return submit_file

    @staticmethod
    def _directive(key: str, value: str) -> str:
        return f"{key:<{_KEY_WIDTH}}= {value}"
