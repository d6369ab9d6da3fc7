# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_option_group import optgroup
from rich.console import Console

import prodsub_lib
from prodsub_lib.core.click_format import GNUHelpColorsCommand
from prodsub_lib.core.config import CFG
from prodsub_lib.core.error import ProdsubError
from prodsub_lib.core.logger import get_logger
from prodsub_lib.prepare import Preparer
from prodsub_lib.properties.production import Production
from prodsub_lib.submit.presenter import SummaryPresenter
from prodsub_lib.submit.renderer import Renderer
from prodsub_lib.submit.submitter import Submitter

logger = get_logger(__name__)


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    print(prodsub_lib.__version__)
    ctx.exit()


@click.command(
    short_help="Submit a production job to HTCondor.",
    help=f"""
Create an HTCondor submit file for a production job and submit it.

{click.style("YEAR", fg="green")}            Production year (e.g., Run3Summer22, Run3Summer24).

{click.style("SAMPLE_NAME", fg="green")}     Sample name for the job.

{click.style("GRIDPACK_PATH", fg="green")}   Full path to the gridpack tarball.

The jobs run the driver script '<YEAR>.sh' from the working directory '<YEAR>'.
The driver script is copied into the working directory if it is missing there.
""",
    epilog=f"""\b
Example:
  {CFG.binary_name} Run3Summer24 VBSWWH_OSWW_C2V1p5_5f_LO /eos/user/a/aaarora/gridpacks/sample.tar.xz
""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("year", type=str, metavar=click.style("YEAR", fg="green"))
@click.argument(
    "sample_name", type=str, metavar=click.style("SAMPLE_NAME", fg="green")
)
@click.argument(
    "gridpack_path", type=str, metavar=click.style("GRIDPACK_PATH", fg="green")
)
@optgroup.group(f"{click.style('Job settings', fg='yellow')}")
@optgroup.option(
    "--events",
    "-n",
    type=click.IntRange(min=1),
    default=CFG.defaults.events,
    show_default=True,
    help="Number of events to generate per job.",
)
@optgroup.option(
    "--flavour",
    "-f",
    type=str,
    default=CFG.defaults.flavour,
    show_default=True,
    help="Job flavour (e.g., espresso, longlunch, workday, tomorrow, testmatch, nextweek).",
)
@optgroup.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Create the submit file but do not submit it.",
)
@optgroup.group(f"{click.style('Requested resources', fg='yellow')}")
@optgroup.option(
    "--cpus",
    "-c",
    type=click.IntRange(min=1),
    default=CFG.defaults.cpus,
    show_default=True,
    help="Number of CPUs to request per job.",
)
@optgroup.option(
    "--memory",
    "-m",
    type=str,
    default=CFG.defaults.memory,
    show_default=True,
    help="Memory to request per job. Passed to HTCondor verbatim (e.g., '8 GB').",
)
@optgroup.option(
    "--queue",
    "-q",
    type=click.IntRange(min=1),
    default=CFG.defaults.queue,
    show_default=True,
    help="Number of jobs to queue.",
)
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help=f"Print the current version of {CFG.binary_name} and exit.",
)
def submit(
    year: str,
    sample_name: str,
    gridpack_path: str,
    events: int,
    flavour: str,
    dry_run: bool,
    cpus: int,
    memory: str,
    queue: int,
) -> NoReturn:
    """
    Create an HTCondor submit file for a production job and submit it.
    """
    try:
        production = Production(
            year=year,
            sample=sample_name,
            gridpack=Path(gridpack_path),
            events=events,
            cpus=cpus,
            memory=memory,
            queue=queue,
            flavour=flavour,
            dry_run=dry_run,
        )

        work_dir = Preparer(production).prepare()

        submit_file = Renderer(production).write(work_dir)
        logger.info(f"Submit file created successfully: {submit_file}")

        console = Console()
        console.print(SummaryPresenter(production).createSummaryPanel(console))

        cluster_id = Submitter(submit_file, production.dry_run).submit()
        if cluster_id is not None:
            logger.info("Job submitted successfully!")
            logger.info(f"Cluster ID: {cluster_id}")
        sys.exit(0)
    except ProdsubError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
