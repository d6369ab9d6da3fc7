# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from prodsub_lib.core.config import CFG
from prodsub_lib.properties.production import Production


class SummaryPresenter:
    """
    Presentation layer for the configuration of a production submission.
    """

    def __init__(self, production: Production):
        """
        Initialize the presenter.

        Args:
            production (Production): Settings of the production submission.
        """
        self._production = production

    def createSummaryPanel(self, console: Console | None = None) -> Group:
        """
        Create a panel listing the settings of the submitted jobs.

        Args:
            console (Console | None): Optional Rich console.
                If not provided, a new Console is created.

        Returns:
            Group: A Rich Group containing the summary panel.
        """
        console = console or Console()
        settings = CFG.summary_panel

        width = console.size.width
        if settings.max_width is not None:
            width = min(width, settings.max_width)

        panel = Panel(
            self._createSummaryTable(),
            title=Text(
                "JOB CONFIGURATION",
                style=settings.title_style,
                justify="center",
            ),
            border_style=settings.border_style,
            padding=(1, 2),
            width=width,
        )

        return Group(Text(""), panel, Text(""))

    def _createSummaryTable(self) -> Table:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="right", style=CFG.summary_panel.key_style)
        table.add_column(justify="left", style=CFG.summary_panel.value_style)

        for key, value in self._production.toDict().items():
            table.add_row(f"{key}:", Text(str(value)))

        return table
