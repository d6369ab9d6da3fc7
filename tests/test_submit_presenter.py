# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io

from rich.console import Console, Group
from rich.panel import Panel

from prodsub_lib.properties.production import Production
from prodsub_lib.submit.presenter import SummaryPresenter


def test_summary_panel_lists_all_settings(tmp_path):
    gridpack = tmp_path / "sample.tar.xz"
    gridpack.write_text("")
    production = Production(
        "Run3Summer24", "VBSWWH", gridpack, events=5000, memory="16 GB", queue=10
    )

    console = Console(file=io.StringIO(), width=200, force_terminal=False)
    group = SummaryPresenter(production).createSummaryPanel(console)

    assert isinstance(group, Group)
    assert any(isinstance(r, Panel) for r in group.renderables)

    console.print(group)
    output = console.file.getvalue()

    assert "JOB CONFIGURATION" in output
    for label in ("Year:", "Sample:", "Gridpack:", "Events:", "CPUs:", "Memory:"):
        assert label in output
    assert "Run3Summer24" in output
    assert "5000" in output
    assert "16 GB" in output
    assert "nextweek" in output
