# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

import pytest

from prodsub_lib.core.error import ProdsubError
from prodsub_lib.properties.production import CFG, Production


@pytest.fixture
def gridpack(tmp_path):
    path = tmp_path / "sample.tar.xz"
    path.write_text("")
    return path


def test_production_uses_configured_defaults(gridpack):
    production = Production("Run3Summer24", "sample", gridpack)

    assert production.events == CFG.defaults.events
    assert production.cpus == CFG.defaults.cpus
    assert production.memory == CFG.defaults.memory
    assert production.queue == CFG.defaults.queue
    assert production.flavour == CFG.defaults.flavour
    assert production.dry_run is False


def test_production_missing_gridpack_raises(tmp_path):
    with pytest.raises(ProdsubError, match="Gridpack file not found"):
        Production("Run3Summer24", "sample", tmp_path / "missing.tar.xz")


def test_production_gridpack_directory_raises(tmp_path):
    with pytest.raises(ProdsubError, match="Gridpack file not found"):
        Production("Run3Summer24", "sample", tmp_path)


@pytest.mark.parametrize("name", ["events", "cpus", "queue"])
def test_production_non_positive_values_raise(gridpack, name):
    with pytest.raises(ProdsubError, match=f"'{name}' must be a positive integer"):
        Production("Run3Summer24", "sample", gridpack, **{name: 0})


def test_production_empty_year_raises(gridpack):
    with pytest.raises(ProdsubError, match="year"):
        Production("", "sample", gridpack)


def test_production_derived_names(gridpack):
    production = Production("Run3Summer24", "VBSWWH_OSWW_C2V1p5_5f_LO", gridpack)

    assert (
        production.getSubmitFileName()
        == "submit_Run3Summer24_VBSWWH_OSWW_C2V1p5_5f_LO.jdl"
    )
    assert production.getDriverName() == "Run3Summer24.sh"


def test_production_directories(gridpack, tmp_path):
    production = Production("Run3Summer22", "sample", gridpack)

    assert production.getWorkDir(tmp_path) == tmp_path / "Run3Summer22"
    assert production.getLogsDir(tmp_path) == tmp_path / "Run3Summer22" / "logs"
    assert production.getWorkDir() == Path(".") / "Run3Summer22"


def test_production_to_dict(gridpack):
    production = Production(
        "Run3Summer24", "sample", gridpack, events=5000, queue=10, flavour="workday"
    )

    assert production.toDict() == {
        "Year": "Run3Summer24",
        "Sample": "sample",
        "Gridpack": str(gridpack),
        "Events": 5000,
        "CPUs": 8,
        "Memory": "8 GB",
        "Queue size": 10,
        "Job flavour": "workday",
    }


def test_production_relative_gridpack_is_made_absolute(tmp_path, monkeypatch):
    (tmp_path / "gp").mkdir()
    (tmp_path / "gp" / "s.tar.xz").write_text("")
    monkeypatch.chdir(tmp_path)

    production = Production("Run3Summer24", "sample", Path("gp/s.tar.xz"))

    assert production.gridpack.is_absolute()
    assert production.gridpack == tmp_path / "gp" / "s.tar.xz"
