from __future__ import annotations

from pathlib import Path

import pytest

from kintuni.config.settings import ChartSettings
from kintuni.viz.paper import ChartPaper


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep persisted settings inside the test's temporary directory."""

    home = tmp_path / "kintuni-home"
    monkeypatch.setenv("KINTUNI_HOME", str(home))
    return home


@pytest.fixture()
def chart_settings() -> ChartSettings:
    return ChartSettings()


@pytest.fixture()
def paper(chart_settings: ChartSettings) -> ChartPaper:
    return ChartPaper.standalone(400, 400, chart_settings, element_id="chart")
