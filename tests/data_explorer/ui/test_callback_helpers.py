from __future__ import annotations

import plotly.graph_objects as go
import pytest
from dash import dash_table

from data_explorer.config.model import GlobalConfig
from data_explorer.core.dataset import Dataset
from data_explorer.core.record import Record
from data_explorer.export.csv_export import CsvQuoting
from data_explorer.ui.callbacks.callbacks_filters import indicator_options_for_topic
from data_explorer.ui.callbacks.callbacks_io import export_csv_text
from data_explorer.ui.callbacks.callbacks_render import render_selection
from data_explorer.ui.callbacks.callbacks_sync import build_selection
from data_explorer.ui.callbacks.callbacks_view_mode import surface_styles
from data_explorer.ui.config import AppContext
from data_explorer.ui.helpers import DISPLAY_BLOCK, DISPLAY_NONE


def _make_ctx(quoting: CsvQuoting = CsvQuoting.NONE) -> AppContext:
    ds = Dataset(
        [
            Record("Econ", "GDP", "US", 2020, 100, "USD"),
            Record("Econ", "GDP", "US", 2021, 110, "USD"),
            Record("Econ", "CPI", "US", 2021, 2.5, "%"),
            Record("Health", "LifeExp", "UK", 2020, 81, "years, at birth"),
        ],
        name="tiny",
    )
    return AppContext(global_config=GlobalConfig(csv_quoting=quoting), dataset=ds)


def test_indicator_options_follow_topic():
    ctx = _make_ctx()

    options, value = indicator_options_for_topic(ctx, "Econ")
    assert [o["value"] for o in options] == ["GDP", "CPI"]
    assert value == "GDP"

    options, value = indicator_options_for_topic(ctx, "Health")
    assert [o["value"] for o in options] == ["LifeExp"]
    assert value == "LifeExp"


def test_build_selection_normalises_year():
    ctx = _make_ctx()
    data = build_selection(ctx, "Econ", "CPI", "US", "2021")
    assert data == {"topic": "Econ", "indicator": "CPI", "geography": "US", "year": 2021}


def test_build_selection_replaces_stale_indicator():
    ctx = _make_ctx()
    data = build_selection(ctx, "Health", "GDP", "UK", "All")
    assert data["indicator"] == "LifeExp"
    assert data["year"] == "All"


def test_render_selection_outputs_chart_table_and_status():
    ctx = _make_ctx()
    fig, table, status = render_selection(
        ctx, {"topic": "Econ", "indicator": "GDP", "geography": "US", "year": "All"}
    )

    assert isinstance(fig, go.Figure)
    assert list(fig.data[0].x) == [2020, 2021]
    assert isinstance(table, dash_table.DataTable)
    assert len(table.data) == 2
    assert status == "2 records match the current selection"


def test_render_selection_empty_result_is_not_an_error():
    ctx = _make_ctx()
    fig, table, status = render_selection(
        ctx, {"topic": "Econ", "indicator": "GDP", "geography": "UK", "year": "All"}
    )
    assert fig.data[0].name == ""
    assert table.data == []
    assert status.startswith("0 records")


def test_render_selection_without_store_data():
    fig, _table, status = render_selection(_make_ctx(), None)
    assert isinstance(fig, go.Figure)
    assert status == ""


def test_surface_styles_show_exactly_one_surface():
    ctx = _make_ctx()
    assert surface_styles(ctx, "chart") == (DISPLAY_BLOCK, DISPLAY_NONE)
    assert surface_styles(ctx, "table") == (DISPLAY_NONE, DISPLAY_BLOCK)


@pytest.mark.parametrize("mode", [None, "bogus"])
def test_surface_styles_rejects_unknown_mode(mode):
    with pytest.raises(ValueError):
        surface_styles(_make_ctx(), mode)


def test_export_recomputes_filtered_records():
    ctx = _make_ctx()
    text = export_csv_text(
        ctx, {"topic": "Econ", "indicator": "GDP", "geography": "US", "year": "All"}
    )
    assert text == "Year,Value,Unit\n2020,100,USD\n2021,110,USD"

    text = export_csv_text(
        ctx, {"topic": "Econ", "indicator": "GDP", "geography": "US", "year": 2021}
    )
    assert text == "Year,Value,Unit\n2021,110,USD"


@pytest.mark.parametrize(
    "quoting, expected_row",
    [
        (CsvQuoting.NONE, "2020,81,years, at birth"),
        (CsvQuoting.MINIMAL, '2020,81,"years, at birth"'),
    ],
)
def test_export_uses_configured_quoting(quoting, expected_row):
    ctx = _make_ctx(quoting)
    text = export_csv_text(
        ctx, {"topic": "Health", "indicator": "LifeExp", "geography": "UK", "year": "All"}
    )
    assert text.split("\n")[1] == expected_row
