from dash import dash_table

from data_explorer.core.dataset import Dataset
from data_explorer.core.record import Record
from data_explorer.views.table_view import TableView


def _make_dataset() -> Dataset:
    return Dataset(
        [
            Record("Econ", "GDP", "US", 2021, 110.0, "USD"),
            Record("Econ", "GDP", "US", 2020, 99.5, "USD"),
        ]
    )


def test_table_rows_follow_filtered_order():
    ds = _make_dataset()
    view = TableView(ds)

    table = view.render_records(list(ds.records))

    assert isinstance(table, dash_table.DataTable)
    assert [c["name"] for c in table.columns] == ["Year", "Value", "Unit"]
    assert table.data == [
        {"year": "2021", "value": "110", "unit": "USD"},
        {"year": "2020", "value": "99.5", "unit": "USD"},
    ]


def test_table_empty_keeps_header():
    view = TableView(_make_dataset())
    table = view.render_records([])

    assert table.data == []
    assert [c["name"] for c in table.columns] == ["Year", "Value", "Unit"]
