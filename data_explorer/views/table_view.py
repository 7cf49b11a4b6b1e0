from __future__ import annotations

from typing import Dict, List, Sequence

from dash import dash_table

from data_explorer.core.record import Record, format_number
from data_explorer.views.base_view import BaseView

TABLE_COLUMNS = [
    {"name": "Year", "id": "year"},
    {"name": "Value", "id": "value"},
    {"name": "Unit", "id": "unit"},
]

FONT_STACK = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


class TableView(BaseView):
    """
    Year / Value / Unit table, one row per filtered record, in filtered order.
    """

    id = "table"
    label = "Table"

    def compute_data(self, records: Sequence[Record]) -> List[Dict[str, str]]:
        return [
            {"year": str(r.year), "value": format_number(r.value), "unit": r.unit}
            for r in records
        ]

    def render(self, data: List[Dict[str, str]]) -> dash_table.DataTable:
        return dash_table.DataTable(
            id="explorer-table",
            data=data or [],
            columns=TABLE_COLUMNS,
            style_table={"overflowX": "auto"},
            style_as_list_view=True,
            style_cell={
                "fontFamily": FONT_STACK,
                "fontSize": "12px",
                "padding": "6px 8px",
                "border": "none",
                "textAlign": "left",
                "minWidth": "80px",
            },
            style_header={
                "fontFamily": FONT_STACK,
                "fontSize": "12px",
                "fontWeight": "600",
                "backgroundColor": "#f3f4f6",
                "borderBottom": "1px solid #e5e7eb",
            },
            style_data={"borderBottom": "1px solid #e5e7eb"},
            sort_action="none",
            filter_action="none",
        )
