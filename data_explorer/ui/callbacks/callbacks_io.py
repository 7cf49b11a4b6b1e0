from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import Input, Output, State, dcc, exceptions

from data_explorer.core.selection import Selection
from data_explorer.core.state import ExplorerState
from data_explorer.export.csv_export import records_to_csv
from data_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from data_explorer.ui.config import AppContext

logger = logging.getLogger(__name__)


def export_csv_text(ctx: AppContext, selection_data: Optional[Dict[str, Any]]) -> str:
    """Re-filter at export time and serialise with the configured quoting mode."""
    state = ExplorerState(dataset=ctx.dataset, selection=Selection.from_dict(selection_data))
    records = state.filtered_records()
    logger.info(
        "csv_export",
        extra={
            "n_records": len(records),
            "quoting": ctx.global_config.csv_quoting.value,
        },
    )
    return records_to_csv(records, quoting=ctx.global_config.csv_quoting)


def register_io_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Download filtered records as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, selection_data):
        if not n_clicks or selection_data is None:
            raise exceptions.PreventUpdate

        try:
            text = export_csv_text(ctx, selection_data)
        except ValueError:
            logger.exception("Invalid selection in download callback: %r", selection_data)
            raise exceptions.PreventUpdate

        return dcc.send_string(text, ctx.global_config.csv_filename, type="text/csv")
