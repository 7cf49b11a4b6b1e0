from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
import plotly.graph_objects as go
from dash import Input, Output, html

from data_explorer.core.selection import Selection
from data_explorer.core.state import ExplorerState
from data_explorer.ui.helpers import status_text
from data_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from data_explorer.ui.config import AppContext

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_selection(ctx: AppContext, selection_data: dict[str, Any] | None) -> Tuple[Any, Any, str]:
    """
    Pure helper: selection dict -> (figure, table component, status text).
    Both sub-renders use the same filtered records.
    """
    if selection_data is None:
        return (
            _message_figure("No selection yet.", "Choose a topic, indicator and geography."),
            html.Div(),
            "",
        )

    try:
        selection = Selection.from_dict(selection_data)
    except ValueError:
        logger.exception("Invalid selection in render callback: %r", selection_data)
        return _error_figure("Internal error: invalid selection."), html.Div(), ""

    state = ExplorerState(dataset=ctx.dataset, selection=selection)
    records = state.filtered_records()

    logger.info(
        "render_start",
        extra={"selection": selection.to_dict(), "n_records": len(records)},
    )

    figure = ctx.chart_view.render_records(records)
    table = ctx.table_view.render_records(records)
    return figure, table, status_text(records)


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Selection store -> chart + table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.SELECTION, "data"),
    )
    def update_outputs_from_selection(selection_data: dict[str, Any] | None):
        try:
            return render_selection(ctx, selection_data)
        except Exception:
            logger.exception(
                "Error in update_outputs_from_selection",
                extra={"selection": selection_data},
            )
            return (
                _error_figure(
                    "The app hit an unexpected error. "
                    "If this keeps happening, grab the logs and open an issue."
                ),
                html.Div(),
                "",
            )
