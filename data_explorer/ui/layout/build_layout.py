from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from data_explorer.core.state import ExplorerState
from data_explorer.ui.ids import IDs
from data_explorer.ui.layout.build_filter_panel import build_filter_panel
from data_explorer.ui.layout.build_navbar import build_navbar
from data_explorer.ui.layout.build_plot_panel import build_plot_panel

if TYPE_CHECKING:
    from data_explorer.ui.config import AppContext


def build_error_layout(ctx: AppContext) -> dbc.Container:
    return dbc.Container(
        fluid=True,
        className="dex-root",
        children=[
            build_navbar(ctx.global_config),
            dbc.Alert(
                [
                    "The dataset could not be loaded. ",
                    ctx.load_error or "Unknown error.",
                ],
                id=IDs.Control.LOAD_ERROR,
                color="danger",
                className="mt-3",
            ),
        ],
    )


def build_layout(ctx: AppContext) -> dbc.Container:
    if not ctx.is_ready:
        return build_error_layout(ctx)

    state = ExplorerState.initial(ctx.dataset)

    return dbc.Container(
        fluid=True,
        className="dex-root",
        children=[
            build_navbar(ctx.global_config),

            # Per-session selection, filled by the sync callback
            dcc.Store(id=IDs.Store.SELECTION, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(state), md=3, className="mt-3"),
                    dbc.Col(
                        build_plot_panel([ctx.chart_view, ctx.table_view], state.view_mode),
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
