from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from data_explorer.core.state import ViewMode
from data_explorer.ui.helpers import DISPLAY_BLOCK, DISPLAY_NONE
from data_explorer.ui.ids import IDs
from data_explorer.views.base_view import BaseView


def build_plot_panel(
    views: Sequence[BaseView],
    initial_mode: ViewMode = ViewMode.CHART,
) -> dbc.Card:
    chart_visible = initial_mode is ViewMode.CHART

    return dbc.Card(
        [
            dbc.CardHeader(
                dcc.Tabs(
                    id=IDs.Control.VIEW_MODE_TABS,
                    value=initial_mode.value,
                    children=[dcc.Tab(label=view.label, value=view.id) for view in views],
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(
                        id=IDs.Control.CHART_CONTAINER,
                        style=DISPLAY_BLOCK if chart_visible else DISPLAY_NONE,
                        children=dcc.Loading(
                            id="main-graph-loading",
                            type="default",
                            children=dcc.Graph(
                                id=IDs.Control.MAIN_GRAPH,
                                style={"height": "500px"},
                                config={"responsive": True},
                            ),
                        ),
                    ),
                    html.Div(
                        id=IDs.Control.TABLE_CONTAINER,
                        style=DISPLAY_NONE if chart_visible else DISPLAY_BLOCK,
                    ),
                    html.Div(
                        [
                            html.Small(id=IDs.Control.STATUS_BAR, className="text-muted"),
                            dbc.Button(
                                "Download CSV",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
                className="dex-main-body",
            ),
        ],
        className="dex-maincard",
    )
