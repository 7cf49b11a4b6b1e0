from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from data_explorer.core.state import ExplorerState
from data_explorer.ui.helpers import to_dropdown_options
from data_explorer.ui.ids import IDs


def _selector(label: str, select_id: str, options, value) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label", htmlFor=select_id),
            dcc.Dropdown(
                id=select_id,
                options=options,
                value=value,
                clearable=False,
                className="mb-3",
            ),
        ],
    )


def build_filter_panel(state: ExplorerState) -> dbc.Card:
    dataset = state.dataset
    selection = state.selection

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(dataset.name, className="card-title"),
                        html.P(
                            f"{len(dataset)} records",
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),
                    _selector(
                        "Topic",
                        IDs.Control.TOPIC_SELECT,
                        to_dropdown_options(dataset.topic_options()),
                        selection.topic,
                    ),
                    _selector(
                        "Indicator",
                        IDs.Control.INDICATOR_SELECT,
                        to_dropdown_options(state.indicator_options()),
                        selection.indicator,
                    ),
                    _selector(
                        "Geography",
                        IDs.Control.GEOGRAPHY_SELECT,
                        to_dropdown_options(dataset.geography_options()),
                        selection.geography,
                    ),
                    _selector(
                        "Year",
                        IDs.Control.YEAR_SELECT,
                        to_dropdown_options(dataset.year_options()),
                        selection.year,
                    ),
                ]
            ),
        ],
        className="dex-sidebar",
    )
