from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import Input, Output, exceptions

from data_explorer.core.state import ExplorerState
from data_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from data_explorer.ui.config import AppContext

logger = logging.getLogger(__name__)


def build_selection(
    ctx: AppContext,
    topic: Optional[str],
    indicator: Optional[str],
    geography: Optional[str],
    year: Any,
) -> Dict[str, Any]:
    """
    Pure helper: apply the raw dropdown values to a fresh ExplorerState and
    return the selection dict for the store.

    An indicator that doesn't belong to the topic (stale value while the
    indicator dropdown is being repopulated) is replaced by the topic's first
    indicator.
    """
    state = ExplorerState(dataset=ctx.dataset)
    state.select_topic(topic)
    if indicator in state.indicator_options():
        state.select_indicator(indicator)
    state.select_geography(geography)
    state.select_year(year)
    return state.selection.to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Selectors -> Selection store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION, "data"),
        Input(IDs.Control.TOPIC_SELECT, "value"),
        Input(IDs.Control.INDICATOR_SELECT, "value"),
        Input(IDs.Control.GEOGRAPHY_SELECT, "value"),
        Input(IDs.Control.YEAR_SELECT, "value"),
    )
    def sync_selection(topic, indicator, geography, year):
        try:
            return build_selection(ctx, topic, indicator, geography, year)
        except ValueError:
            logger.exception(
                "Invalid selector value",
                extra={"topic": topic, "indicator": indicator, "geography": geography, "year": year},
            )
            raise exceptions.PreventUpdate
