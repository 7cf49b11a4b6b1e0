from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import dash
from dash import Input, Output

from data_explorer.core.state import ExplorerState
from data_explorer.ui.helpers import to_dropdown_options
from data_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from data_explorer.ui.config import AppContext

logger = logging.getLogger(__name__)


def indicator_options_for_topic(
    ctx: AppContext, topic: Optional[str]
) -> Tuple[List[Dict[str, Any]], Optional[str]]:
    """Indicator dropdown contents for a topic, plus the (reset) selected indicator."""
    state = ExplorerState(dataset=ctx.dataset)
    state.select_topic(topic)
    return to_dropdown_options(state.indicator_options()), state.selection.indicator


def register_filter_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Topic -> indicator options (scoped to topic)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.INDICATOR_SELECT, "options"),
        Output(IDs.Control.INDICATOR_SELECT, "value"),
        Input(IDs.Control.TOPIC_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_indicators(topic: str | None):
        options, value = indicator_options_for_topic(ctx, topic)
        logger.debug(
            "indicator_options_updated",
            extra={"topic": topic, "n_indicators": len(options)},
        )
        return options, value
