from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Tuple

import dash
from dash import Input, Output, exceptions

from data_explorer.core.state import ExplorerState, ViewMode
from data_explorer.ui.helpers import DISPLAY_BLOCK, DISPLAY_NONE
from data_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from data_explorer.ui.config import AppContext

logger = logging.getLogger(__name__)


def surface_styles(ctx: AppContext, mode: str | None) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    (chart style, table style): exactly one surface is displayed.

    Raises:
        ValueError: if mode is not a ViewMode value
    """
    state = ExplorerState(dataset=ctx.dataset)
    state.set_view_mode(mode)

    if state.view_mode is ViewMode.TABLE:
        return DISPLAY_NONE, DISPLAY_BLOCK
    return DISPLAY_BLOCK, DISPLAY_NONE


def register_view_mode_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # Only visibility changes here; the selection store is untouched so no re-render happens.
    @app.callback(
        Output(IDs.Control.CHART_CONTAINER, "style"),
        Output(IDs.Control.TABLE_CONTAINER, "style"),
        Input(IDs.Control.VIEW_MODE_TABS, "value"),
        prevent_initial_call=True,
    )
    def toggle_view_mode(mode: str | None):
        try:
            return surface_styles(ctx, mode)
        except ValueError:
            logger.exception("Invalid view mode", extra={"mode": mode})
            raise exceptions.PreventUpdate
