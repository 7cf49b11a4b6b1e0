from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from data_explorer.config.loader import load_global_config
from data_explorer.core.dataset import Dataset
from data_explorer.core.dataset_loader import load_dataset
from data_explorer.core.exceptions import LoadError
from data_explorer.ui.callbacks.callbacks_filters import register_filter_callbacks
from data_explorer.ui.callbacks.callbacks_io import register_io_callbacks
from data_explorer.ui.callbacks.callbacks_render import register_render_callbacks
from data_explorer.ui.callbacks.callbacks_sync import register_sync_callbacks
from data_explorer.ui.callbacks.callbacks_view_mode import register_view_mode_callbacks
from data_explorer.ui.config import AppContext
from data_explorer.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    dataset: Optional[Dataset] = None,
) -> Dash:
    """
    Build the explorer app.

    The dataset is fetched once here unless one is passed in. A LoadError
    produces an app that only shows the error state.
    """
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load Dataset
    load_error: Optional[str] = None
    if dataset is None:
        try:
            dataset = load_dataset(
                global_config.data_url,
                timeout=global_config.request_timeout,
                name=global_config.ui_title,
            )
        except LoadError as e:
            logger.error(
                "Dataset load failed; starting in error state",
                extra={"source": global_config.data_url, "error": str(e)},
            )
            load_error = str(e)
            dataset = None

    # 3) App Context
    ctx = AppContext(
        global_config=global_config,
        dataset=dataset,
        load_error=load_error,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    if not ctx.is_ready:
        return app

    ctx.validate()

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_view_mode_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"n_records": len(dataset), "source": dataset.source},
    )

    return app
