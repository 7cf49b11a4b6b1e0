from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from data_explorer.config.model import GlobalConfig
from data_explorer.core.dataset import Dataset
from data_explorer.views.line_chart_view import LineChartView
from data_explorer.views.table_view import TableView


@dataclass
class AppContext:
    """
    Holds shared state for the Dash app: global config, the loaded dataset
    (or the load error) and the two views. This is passed into layout +
    callback registration functions instead of using module-level globals.
    """
    global_config: GlobalConfig = field(default_factory=GlobalConfig)
    dataset: Optional[Dataset] = None
    load_error: Optional[str] = None

    chart_view: Optional[LineChartView] = None
    table_view: Optional[TableView] = None

    def __post_init__(self) -> None:
        if self.dataset is not None:
            if self.chart_view is None:
                self.chart_view = LineChartView(self.dataset)
            if self.table_view is None:
                self.table_view = TableView(self.dataset)

    @property
    def is_ready(self) -> bool:
        return self.dataset is not None and self.load_error is None

    def validate(self) -> None:
        """Ensure the dataset and views are attached before data callbacks are registered."""
        if self.dataset is None:
            raise RuntimeError("AppContext.dataset must be loaded.")
        if self.chart_view is None or self.table_view is None:
            raise RuntimeError("AppContext views must be initialized.")
