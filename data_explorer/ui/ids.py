from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        SELECTION = "selection-state"

    class Control:
        # Selectors
        TOPIC_SELECT = "topic-select"
        INDICATOR_SELECT = "indicator-select"
        GEOGRAPHY_SELECT = "geo-select"
        YEAR_SELECT = "year-select"

        # View mode (chart/table)
        VIEW_MODE_TABS = "view-mode-tabs"

        # Render surfaces
        CHART_CONTAINER = "chart-container"
        MAIN_GRAPH = "main-graph"
        TABLE_CONTAINER = "table-container"

        # Downloads
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-btn"

        # Status bar
        STATUS_BAR = "status-bar"
        LOAD_ERROR = "load-error"
