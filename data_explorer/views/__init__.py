from .base_view import BaseView
from .line_chart_view import LineChartView
from .table_view import TableView

__all__ = ["BaseView", "LineChartView", "TableView"]
