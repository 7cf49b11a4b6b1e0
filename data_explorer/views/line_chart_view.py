from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from data_explorer.core.record import Record
from data_explorer.views.base_view import BaseView

NO_DATA_MESSAGE = "No data to display."


class LineChartView(BaseView):
    """
    Single line series: year on x, value on y, labelled with the indicator
    of the first filtered record.

    Every render builds a brand new Figure; the caller swaps it in for the
    previous one, so at most one chart is ever live.
    """

    id = "chart"
    label = "Chart"

    def compute_data(self, records: Sequence[Record]) -> pd.DataFrame:
        return self.dataset.to_frame(records)

    def render(self, data: pd.DataFrame) -> go.Figure:
        if data is None:
            data = self.dataset.to_frame([])

        label = str(data["indicator"].iloc[0]) if not data.empty else ""
        unit = str(data["unit"].iloc[0]) if not data.empty else ""

        fig = go.Figure(
            go.Scatter(
                x=data["year"].tolist(),
                y=data["value"].tolist(),
                mode="lines+markers",
                name=label,
                showlegend=True,
            )
        )

        fig.update_layout(
            margin=dict(l=40, r=40, t=40, b=40),
            xaxis_title="Year",
            yaxis_title=unit or None,
            showlegend=True,
            legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        )

        if data.empty:
            fig.add_annotation(
                text=NO_DATA_MESSAGE,
                showarrow=False,
                xref="paper",
                yref="paper",
                x=0.5,
                y=0.5,
            )

        return fig
