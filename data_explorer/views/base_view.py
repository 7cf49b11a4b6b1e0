from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from data_explorer.core.dataset import Dataset
from data_explorer.core.record import Record


class BaseView(ABC):
    """
    Abstract base class for the explorer's render targets.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally (matches a ViewMode value)
    - expose a 'label' - used for the tab caption
    - implement 'compute_data' - shape the filtered records for this view
    - implement 'render' - build the Dash/Plotly output from that data
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self, records: Sequence[Record]) -> Any:
        """
        Shape the filtered records for rendering
        :param records: the filtered records, in dataset order
        :return: data consumed by {@link render()}
        """
        raise NotImplementedError()

    @abstractmethod
    def render(self, data: Any) -> Any:
        """
        Render the output for the computed data
        :param data: the data provided by {@link compute_data()}
        :return: a Plotly figure or Dash component
        """
        raise NotImplementedError()

    def render_records(self, records: Sequence[Record]) -> Any:
        return self.render(self.compute_data(records))
