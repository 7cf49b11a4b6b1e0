from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from .dataset import Dataset
from .record import Record
from .selection import Selection, coerce_year_selection


class ViewMode(str, Enum):
    CHART = "chart"
    TABLE = "table"


def _first(values: List[Any]) -> Optional[Any]:
    return values[0] if values else None


@dataclass
class ExplorerState:
    """
    Application state for one explorer: the (read-only) dataset, the current
    Selection and the active ViewMode.

    The UI layer only translates events into calls on this object, so every
    transition here can be tested without a browser.

    Invariant: selection.indicator is always one of indicator_options()
    (or None when the selected topic has no indicators).
    """

    dataset: Dataset
    selection: Selection = field(default_factory=Selection)
    view_mode: ViewMode = ViewMode.CHART

    @classmethod
    def initial(cls, dataset: Dataset) -> ExplorerState:
        topic = _first(dataset.topic_options())
        selection = Selection(
            topic=topic,
            indicator=_first(dataset.indicator_options(topic)),
            geography=_first(dataset.geography_options()),
        )
        return cls(dataset=dataset, selection=selection)

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------
    def indicator_options(self) -> List[str]:
        return self.dataset.indicator_options(self.selection.topic)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def select_topic(self, topic: Optional[str]) -> None:
        """Change topic and repopulate the indicator with the new topic's first indicator."""
        self.selection.topic = topic
        self.selection.indicator = _first(self.indicator_options())

    def select_indicator(self, indicator: Optional[str]) -> None:
        self.selection.indicator = indicator

    def select_geography(self, geography: Optional[str]) -> None:
        self.selection.geography = geography

    def select_year(self, year: Any) -> None:
        self.selection.year = coerce_year_selection(year)

    def set_view_mode(self, mode: Union[ViewMode, str]) -> None:
        self.view_mode = ViewMode(mode)

    # ------------------------------------------------------------------
    # Derived data
    # ------------------------------------------------------------------
    def filtered_records(self) -> List[Record]:
        return self.dataset.filter(self.selection)
