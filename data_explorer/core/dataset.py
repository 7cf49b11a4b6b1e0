from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .record import FIELDS, Record, normalise_year
from .selection import ALL_YEARS, Selection

RecordPredicate = Callable[[Record], bool]

FRAME_COLUMNS = ["year", "value", "unit", "indicator"]


class Dataset:
    """
    Read-only record collection used throughout the explorer.

    Includes:
    - Ordered distinct option lists for the selectors (first-seen order)
    - Exact-match filtering against a Selection
    - Conversion of a filtered sequence to a DataFrame for the views
    """

    def __init__(
        self,
        records: Iterable[Record],
        name: str = "Dataset",
        source: Optional[str] = None,
    ) -> None:
        self.name = name
        self.source = source
        self._records: Tuple[Record, ...] = tuple(records)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_records={len(self._records)})"

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------
    def derive_options(
        self,
        field: str,
        predicate: Optional[RecordPredicate] = None,
    ) -> List[Any]:
        """
        Distinct values of `field` in first-seen order.

        :param field: one of the Record field names
        :param predicate: optional pre-filter applied before collecting values
        :return: list of distinct values, encounter order preserved
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown record field '{field}'")

        records = self._records
        if predicate is not None:
            records = tuple(r for r in records if predicate(r))

        return list(dict.fromkeys(getattr(r, field) for r in records))

    def topic_options(self) -> List[str]:
        return self.derive_options("topic")

    def indicator_options(self, topic: Optional[str]) -> List[str]:
        return self.derive_options("indicator", lambda r: r.topic == topic)

    def geography_options(self) -> List[str]:
        return self.derive_options("geography")

    def year_options(self) -> List[Any]:
        return [ALL_YEARS] + self.derive_options("year")

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def filter(self, selection: Selection) -> List[Record]:
        """
        Records matching topic, indicator and geography exactly and, unless the
        year selection is "All", the (normalised) year. Original order is kept.
        """
        year = None if selection.all_years else normalise_year(selection.year)

        return [
            r
            for r in self._records
            if r.topic == selection.topic
            and r.indicator == selection.indicator
            and r.geography == selection.geography
            and (year is None or r.year == year)
        ]

    @staticmethod
    def to_frame(records: Sequence[Record]) -> pd.DataFrame:
        if not records:
            return pd.DataFrame(columns=FRAME_COLUMNS)
        return pd.DataFrame(
            {
                "year": [r.year for r in records],
                "value": [r.value for r in records],
                "unit": [r.unit for r in records],
                "indicator": [r.indicator for r in records],
            },
            columns=FRAME_COLUMNS,
        )
