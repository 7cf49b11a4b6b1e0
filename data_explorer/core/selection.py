from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from .record import normalise_year

ALL_YEARS = "All"

YearSelection = Union[int, str]


def coerce_year_selection(value: Any) -> YearSelection:
    """
    Map a raw year selection (from a dropdown or a store) onto either the
    "All" sentinel or a canonical int year. Missing values mean "All".
    """
    if value is None or value == ALL_YEARS:
        return ALL_YEARS
    return normalise_year(value)


@dataclass
class Selection:
    """
    Represents the current user selection.

    Fields:

    - topic / indicator / geography: exact-match filters, None when nothing can be selected
    - year: a canonical int year, or ALL_YEARS for no year filter
    """

    topic: Optional[str] = None
    indicator: Optional[str] = None
    geography: Optional[str] = None
    year: YearSelection = ALL_YEARS

    @property
    def all_years(self) -> bool:
        return self.year == ALL_YEARS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Selection:
        data = data or {}
        return cls(
            topic=data.get("topic"),
            indicator=data.get("indicator"),
            geography=data.get("geography"),
            year=coerce_year_selection(data.get("year")),
        )
