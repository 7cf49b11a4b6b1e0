from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from data_explorer.core.record import Record

DISPLAY_NONE = {"display": "none"}
DISPLAY_BLOCK = {"display": "block"}


def to_dropdown_options(values: Iterable[Any]) -> List[Dict[str, Any]]:
    return [{"label": str(v), "value": v} for v in values]


def status_text(records: Sequence[Record]) -> str:
    n = len(records)
    return f"{n} record{'' if n == 1 else 's'} match the current selection"
