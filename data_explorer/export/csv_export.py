from __future__ import annotations

import csv
from enum import Enum
from typing import List, Sequence, Union

import pandas as pd

from data_explorer.core.record import Record, format_number

CSV_HEADER = ["Year", "Value", "Unit"]
DEFAULT_CSV_FILENAME = "data.csv"


class CsvQuoting(str, Enum):
    """
    NONE: fields joined with a bare comma, nothing escaped (byte-compatible with
          the original browser export).
    MINIMAL: RFC 4180 style; fields containing a comma, quote or newline are quoted.
    """
    NONE = "none"
    MINIMAL = "minimal"


def _rows(records: Sequence[Record]) -> List[List[str]]:
    return [[str(r.year), format_number(r.value), r.unit] for r in records]


def records_to_csv(
    records: Sequence[Record],
    quoting: Union[CsvQuoting, str] = CsvQuoting.NONE,
) -> str:
    """
    Serialise records as CSV text: header `Year,Value,Unit` then one line per
    record, "\\n"-separated, no trailing newline.
    """
    quoting = CsvQuoting(quoting)
    rows = _rows(records)

    if quoting is CsvQuoting.NONE:
        return "\n".join(",".join(fields) for fields in [CSV_HEADER] + rows)

    df = pd.DataFrame(rows, columns=CSV_HEADER, dtype=object)
    text = df.to_csv(index=False, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    return text[:-1] if text.endswith("\n") else text
