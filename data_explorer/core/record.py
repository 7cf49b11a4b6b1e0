from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Union

from .exceptions import DatasetSchemaError

Number = Union[int, float]

TEXT_FIELDS = ("topic", "indicator", "geography", "unit")
FIELDS = ("topic", "indicator", "geography", "year", "value", "unit")


def normalise_year(value: Any) -> int:
    """
    Canonical year coercion used on both sides of every year comparison.

    Accepts ints, integral floats and numeric strings ("2020", " 2020 ", "2020.0").
    Raises ValueError for anything else.
    """
    if isinstance(value, bool):
        raise ValueError(f"Year must be numeric, got {value!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise ValueError(f"Year must be a whole number, got {value!r}")

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            as_float = float(text)
        except ValueError:
            raise ValueError(f"Year must be numeric, got {value!r}")
        return normalise_year(as_float)

    raise ValueError(f"Year must be numeric, got {value!r}")


def format_number(value: Number) -> str:
    """Render a number for display/export; integral floats drop the trailing '.0'."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _coerce_value(value: Any) -> Number:
    if isinstance(value, bool):
        raise ValueError(f"Value must be numeric, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"Value must be numeric, got {value!r}")
    raise ValueError(f"Value must be numeric, got {value!r}")


@dataclass(frozen=True)
class Record:
    """
    One data point of the dataset.

    Records are never mutated after load; filtering produces new sequences
    that reference the same Record objects.
    """
    topic: str
    indicator: str
    geography: str
    year: int
    value: Number
    unit: str

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], index: int = 0) -> Record:
        if not isinstance(raw, dict):
            raise DatasetSchemaError(
                f"Record {index}: expected an object, got {type(raw).__name__}"
            )

        missing = [f for f in FIELDS if f not in raw]
        if missing:
            raise DatasetSchemaError(
                f"Record {index}: missing field(s) {', '.join(missing)}"
            )

        text: Dict[str, str] = {}
        for key in TEXT_FIELDS:
            val = raw[key]
            if val is None or isinstance(val, (dict, list)):
                raise DatasetSchemaError(
                    f"Record {index}: field '{key}' must be a string, got {val!r}"
                )
            text[key] = val if isinstance(val, str) else str(val)

        try:
            year = normalise_year(raw["year"])
        except ValueError as e:
            raise DatasetSchemaError(f"Record {index}: {e}") from e

        try:
            value = _coerce_value(raw["value"])
        except ValueError as e:
            raise DatasetSchemaError(f"Record {index}: {e}") from e

        return cls(
            topic=text["topic"],
            indicator=text["indicator"],
            geography=text["geography"],
            year=year,
            value=value,
            unit=text["unit"],
        )
