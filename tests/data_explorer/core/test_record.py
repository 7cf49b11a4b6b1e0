from __future__ import annotations

import pytest

from data_explorer.core.exceptions import DatasetSchemaError, LoadError
from data_explorer.core.record import Record, format_number, normalise_year


def _raw(**overrides):
    raw = {
        "topic": "Econ",
        "indicator": "GDP",
        "geography": "US",
        "year": 2020,
        "value": 100,
        "unit": "USD",
    }
    raw.update(overrides)
    return raw


@pytest.mark.parametrize("value", [2020, 2020.0, "2020", " 2020 ", "2020.0"])
def test_normalise_year_accepts_numeric_forms(value):
    assert normalise_year(value) == 2020


@pytest.mark.parametrize("value", ["twenty", 2020.5, True, None, [2020]])
def test_normalise_year_rejects_non_years(value):
    with pytest.raises(ValueError):
        normalise_year(value)


def test_from_raw_normalises_year_string_to_int():
    rec = Record.from_raw(_raw(year="2021"))
    assert rec.year == 2021
    assert isinstance(rec.year, int)


def test_from_raw_parses_numeric_value_string():
    assert Record.from_raw(_raw(value="12.5")).value == 12.5
    assert Record.from_raw(_raw(value="7")).value == 7


def test_from_raw_missing_field_names_index_and_field():
    raw = _raw()
    del raw["unit"]
    with pytest.raises(DatasetSchemaError, match="Record 3: missing field\\(s\\) unit"):
        Record.from_raw(raw, index=3)


def test_from_raw_bad_value_is_a_load_error():
    with pytest.raises(LoadError):
        Record.from_raw(_raw(value="n/a"))


def test_from_raw_rejects_non_object():
    with pytest.raises(DatasetSchemaError, match="expected an object"):
        Record.from_raw(["Econ", "GDP"], index=0)


def test_records_are_frozen():
    rec = Record.from_raw(_raw())
    with pytest.raises(AttributeError):
        rec.value = 5


def test_format_number_drops_integral_decimal():
    assert format_number(100.0) == "100"
    assert format_number(100) == "100"
    assert format_number(1.25) == "1.25"
