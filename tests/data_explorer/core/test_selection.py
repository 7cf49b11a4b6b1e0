from __future__ import annotations

import pytest

from data_explorer.core.selection import ALL_YEARS, Selection


def test_selection_to_from_dict_roundtrip():
    sel = Selection(topic="Econ", indicator="GDP", geography="US", year=2020)
    assert Selection.from_dict(sel.to_dict()) == sel


def test_from_dict_normalises_text_year():
    sel = Selection.from_dict({"topic": "Econ", "year": "2021"})
    assert sel.year == 2021
    assert not sel.all_years


def test_from_dict_missing_year_means_all():
    assert Selection.from_dict({}).year == ALL_YEARS
    assert Selection.from_dict(None).all_years


def test_from_dict_rejects_garbage_year():
    with pytest.raises(ValueError):
        Selection.from_dict({"year": "last year"})
