from __future__ import annotations

import json
from pathlib import Path

import pytest
import requests

from data_explorer.core import dataset_loader
from data_explorer.core.dataset_loader import load_dataset, parse_records
from data_explorer.core.exceptions import DatasetSchemaError, LoadError

SAMPLE = [
    {"topic": "Econ", "indicator": "GDP", "geography": "US", "year": 2020, "value": 100, "unit": "USD"},
    {"topic": "Econ", "indicator": "GDP", "geography": "US", "year": "2021", "value": 110, "unit": "USD"},
]


class _FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self._payload = payload
        self.status_code = status_code
        self._bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._payload


def _write_json(tmp_path: Path, payload) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(payload))
    return path


def test_load_dataset_from_local_file(tmp_path):
    path = _write_json(tmp_path, SAMPLE)

    ds = load_dataset(path, name="Sample")

    assert ds.name == "Sample"
    assert len(ds) == 2
    assert [r.year for r in ds.records] == [2020, 2021]
    assert ds.source == str(path)


def test_load_dataset_from_url(monkeypatch):
    calls = {}

    def fake_get(url, timeout):
        calls["url"] = url
        calls["timeout"] = timeout
        return _FakeResponse(SAMPLE)

    monkeypatch.setattr(dataset_loader.requests, "get", fake_get)

    ds = load_dataset("https://example.org/data.json", timeout=5)

    assert len(ds) == 2
    assert calls == {"url": "https://example.org/data.json", "timeout": 5}


def test_network_failure_is_load_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(dataset_loader.requests, "get", fake_get)

    with pytest.raises(LoadError, match="Could not fetch dataset"):
        load_dataset("https://example.org/data.json")


def test_http_error_status_is_load_error(monkeypatch):
    monkeypatch.setattr(
        dataset_loader.requests, "get", lambda url, timeout: _FakeResponse(status_code=404)
    )
    with pytest.raises(LoadError):
        load_dataset("https://example.org/missing.json")


def test_invalid_json_response_is_load_error(monkeypatch):
    monkeypatch.setattr(
        dataset_loader.requests, "get", lambda url, timeout: _FakeResponse(bad_json=True)
    )
    with pytest.raises(LoadError, match="not valid JSON"):
        load_dataset("https://example.org/data.json")


def test_missing_file_is_load_error(tmp_path):
    with pytest.raises(LoadError, match="not found"):
        load_dataset(tmp_path / "nope.json")


def test_invalid_json_file_is_load_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{not json")
    with pytest.raises(LoadError):
        load_dataset(path)


def test_top_level_must_be_array():
    with pytest.raises(LoadError, match="JSON array"):
        parse_records({"records": SAMPLE})


def test_bad_record_is_schema_error(tmp_path):
    bad = SAMPLE + [{"topic": "Econ", "indicator": "GDP", "geography": "US", "year": "soon", "value": 1, "unit": "USD"}]
    path = _write_json(tmp_path, bad)
    with pytest.raises(DatasetSchemaError, match="Record 2"):
        load_dataset(path)


def test_empty_array_loads_empty_dataset(tmp_path):
    ds = load_dataset(_write_json(tmp_path, []))
    assert len(ds) == 0
    assert ds.topic_options() == []
