from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import requests

from .dataset import Dataset
from .exceptions import LoadError
from .record import Record

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_json(url: str, timeout: float) -> Any:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        logger.error("Failed to fetch dataset", extra={"source": url, "error": str(e)})
        raise LoadError(f"Could not fetch dataset from {url}: {e}") from e

    try:
        return r.json()
    except ValueError as e:
        logger.error("Dataset response is not valid JSON", extra={"source": url})
        raise LoadError(f"Dataset at {url} is not valid JSON: {e}") from e


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise LoadError(f"Dataset file not found at {path}")

    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to read dataset file", extra={"source": str(path), "error": str(e)})
        raise LoadError(f"Could not read dataset file {path}: {e}") from e


def parse_records(raw: Any) -> List[Record]:
    """
    Turn decoded JSON into Records. The top level must be an array of objects.
    """
    if not isinstance(raw, list):
        raise LoadError(
            f"Dataset must be a JSON array of records, got {type(raw).__name__}"
        )
    return [Record.from_raw(item, index=i) for i, item in enumerate(raw)]


def load_dataset(
    source: Union[str, Path],
    timeout: float = DEFAULT_TIMEOUT,
    name: Optional[str] = None,
) -> Dataset:
    """
    Fetch (http/https) or read (local path) the dataset and build a Dataset.

    Raises:
        LoadError: on any fetch/read/parse failure (DatasetSchemaError for bad records)
    """
    source_str = str(source)
    logger.info("dataset_load_start", extra={"source": source_str})

    if _is_url(source_str):
        raw = _fetch_json(source_str, timeout)
    else:
        raw = _read_json(Path(source_str))

    records = parse_records(raw)

    logger.info(
        "dataset_load_done",
        extra={"source": source_str, "n_records": len(records)},
    )

    return Dataset(records, name=name or "Dataset", source=source_str)
