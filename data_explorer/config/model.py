from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from data_explorer.export.csv_export import DEFAULT_CSV_FILENAME, CsvQuoting

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/danghenry/dataprojects/refs/heads/main/sample_app_data.json"
)


@dataclass
class GlobalConfig:
    """
    App-wide settings parsed from global.json plus environment overrides.

    data_url may be an http(s) URL or a local path; relative paths are
    resolved against the config root by the loader.
    """
    ui_title: str = "Dataset Explorer"
    subtitle: str = "Filter, chart and export indicator data"
    data_url: str = DEFAULT_DATA_URL
    request_timeout: float = 30.0
    csv_filename: str = DEFAULT_CSV_FILENAME
    csv_quoting: CsvQuoting = CsvQuoting.NONE
    source_path: Optional[Path] = None
