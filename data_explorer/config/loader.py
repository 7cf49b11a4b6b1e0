from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from data_explorer.config.model import GlobalConfig
from data_explorer.core.exceptions import ConfigError
from data_explorer.export.csv_export import CsvQuoting

logger = logging.getLogger(__name__)

ENV_DATA_URL = "DATA_EXPLORER_DATA_URL"
ENV_REQUEST_TIMEOUT = "DATA_EXPLORER_REQUEST_TIMEOUT"
ENV_CSV_QUOTING = "DATA_EXPLORER_CSV_QUOTING"


def _parse_timeout(raw: Any) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"request_timeout must be a number, got {raw!r}")
    if timeout <= 0:
        raise ConfigError(f"request_timeout must be positive, got {timeout}")
    return timeout


def _parse_quoting(raw: Any) -> CsvQuoting:
    try:
        return CsvQuoting(str(raw).lower())
    except ValueError:
        allowed = ", ".join(q.value for q in CsvQuoting)
        raise ConfigError(f"csv_quoting must be one of: {allowed}; got {raw!r}")


def _resolve_data_url(raw: str, root: Path) -> str:
    if raw.lower().startswith(("http://", "https://")):
        return raw
    path = Path(raw)
    if path.is_absolute():
        return str(path)
    return str((root / path).resolve())


def load_global_config(
    root: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> GlobalConfig:
    """
    Load <root>/global.json (optional) and apply environment overrides.

    Selection order for each setting:
        1) environment variable (DATA_EXPLORER_*)
        2) global.json
        3) GlobalConfig default

    A relative data_url from global.json resolves against the config root;
    a relative DATA_EXPLORER_DATA_URL resolves against the working directory.
    """
    env = os.environ if environ is None else environ
    root = Path(root)

    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    raw: Dict[str, Any] = {}
    if global_path.is_file():
        try:
            with global_path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except ValueError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning(f"No global.json found at {global_path}; using defaults")

    defaults = GlobalConfig()

    env_data_url = env.get(ENV_DATA_URL)
    if env_data_url:
        data_url = _resolve_data_url(env_data_url, Path.cwd())
    else:
        data_url = _resolve_data_url(str(raw.get("data_url") or defaults.data_url), root)
    timeout_raw = env.get(ENV_REQUEST_TIMEOUT) or raw.get("request_timeout", defaults.request_timeout)
    quoting_raw = env.get(ENV_CSV_QUOTING) or raw.get("csv_quoting", defaults.csv_quoting.value)

    csv_filename = raw.get("csv_filename", defaults.csv_filename)
    if not isinstance(csv_filename, str) or not csv_filename.strip():
        raise ConfigError(f"csv_filename must be a non-empty string, got {csv_filename!r}")

    return GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        data_url=data_url,
        request_timeout=_parse_timeout(timeout_raw),
        csv_filename=csv_filename,
        csv_quoting=_parse_quoting(quoting_raw),
        source_path=global_path if global_path.is_file() else None,
    )
