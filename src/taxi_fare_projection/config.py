import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .model import DEFAULT_TRAINER_OPTIONS

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_PATH = PACKAGE_DIR / "taxi-fare-train.csv"

DEFAULTS: Dict[str, Any] = {
    "data_path": str(DEFAULT_DATA_PATH),
    "has_header": "auto",
    "test_fraction": 0.2,
    "seed": 0,
    "log_level": "WARNING",
    "trainer": dict(DEFAULT_TRAINER_OPTIONS),
    "tracking": {
        "enabled": False,
        "tracking_uri": None,
        "experiment_name": "taxi_fare_projection",
        "run_name": "sdca_regression",
    },
}


class ConfigError(ValueError):
    pass


def _merge(base: Dict[str, Any], override: Dict[str, Any], where: str) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key not in base:
            raise ConfigError(f"Unknown config key: {where}{key}")
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ConfigError(f"Config key {where}{key} must be a mapping")
            merged[key] = _merge(base[key], value, f"{where}{key}.")
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Built-in defaults, overlaid with a YAML file when one is given."""
    if path is None:
        return copy.deepcopy(DEFAULTS)

    cfg_path = Path(path)
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Config not found: {cfg_path}")
    loaded = yaml.safe_load(cfg_path.read_text()) or {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config root must be a mapping: {cfg_path}")

    cfg = _merge(DEFAULTS, loaded, "")
    data_path = Path(cfg["data_path"])
    if not data_path.is_absolute():
        cfg["data_path"] = str(cfg_path.parent / data_path)
    if cfg["has_header"] not in (True, False, "auto"):
        raise ConfigError(f"has_header must be true, false or auto (got {cfg['has_header']!r})")
    return cfg
