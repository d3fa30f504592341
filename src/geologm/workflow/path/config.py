# src/geologm/workflow/path/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np
import yaml

from geologm.io.matrix_text import matrix_from_value
from geologm.kernels.expm import EXPM_METHODS
from geologm.kernels.logm import available_strategies


@dataclass(slots=True)
class Config:
    start: np.ndarray
    end: np.ndarray
    ts: List[float]
    strategy: str
    expm_method: str
    output: Path
    check_orthogonal: bool
    precision: int


def _ts_from_cfg(cfg: dict) -> List[float]:
    if "ts" in cfg:
        if not isinstance(cfg["ts"], (list, tuple)):
            raise ValueError(f"Config 'ts' must be a list of floats, got {cfg['ts']!r}.")
        ts = [float(t) for t in cfg["ts"]]
        if not ts:
            raise ValueError("Config 'ts' is empty.")
        return ts
    steps = int(cfg.get("steps", 11))
    if steps < 2:
        raise ValueError(f"Config 'steps' must be >= 2, got {steps}.")
    return [float(t) for t in np.linspace(0.0, 1.0, steps)]


def _bool_from_cfg(cfg: dict, key: str, default: bool) -> bool:
    value = cfg.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Config '{key}' must be true or false, got {value!r}.")
    return value


def load_config(path: str | Path) -> Config:
    p = Path(path)
    cfg = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {p} must be a YAML mapping.")

    for key in ("start", "end"):
        if key not in cfg:
            raise ValueError(f"Config is missing required key '{key}'.")
    start = matrix_from_value(cfg["start"], "start")
    end = matrix_from_value(cfg["end"], "end")
    if start.shape != end.shape:
        raise ValueError(f"'start' and 'end' differ in shape: {start.shape} vs {end.shape}.")

    strategy = str(cfg.get("strategy", "general"))
    if strategy not in available_strategies():
        raise ValueError(f"Unknown strategy '{strategy}'. Available: {available_strategies()}")

    expm_method = str(cfg.get("expm_method", "taylor"))
    if expm_method not in EXPM_METHODS:
        raise ValueError(f"Unknown expm_method '{expm_method}'. Available: {list(EXPM_METHODS)}")

    return Config(
        start=start,
        end=end,
        ts=_ts_from_cfg(cfg),
        strategy=strategy,
        expm_method=expm_method,
        output=Path(cfg.get("output", "path.json")),
        check_orthogonal=_bool_from_cfg(cfg, "check_orthogonal", True),
        precision=int(cfg.get("precision", 12)),
    )
