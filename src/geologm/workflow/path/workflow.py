# src/geologm/workflow/path/workflow.py
from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np

from geologm.geodesic import geodesic_distance, geodesic_path
from geologm.kernels.algebra import frobenius, is_orthogonal

from .config import Config, load_config

LOG = logging.getLogger("glm.workflow.path")


def _validate(cfg: Config) -> None:
    if not cfg.check_orthogonal:
        return
    for name, M in (("start", cfg.start), ("end", cfg.end)):
        if not is_orthogonal(M, tol=1e-6):
            raise ValueError(
                f"Config '{name}' is not orthogonal (set check_orthogonal: false to allow)."
            )


def _frame_record(t: float, C: np.ndarray, cfg: Config, diagnostics: list[str]) -> dict:
    n = C.shape[0]
    return {
        "t": t,
        "matrix": np.round(C, cfg.precision).tolist(),
        "dist_start": geodesic_distance(cfg.start, C, cfg.strategy, notify=diagnostics.append),
        "dist_end": geodesic_distance(C, cfg.end, cfg.strategy, notify=diagnostics.append),
        "orth_residual": frobenius(C.T @ C - np.eye(n)),
    }


def run_path(config_path: str | Path, output: str | Path | None = None) -> dict:
    """
    Sample the geodesic between cfg.start and cfg.end.

    Side effects:
    - Writes a JSON file (cfg.output, or `output` if given) with one record
      per t: interpolant, distances to both ends, orthogonality residual.
    - Fallback diagnostics from the logarithm are logged and stored in the
      payload under "diagnostics".
    """
    cfg = load_config(config_path)
    _validate(cfg)

    diagnostics: list[str] = []
    frames = geodesic_path(
        cfg.start,
        cfg.end,
        cfg.ts,
        strategy=cfg.strategy,
        notify=diagnostics.append,
        expm_method=cfg.expm_method,
    )
    records = [_frame_record(t, C, cfg, diagnostics) for t, C in zip(cfg.ts, frames)]
    total = geodesic_distance(cfg.start, cfg.end, cfg.strategy, notify=diagnostics.append)

    for msg in dict.fromkeys(diagnostics):
        LOG.warning(msg)

    payload = {
        "n": int(cfg.start.shape[0]),
        "strategy": cfg.strategy,
        "expm_method": cfg.expm_method,
        "distance": total,
        "frames": records,
        "diagnostics": list(dict.fromkeys(diagnostics)),
    }

    out = Path(output) if output is not None else cfg.output
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    LOG.info("wrote %d frames to %s (distance %.6g)", len(records), out, total)
    return payload
