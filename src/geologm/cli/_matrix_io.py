from __future__ import annotations
from pathlib import Path
import sys

import numpy as np

from geologm.io.matrix_text import parse_matrix


def read_matrix(direct: str | None, source: str = "-") -> np.ndarray:
    """Matrix from a direct string if given, else from a path or '-' (stdin)."""
    if direct is not None:
        text = direct
    elif source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return parse_matrix(text)


def write_text(out: str, target: str) -> None:
    if not out.endswith("\n"):
        out += "\n"
    if target == "-":
        sys.stdout.write(out)
    else:
        Path(target).write_text(out, encoding="utf-8")
