# src/geologm/cli/wf_path.py
from __future__ import annotations

import argparse
from typing import Sequence

from geologm.cli._parser import setup_logging
from geologm.workflow.path import run_path


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog,
        description=(
            "Geodesic path workflow: sample the interpolation between two "
            "rotations and write interpolants and distances to JSON."
        ),
    )
    p.add_argument(
        "-c",
        "--config",
        default="path.yaml",
        help="Path to the path workflow YAML config (default: path.yaml).",
    )
    p.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file name (overrides 'output' in config).",
    )
    p.add_argument("--debug", action="store_true", help="Verbose logging.")
    return p


def main(
    argv: Sequence[str] | None = None,
    prog: str | None = None,
) -> int:
    parser = build_parser(prog=prog)
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(args.debug)

    run_path(args.config, output=args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
