from __future__ import annotations
import argparse

from geologm.cli._matrix_io import write_text
from geologm.cli._parser import add_common_args, add_strategy_arg, setup_logging
from geologm.geodesic import geodesic_distance
from geologm.io.matrix_text import parse_matrix


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog or "glm geo dist",
        description="Geodesic distance d(R, T) = ||log(R^T T)||_F between two rotations.",
    )
    p.add_argument("--R", required=True, help="First matrix: 'R11 R12; R21 R22'.")
    p.add_argument("--T", required=True, help="Second matrix, same dimension as R.")
    add_strategy_arg(p)
    add_common_args(p)
    return p


def main(argv=None, prog: str | None = None) -> int:
    parser = build_parser(prog=prog)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    d = geodesic_distance(parse_matrix(args.R), parse_matrix(args.T), strategy=args.strategy)
    write_text(f"{d:.{args.precision}g}", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
