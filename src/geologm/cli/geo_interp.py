from __future__ import annotations
import argparse

from geologm.cli._matrix_io import write_text
from geologm.cli._parser import _parse_float_list, add_common_args, add_strategy_arg, setup_logging
from geologm.geodesic import geodesic_path
from geologm.io.matrix_text import format_matrix, parse_matrix
from geologm.kernels.expm import EXPM_METHODS


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog or "glm geo interp",
        description=(
            "Geodesic interpolation C(t) = A exp(t log(A^T B)).\n\n"
            "One output line per t value; t = 0 gives A, t = 1 gives B.\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--A", required=True, help="Start matrix: 'A11 A12; A21 A22'.")
    p.add_argument("--B", required=True, help="End matrix, same dimension as A.")
    p.add_argument(
        "-t",
        type=_parse_float_list,
        default=[0.5],
        help="Interpolation parameter(s), comma separated (default: 0.5). Not clamped to [0, 1].",
    )
    add_strategy_arg(p)
    p.add_argument(
        "--method",
        choices=list(EXPM_METHODS),
        default="taylor",
        help="Exponential approximation.",
    )
    add_common_args(p)
    return p


def main(argv=None, prog: str | None = None) -> int:
    parser = build_parser(prog=prog)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    frames = geodesic_path(
        parse_matrix(args.A),
        parse_matrix(args.B),
        args.t,
        strategy=args.strategy,
        expm_method=args.method,
    )
    out = "\n".join(format_matrix(C, precision=args.precision) for C in frames)
    write_text(out, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
