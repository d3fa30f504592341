from __future__ import annotations
import argparse

from geologm.cli._matrix_io import read_matrix, write_text
from geologm.cli._parser import add_common_args, setup_logging
from geologm.io.matrix_text import format_matrix
from geologm.kernels.expm import EXPM_METHODS, expm


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog or "glm mat expm",
        description=(
            "Matrix exponential exp(M) by scaling and squaring (real part).\n\n"
            "Methods:\n"
            "  taylor : order-6 Taylor series after scaling (default)\n"
            "  pade   : [6/6] Pade approximant after scaling\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "-i",
        "--input",
        default="-",
        help="Input matrix: path or '-' for stdin (ignored if --M is given).",
    )
    p.add_argument("--M", help="Direct matrix input. Overrides --input.")
    p.add_argument(
        "--method",
        choices=list(EXPM_METHODS),
        default="taylor",
        help="Approximation applied after scaling.",
    )
    add_common_args(p)
    return p


def main(argv=None, prog: str | None = None) -> int:
    parser = build_parser(prog=prog)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    M = read_matrix(args.M, args.input)
    E = expm(M, method=args.method)
    write_text(format_matrix(E.real, precision=args.precision), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
