from __future__ import annotations
import argparse
import logging

import numpy as np

from geologm.cli._matrix_io import read_matrix, write_text
from geologm.cli._parser import add_common_args, add_strategy_arg, setup_logging
from geologm.io.matrix_text import format_complex_matrix, format_matrix
from geologm.kernels.logm import logm

LOG = logging.getLogger("glm.cli.logm")


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog or "glm mat logm",
        description=(
            "Principal matrix logarithm L = log(M) of a real square matrix.\n\n"
            "Input sources:\n"
            "  • --M \"...\"       direct matrix specification\n"
            "  • --input <file>   path or '-' for stdin\n\n"
            "  accepted format: 'M11 M12; M21 M22' or n*n space-separated numbers.\n\n"
            "Output:\n"
            "  default   : real part, 'L11 L12; L21 L22'\n"
            "  --complex : entries as 're+imj'\n"
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
    add_strategy_arg(p)
    p.add_argument(
        "--complex",
        action="store_true",
        help="Write complex entries instead of real parts.",
    )
    add_common_args(p)
    return p


def main(argv=None, prog: str | None = None) -> int:
    parser = build_parser(prog=prog)
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    M = read_matrix(args.M, args.input)
    L = logm(M, strategy=args.strategy)

    residue = float(np.max(np.abs(L.imag))) if L.size else 0.0
    LOG.debug("max |imag| of log = %.3e", residue)

    if args.complex:
        out = format_complex_matrix(L, precision=args.precision)
    else:
        out = format_matrix(L.real, precision=args.precision)

    write_text(out, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
