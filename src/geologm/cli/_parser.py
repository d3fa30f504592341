import argparse
import logging

from geologm.kernels.logm import available_strategies


def _parse_float_list(s: str) -> list[float]:
    xs = [x.strip() for x in s.split(",") if x.strip()]
    if not xs:
        raise argparse.ArgumentTypeError("Expected comma-separated floats, e.g. '0,0.5,1'")
    try:
        return [float(x) for x in xs]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def add_strategy_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--strategy",
        choices=available_strategies(),
        default="general",
        help=(
            "Logarithm strategy: 'general' (scaling and squaring), "
            "'schur' (real Schur, 2x2 blocks), 'schur-complex' (diagonal complex Schur)."
        ),
    )


def add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-o",
        "--output",
        default="-",
        help="Output target: path or '-' for stdout (default: '-').",
    )
    p.add_argument(
        "--precision",
        type=int,
        default=12,
        help="Decimal digits in the output.",
    )
    p.add_argument("--debug", action="store_true", help="Verbose logging.")


def setup_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format="%(levelname)s: %(message)s")
