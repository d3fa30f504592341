# src/geologm/cli/main.py
from __future__ import annotations
import argparse, sys
from importlib import import_module
from typing import Dict, Tuple

try:
    from argcomplete import autocomplete  # optional; CLI still works without it
except ImportError:
    autocomplete = None

# group -> [{ subcmd: (module_path, help_text, prog_string) }, group_help]
COMMANDS: Dict[str, list] = {
    "mat": [
        {
            "logm": ("geologm.cli.mat_logm", "Principal matrix logarithm", "glm mat logm"),
            "expm": ("geologm.cli.mat_expm", "Matrix exponential", "glm mat expm"),
        },
        'matrix functions',
    ],
    "geo": [
        {
            "dist": ("geologm.cli.geo_dist", "Geodesic distance between two rotations", "glm geo dist"),
            "interp": ("geologm.cli.geo_interp", "Geodesic interpolation between two rotations", "glm geo interp"),
        },
        'geodesics on rotation matrices',
    ],
    "wf": [
        {
            "path": ("geologm.cli.wf_path", "Sample a geodesic path from a YAML config", "glm wf path"),
        },
        'workflows'
    ]
}

def _run_leaf(mod_path: str, prog: str, extra: list[str]) -> int:
    """Import the leaf CLI and run it. With no args, show its help."""
    inner = import_module(mod_path).main
    argv = extra or ["--help"]
    return inner(argv=argv, prog=prog)

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(prog="glm", description="geologm command line interface")
    subparsers = parser.add_subparsers(dest="group", required=True)

    # just register group+subcommand names so argcomplete can tab-complete them
    for group, [table, group_help] in COMMANDS.items():
        p_group = subparsers.add_parser(group, help=f"{group_help}")
        sub = p_group.add_subparsers(dest="cmd", required=True)
        for cmd, (mod_path, help_text, prog) in table.items():
            sp = sub.add_parser(cmd, help=help_text, add_help=False)  # no arg defs here
            sp.set_defaults(_mod_path=mod_path, _prog=prog)

    if autocomplete:
        autocomplete(parser)

    args, extra = parser.parse_known_args(argv)
    return _run_leaf(args._mod_path, args._prog, extra)

if __name__ == "__main__":
    raise SystemExit(main())
