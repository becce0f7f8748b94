#!/usr/bin/env python3
"""Suite entry point: ``hypr-quickshell <module> [args...]``.

Each module runs in its own interpreter (``python -m modules.<module>.main``)
so logging and config stay per module.
"""

import argparse
import sys

from helpers import build_script_command, get_module_directory, list_modules, run_command


def get_modules_directory():
    """Return the absolute directory containing the script modules."""
    return get_module_directory(__file__)


def create_parser(modules: list[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hypr-quickshell",
        description="Hyprland + Quickshell desktop helper scripts.",
    )
    parser.add_argument("module", choices=modules, help="Module to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the module")
    return parser


def main(argv: list[str] | None = None) -> int:
    modules_dir = get_modules_directory()
    args = create_parser(list_modules(modules_dir)).parse_args(argv)

    try:
        cmd, env = build_script_command(modules_dir / args.module, "main.py", args.args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return run_command(cmd, env)


if __name__ == "__main__":
    sys.exit(main())
