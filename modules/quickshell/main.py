#!/usr/bin/env python3
"""Quickshell module main entry point - panel toggles bound to keys."""

import logging
import subprocess
import sys

from helpers import ScriptConfig, create_module_parser
from .panels import PANELS, show_panel


def create_parser():
    return create_module_parser(
        "quickshell",
        "Quickshell panel helpers",
        {
            "show": {
                "help": "Show and focus a panel",
                "arguments": [(["panel"], {"choices": PANELS, "help": "Panel to show"})],
            },
        },
    )


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    config = ScriptConfig("quickshell", "show")
    config.setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        include_console=args.verbose,
    )

    try:
        show_panel(args.panel)
        return 0
    except subprocess.CalledProcessError as e:
        print(f"Error: Command failed: {e.cmd}", file=sys.stderr)
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        return e.returncode
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
