#!/usr/bin/env python3
"""Desktop module main entry point - notifications and screenshots."""

import logging
import subprocess
import sys
from pathlib import Path

from helpers import ScriptConfig, create_module_parser
from .notify import DEFAULT_ICON, notify
from .screenshots import MODES, screenshot


DEFAULT_SCREENSHOT_DIR = "~/Pictures/screenshots"


def create_parser():
    return create_module_parser(
        "desktop",
        "Desktop helpers: OSD pop-ups and screenshots",
        {
            "notify": {
                "help": "Show an OSD notification",
                "arguments": [
                    (["title"], {"help": "Notification title"}),
                    (["body"], {"nargs": "?", "default": "", "help": "Notification body"}),
                    (["icon"], {"nargs": "?", "default": DEFAULT_ICON, "help": "Icon name"}),
                ],
            },
            "screenshot": {
                "help": "Take a screenshot and copy it to the clipboard",
                "arguments": [
                    (["mode"], {"choices": MODES, "help": "What to capture"}),
                    (["--dir"], {"type": Path, "default": None, "help": "Output directory"}),
                ],
            },
        },
    )


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    config = ScriptConfig("desktop", args.command)
    config.setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        include_console=args.verbose,
    )

    if args.command == "notify":
        return 0 if notify(args.title, args.body, args.icon) else 1

    directory = args.dir or config.get_config_path_value("screenshot_dir", DEFAULT_SCREENSHOT_DIR)

    ipc = None
    if args.mode in ("window", "monitor"):
        from ..hyprland.ipc import HyprlandIPC
        try:
            ipc = HyprlandIPC()
        except RuntimeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        saved = screenshot(args.mode, directory, ipc)
    except subprocess.CalledProcessError as e:
        print(f"Error: Command failed: {e.cmd}", file=sys.stderr)
        return e.returncode
    except (RuntimeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if saved is not None:
        print(saved)
    return 0


if __name__ == "__main__":
    sys.exit(main())
