#!/usr/bin/env python3
"""Wallpaper module main entry point - rotate, set and list wallpapers."""

import json
import logging
import subprocess
import sys
from pathlib import Path

from helpers import ScriptConfig, create_module_parser
from ..hyprland.ipc import HyprlandIPC, HyprctlWallpaperStore
from ..theme.propagate import build_propagator
from .rotator import DIRECTIONS, apply, list_wallpapers, rotate


DEFAULT_WALLPAPER_DIR = "~/Pictures/wallpaper"

DIR_ARGUMENT = (["--dir"], {"type": Path, "default": None, "help": "Wallpaper directory (overrides config)"})


def create_parser():
    subcommands = {
        direction: {
            "help": f"Switch to the {direction} wallpaper",
            "arguments": [DIR_ARGUMENT],
        }
        for direction in DIRECTIONS
    }
    subcommands["set"] = {
        "help": "Switch to a specific wallpaper",
        "arguments": [(["wallpaper"], {"type": Path, "help": "Path to the wallpaper image"})],
    }
    subcommands["list"] = {
        "help": "List the wallpapers in rotation order",
        "arguments": [DIR_ARGUMENT],
    }
    return create_module_parser("wallpaper", "Wallpaper rotation and theming", subcommands)


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    config = ScriptConfig("wallpaper", "rotate")
    config.setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        include_console=args.verbose,
    )

    wallpaper_dir = getattr(args, "dir", None) or config.get_config_path_value(
        "wallpaper_dir", DEFAULT_WALLPAPER_DIR
    )
    # Paths end up in compositor state read from other working directories
    wallpaper_dir = wallpaper_dir.expanduser().absolute()

    if args.command == "list":
        for wallpaper in list_wallpapers(wallpaper_dir):
            print(wallpaper)
        return 0

    try:
        store = HyprctlWallpaperStore(HyprlandIPC())
        propagator = build_propagator(ScriptConfig("theme", "propagate"))

        if args.command == "set":
            apply(args.wallpaper, store, propagator)
        else:
            rotate(args.command, wallpaper_dir, store, propagator)
        return 0
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except subprocess.CalledProcessError as e:
        print(f"Error: Command failed: {e.cmd}", file=sys.stderr)
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        return e.returncode
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON output: {e}", file=sys.stderr)
        return 1
    except (RuntimeError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
