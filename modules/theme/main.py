#!/usr/bin/env python3
"""Theme module main entry point - routes hook events and commands."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from helpers import ScriptConfig
from .propagate import build_propagator


def active_wallpaper() -> Path:
    from ..hyprland.ipc import HyprlandIPC, HyprctlWallpaperStore

    wallpaper = HyprctlWallpaperStore(HyprlandIPC()).get_active()
    if wallpaper is None:
        raise FileNotFoundError("No active wallpaper set in Hyprland")
    return wallpaper


def main(argv: list[str] | None = None) -> int:
    """Main entry point for theme module."""
    parser = argparse.ArgumentParser(
        prog="theme",
        description="Theme module - regenerate the palette and theme files from a wallpaper"
    )
    parser.add_argument(
        "command",
        choices=["apply", "show", "onWallpaperChanged"],
        help="apply: rewrite theme files (defaults to the active wallpaper); "
             "show: print the extracted palette; onWallpaperChanged: hook alias of apply",
    )
    parser.add_argument(
        "image",
        nargs="?",
        type=Path,
        help="Path to the wallpaper image",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    args = parser.parse_args(argv)

    config = ScriptConfig(module_name="theme", script_name="propagate")
    config.setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        include_console=args.verbose,
    )

    if args.command == "onWallpaperChanged" and args.image is None:
        print("Error: onWallpaperChanged requires wallpaper path", file=sys.stderr)
        return 1
    if args.command == "show" and args.image is None:
        print("Error: show requires wallpaper path", file=sys.stderr)
        return 1

    try:
        image = args.image or active_wallpaper()
        propagator = build_propagator(config)

        if args.command == "show":
            palette = propagator.extractor.extract(image)
            print(json.dumps(palette.as_dict(), indent=2))
            return 0

        propagator.propagate(image)
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
    except Exception as e:
        print(f"Error processing wallpaper: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
