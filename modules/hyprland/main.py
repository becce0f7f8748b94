#!/usr/bin/env python3
"""Hyprland module main entry point."""

import logging
import sys

from helpers import ScriptConfig, create_module_parser, get_xdg_config_file
from .ipc import HyprlandIPC, HyprctlWallpaperStore


def create_parser():
    return create_module_parser(
        "hyprland",
        "Hyprland session helpers",
        {
            "lock": {"help": "Lock the session with the active wallpaper as background"},
            "gamemode": {"help": "Toggle gamemode in hyprland.conf and reload"},
            "active-wallpaper": {"help": "Print the active wallpaper path"},
        },
    )


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    config = ScriptConfig("hyprland", args.command)
    config.setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        include_console=args.verbose,
    )

    try:
        ipc = HyprlandIPC()

        if args.command == "lock":
            from .lock import lock
            hyprlock_conf = config.get_config_path_value(
                "hyprlock_conf", get_xdg_config_file("hypr", "hyprlock.conf")
            )
            lock(HyprctlWallpaperStore(ipc), hyprlock_conf)
            return 0

        if args.command == "gamemode":
            from .gamemode import toggle_gamemode
            hyprland_conf = config.get_config_path_value(
                "hyprland_conf", get_xdg_config_file("hypr", "hyprland.conf")
            )
            enabled = toggle_gamemode(hyprland_conf, ipc.reload)
            print("on" if enabled else "off")
            return 0

        if args.command == "active-wallpaper":
            wallpaper = HyprctlWallpaperStore(ipc).get_active()
            if wallpaper is None:
                print("Error: no active wallpaper set", file=sys.stderr)
                return 1
            print(wallpaper)
            return 0

    except (FileNotFoundError, RuntimeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 2


if __name__ == "__main__":
    sys.exit(main())
