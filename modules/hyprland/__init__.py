"""Hyprland module: compositor IPC, lock screen and gamemode."""

from .ipc import HyprlandIPC, HyprctlWallpaperStore, ACTIVE_WALLPAPER_OPTION
from .gamemode import toggle_gamemode, is_gamemode_on

__all__ = [
    "HyprlandIPC",
    "HyprctlWallpaperStore",
    "ACTIVE_WALLPAPER_OPTION",
    "toggle_gamemode",
    "is_gamemode_on",
]
