"""Quickshell module: show the launcher, wallpaper selector and AI sidebar."""

from .panels import PANELS, build_show_command, show_panel

__all__ = ["PANELS", "build_show_command", "show_panel"]
