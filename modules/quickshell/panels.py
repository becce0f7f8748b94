#!/usr/bin/env python3
"""Show Quickshell panels (launcher, wallpaper selector, AI sidebar) over D-Bus."""

import logging
import subprocess

logger = logging.getLogger("quickshell")

# QML object ids of the toggleable panels
PANELS = ("launcher", "wallpaperSelector", "aiSidebar")

QDBUS_SERVICE = "org.kde.quickshell"
QDBUS_PATH = "/org/kde/quickshell"
QDBUS_EVAL = "org.kde.quickshell.Eval"


def build_show_command(panel: str) -> list[str]:
    """Return the qdbus command that makes ``panel`` visible and focused.

    Raises:
        ValueError: If panel is unknown
    """
    if panel not in PANELS:
        raise ValueError(f"Unknown panel: {panel} (expected one of {', '.join(PANELS)})")
    expression = f"{panel}.visible = true; {panel}.forceActiveFocus()"
    return ["qdbus", QDBUS_SERVICE, QDBUS_PATH, QDBUS_EVAL, expression]


def show_panel(panel: str) -> None:
    """Show a panel in the running Quickshell instance.

    Raises:
        ValueError: If panel is unknown
        subprocess.CalledProcessError: If qdbus fails (e.g. Quickshell not running)
        FileNotFoundError: If qdbus is not installed
    """
    cmd = build_show_command(panel)
    logger.debug("Running: %s", " ".join(cmd))
    subprocess.run(cmd, capture_output=True, text=True, check=True)
    logger.info("Showing %s", panel)
