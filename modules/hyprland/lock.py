#!/usr/bin/env python3
"""Lock the session with hyprlock, using the active wallpaper as background."""

import logging
import os
from pathlib import Path

logger = logging.getLogger("lock")


def build_lock_command(config_path: Path, wallpaper: Path | None) -> list[str]:
    cmd = ["hyprlock", "-c", str(config_path)]
    if wallpaper is not None:
        cmd += ["-b", str(wallpaper)]
    return cmd


def lock(store, config_path: Path) -> None:
    """Replace the current process with hyprlock. Does not return on success."""
    wallpaper = store.get_active()
    if wallpaper is None:
        logger.warning("No active wallpaper, locking without background")
    cmd = build_lock_command(config_path, wallpaper)
    logger.info("Locking: %s", " ".join(cmd))
    os.execvp(cmd[0], cmd)
