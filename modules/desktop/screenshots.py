#!/usr/bin/env python3
"""Screenshots with grim: full screen, selected area, active window or first monitor."""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional

from .notify import notify

logger = logging.getLogger("screenshot")

MODES = ("full", "area", "window", "monitor")


def screenshot_path(directory: Path, now: datetime | None = None) -> Path:
    now = now or datetime.now()
    return directory / f"{now:%Y-%m-%d-%H%M%S}.png"


def select_area() -> Optional[str]:
    """Let the user drag a region with slurp. None when cancelled."""
    result = subprocess.run(["slurp"], capture_output=True, text=True, check=False)
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def window_geometry(ipc) -> Optional[str]:
    window = ipc.send_request("activewindow")
    if not isinstance(window, dict) or "at" not in window or "size" not in window:
        return None
    (x, y), (w, h) = window["at"], window["size"]
    return f"{x},{y} {w}x{h}"


def first_monitor(ipc) -> Optional[str]:
    monitors = ipc.send_request("monitors")
    if not isinstance(monitors, list) or not monitors:
        return None
    return monitors[0].get("name")


def build_grim_command(mode: str, output: Path, ipc=None) -> Optional[list[str]]:
    """Return the grim command for ``mode``, or None if the capture was cancelled.

    Raises:
        ValueError: If mode is unknown
        RuntimeError: If the window/monitor cannot be resolved
    """
    if mode not in MODES:
        raise ValueError(f"Unknown screenshot mode: {mode} (expected one of {', '.join(MODES)})")

    if mode == "full":
        return ["grim", str(output)]

    if mode == "area":
        geometry = select_area()
        if geometry is None:
            return None
        return ["grim", "-g", geometry, str(output)]

    if ipc is None:
        raise RuntimeError(f"Screenshot mode '{mode}' needs a running Hyprland session")

    if mode == "window":
        geometry = window_geometry(ipc)
        if geometry is None:
            raise RuntimeError("No active window to capture")
        return ["grim", "-g", geometry, str(output)]

    monitor = first_monitor(ipc)
    if monitor is None:
        raise RuntimeError("No monitor to capture")
    return ["grim", "-o", monitor, str(output)]


def screenshot(mode: str, directory: Path, ipc=None) -> Optional[Path]:
    """Take a screenshot, copy it to the clipboard and notify.

    Returns:
        The saved file, or None if the area selection was cancelled

    Raises:
        subprocess.CalledProcessError: If grim fails
    """
    output = screenshot_path(directory)
    cmd = build_grim_command(mode, output, ipc)
    if cmd is None:
        logger.info("Area selection cancelled")
        return None

    output.parent.mkdir(parents=True, exist_ok=True)
    subprocess.run(cmd, check=True)
    logger.info("Saved screenshot to %s", output)

    with open(output, "rb") as f:
        copied = subprocess.run(["wl-copy", "--type", "image/png"], stdin=f, check=False)
    if copied.returncode != 0:
        logger.warning("Could not copy screenshot to the clipboard")

    notify("Screenshot", f"Saved to {output}", icon="camera-photo")
    return output
