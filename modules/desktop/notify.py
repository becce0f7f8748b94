#!/usr/bin/env python3
"""User-visible pop-ups (OSD) through the notification daemon."""

import logging
import subprocess

logger = logging.getLogger("notify")

DEFAULT_ICON = "dialog-information"
DEFAULT_TIMEOUT_MS = 1500


def notify(title: str, body: str = "", icon: str = DEFAULT_ICON, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> bool:
    """Show a notification. Failures are logged, never raised.

    Returns:
        True if notify-send succeeded
    """
    cmd = ["notify-send", "-i", icon, "-t", str(timeout_ms), title, body]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        logger.warning("Could not run notify-send: %s", e)
        return False

    if result.returncode != 0:
        logger.warning("notify-send failed: %s", result.stderr.strip())
        return False
    return True
