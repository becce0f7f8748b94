#!/usr/bin/env python3
"""Toggle gamemode by adding/removing a marker line in hyprland.conf."""

import logging
from pathlib import Path
from typing import Callable

from helpers import write_text_atomic

logger = logging.getLogger("gamemode")

GAMEMODE_MARKER = "gmod=1"


def is_gamemode_on(config_path: Path) -> bool:
    if not config_path.exists():
        return False
    return any(line.strip() == GAMEMODE_MARKER for line in config_path.read_text().splitlines())


def toggle_gamemode(config_path: Path, reload: Callable[[], bool]) -> bool:
    """Flip gamemode and reload Hyprland. Returns the new state.

    Raises:
        FileNotFoundError: If hyprland.conf does not exist
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Hyprland config not found: {config_path}")

    lines = config_path.read_text().splitlines()
    if any(line.strip() == GAMEMODE_MARKER for line in lines):
        lines = [line for line in lines if line.strip() != GAMEMODE_MARKER]
        enabled = False
    else:
        lines.append(GAMEMODE_MARKER)
        enabled = True

    write_text_atomic(config_path, "\n".join(lines) + "\n")
    logger.info("Gamemode %s", "enabled" if enabled else "disabled")

    if not reload():
        logger.warning("Hyprland did not acknowledge the reload")
    return enabled
