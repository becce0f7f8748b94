#!/usr/bin/env python3
"""Palette extraction from wallpapers via matugen."""

from __future__ import annotations

import json
import logging
import re
import subprocess
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Protocol


ROLES = ("base", "on_base", "accent", "surface", "on_surface")

# palette role -> matugen (Material You) color name
MATUGEN_ROLES = {
    "base": "background",
    "on_base": "on_background",
    "accent": "primary",
    "surface": "surface_container",
    "on_surface": "on_surface",
}

DEFAULT_MODE = "dark"
DEFAULT_SCHEME = "scheme-tonal-spot"

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

logger = logging.getLogger("palette")


@dataclass(frozen=True)
class Palette:
    """Named colors derived from one image, as ``#rrggbb`` strings."""

    base: str
    on_base: str
    accent: str
    surface: str
    on_surface: str

    def __post_init__(self):
        for role in ROLES:
            value = getattr(self, role)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"Palette role '{role}' is not a #rrggbb color: {value!r}")

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


class PaletteExtractor(Protocol):
    def extract(self, image: Path) -> Palette:
        ...


def _lookup_color(colors: dict, name: str, mode: str) -> str:
    """Find a color in matugen's JSON.

    Newer matugen nests ``colors.<name>.<mode>``, older releases
    ``colors.<mode>.<name>``.
    """
    entry = colors.get(name)
    if isinstance(entry, dict) and mode in entry:
        return entry[mode]
    by_mode = colors.get(mode)
    if isinstance(by_mode, dict) and name in by_mode:
        return by_mode[name]
    raise KeyError(name)


def palette_from_matugen(data: dict, mode: str = DEFAULT_MODE) -> Palette:
    """Build a Palette from parsed ``matugen --json hex`` output.

    Raises:
        ValueError: If a role is missing or not a hex color
    """
    colors = data.get("colors")
    if not isinstance(colors, dict):
        raise ValueError("matugen output has no 'colors' table")

    values = {}
    for role, name in MATUGEN_ROLES.items():
        try:
            values[role] = _lookup_color(colors, name, mode)
        except KeyError:
            raise ValueError(f"matugen output is missing color '{name}' ({mode})") from None
    return Palette(**values)


class MatugenExtractor:
    """PaletteExtractor running the matugen CLI in dry-run JSON mode."""

    def __init__(self, mode: str = DEFAULT_MODE, scheme: str = DEFAULT_SCHEME, executable: str = "matugen"):
        self.mode = mode
        self.scheme = scheme
        self.executable = executable

    def build_command(self, image: Path) -> list[str]:
        return [
            self.executable,
            "image",
            str(image),
            "--json",
            "hex",
            "-m",
            self.mode,
            "-t",
            self.scheme,
            "--dry-run",
        ]

    def extract(self, image: Path) -> Palette:
        """Run matugen on ``image`` and return its palette.

        Raises:
            FileNotFoundError: If the image does not exist
            subprocess.CalledProcessError: If matugen fails
            json.JSONDecodeError: If output is not valid JSON
            ValueError: If a palette role is missing
        """
        if not image.exists():
            raise FileNotFoundError(f"Wallpaper file not found: {image}")

        logger.debug("Running matugen on %s (%s, %s)", image, self.mode, self.scheme)
        result = subprocess.run(
            self.build_command(image),
            capture_output=True,
            text=True,
            check=True,
        )

        palette = palette_from_matugen(json.loads(result.stdout), self.mode)
        logger.info("Accent color: %s", palette.accent)
        logger.info("Base color: %s", palette.base)
        return palette
