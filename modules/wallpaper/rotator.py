#!/usr/bin/env python3
"""Wallpaper rotation: pick the next, previous or a random wallpaper and apply it."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional, Protocol


IMAGE_SUFFIXES: frozenset[str] = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".webp",
    }
)

DIRECTIONS = ("next", "previous", "random")

logger = logging.getLogger("wallpaper")


class WallpaperStore(Protocol):
    def get_active(self) -> Optional[Path]:
        ...

    def set_active(self, wallpaper: Path) -> None:
        ...


class Propagator(Protocol):
    def propagate(self, image: Path) -> object:
        ...


def list_wallpapers(directory: Path) -> list[Path]:
    """Return the image files directly inside ``directory``, ordered by name.

    A missing directory yields an empty list.
    """
    if not directory.is_dir():
        return []

    images: list[Path] = []
    for child in directory.iterdir():
        if not child.is_file():
            continue
        if child.suffix.lower() not in IMAGE_SUFFIXES:
            continue
        images.append(child)

    return sorted(images, key=lambda p: (p.name.casefold(), p.name))


def find_index(wallpapers: list[Path], active: Optional[Path]) -> Optional[int]:
    """Index of ``active`` in ``wallpapers`` by exact path match, or None."""
    if active is None:
        return None
    for i, wallpaper in enumerate(wallpapers):
        if wallpaper == active:
            return i
    return None


def step_index(
    current: Optional[int],
    count: int,
    direction: str,
    rng: random.Random | None = None,
) -> int:
    """Compute the wallpaper index to switch to.

    ``current`` is None when the active wallpaper is not in the set; next and
    previous then start over at index 0. Random ignores ``current`` and may
    pick it again.

    Raises:
        ValueError: If count < 1 or direction is unknown
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction} (expected one of {', '.join(DIRECTIONS)})")

    if direction == "random":
        return (rng or random).randrange(count)
    if current is None:
        return 0
    if direction == "next":
        return (current + 1) % count
    return (current - 1 + count) % count


def apply(wallpaper: Path, store: WallpaperStore, propagator: Propagator) -> Path:
    """Make ``wallpaper`` active and regenerate the theme from it.

    Raises:
        FileNotFoundError: If the wallpaper does not exist
    """
    wallpaper = wallpaper.expanduser().absolute()
    if not wallpaper.is_file():
        raise FileNotFoundError(f"Wallpaper file not found: {wallpaper}")

    store.set_active(wallpaper)
    logger.info("Active wallpaper: %s", wallpaper)
    propagator.propagate(wallpaper)
    return wallpaper


def rotate(
    direction: str,
    wallpaper_dir: Path,
    store: WallpaperStore,
    propagator: Propagator,
    rng: random.Random | None = None,
) -> Optional[Path]:
    """Switch to the next/previous/random wallpaper in ``wallpaper_dir``.

    Returns the new wallpaper, or None when the directory holds no images.
    Relative paths are resolved against the working directory first.

    Raises:
        ValueError: If direction is unknown
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction} (expected one of {', '.join(DIRECTIONS)})")

    wallpaper_dir = wallpaper_dir.expanduser().absolute()
    wallpapers = list_wallpapers(wallpaper_dir)
    if not wallpapers:
        logger.info("No wallpapers in %s, nothing to do", wallpaper_dir)
        return None

    current = None
    if direction != "random":
        active = store.get_active()
        current = find_index(wallpapers, active)
        if current is None:
            logger.warning("Active wallpaper %s is not in %s, starting from the first one", active, wallpaper_dir)

    index = step_index(current, len(wallpapers), direction, rng)
    logger.debug("Rotating %s: %s -> %d of %d", direction, current, index, len(wallpapers))
    return apply(wallpapers[index], store, propagator)
