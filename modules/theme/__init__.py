"""Theme module for wallpaper-based palette propagation."""

from .palette import Palette, MatugenExtractor, palette_from_matugen, ROLES
from .targets import ThemeTarget, default_targets, select_targets
from .propagate import PalettePropagator, QuickshellReload, build_propagator

__all__ = [
    "Palette",
    "MatugenExtractor",
    "palette_from_matugen",
    "ROLES",
    "ThemeTarget",
    "default_targets",
    "select_targets",
    "PalettePropagator",
    "QuickshellReload",
    "build_propagator",
]
