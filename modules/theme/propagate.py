#!/usr/bin/env python3
"""Propagate a wallpaper's palette into every downstream theme file."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from helpers import ScriptConfig, write_text_atomic
from .palette import DEFAULT_MODE, DEFAULT_SCHEME, MatugenExtractor, Palette, PaletteExtractor
from .targets import ThemeTarget, select_targets


logger = logging.getLogger("theme")


class UIReloadSignal(Protocol):
    def reload(self) -> None:
        ...


class QuickshellReload:
    """Ask running Quickshell instances to reload their QML (SIGUSR1).

    No running process is not an error.
    """

    def __init__(self, process_name: str = "quickshell"):
        self.process_name = process_name

    def reload(self) -> None:
        try:
            result = subprocess.run(
                ["pkill", "-USR1", "-x", self.process_name],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("Could not signal %s: %s", self.process_name, e)
            return

        if result.returncode == 0:
            logger.info("Signalled %s to reload", self.process_name)
        else:
            logger.debug("No %s process to signal", self.process_name)


class PalettePropagator:
    """Extract a palette from an image and rewrite every target with it.

    Targets are written in order; a failed write stops the run, leaving the
    files written so far on the new palette and the rest on the old one.
    """

    def __init__(self, extractor: PaletteExtractor, targets: list[ThemeTarget], reloader: UIReloadSignal):
        self.extractor = extractor
        self.targets = targets
        self.reloader = reloader

    def write_targets(self, palette: Palette) -> None:
        for target in self.targets:
            logger.debug("Writing %s theme to %s", target.name, target.path)
            write_text_atomic(target.path, target.render(palette))

    def propagate(self, image: Path) -> Palette:
        logger.info("Propagating palette from %s", image)
        palette = self.extractor.extract(image)
        self.write_targets(palette)
        self.reloader.reload()
        logger.info("Palette applied to %d theme files", len(self.targets))
        return palette


def build_propagator(config: ScriptConfig) -> PalettePropagator:
    """Build the matugen/quickshell propagator from the theme configuration."""
    extractor = MatugenExtractor(
        mode=config.get_config_value_checked("matugen_mode", DEFAULT_MODE, require_str=True),
        scheme=config.get_config_value_checked("matugen_scheme", DEFAULT_SCHEME, require_str=True),
    )
    targets = select_targets(config.get_config_value("targets"))
    return PalettePropagator(extractor, targets, QuickshellReload())
