#!/usr/bin/env python3
"""Downstream theme files: each one holds a copy of the palette in its own syntax."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from helpers import get_xdg_config_file
from .palette import Palette


@dataclass(frozen=True)
class ThemeTarget:
    """One file rewritten wholesale on every propagation."""

    name: str
    path: Path
    render: Callable[[Palette], str]


def render_palette_cache(palette: Palette) -> str:
    return json.dumps({"scheme": palette.as_dict()}, indent=2) + "\n"


def render_gtk_css(palette: Palette) -> str:
    colors = {
        "window_bg_color": palette.base,
        "window_fg_color": palette.on_base,
        "view_bg_color": palette.surface,
        "view_fg_color": palette.on_surface,
        "headerbar_bg_color": palette.surface,
        "headerbar_fg_color": palette.on_surface,
        "accent_color": palette.accent,
        "accent_bg_color": palette.accent,
        "theme_bg_color": palette.base,
        "theme_fg_color": palette.on_base,
        "theme_selected_bg_color": palette.accent,
    }
    lines = ["/* Generated from the wallpaper palette, overwritten on every change */"]
    lines += [f"@define-color {name} {value};" for name, value in colors.items()]
    return "\n".join(lines) + "\n"


def render_kvantum(palette: Palette) -> str:
    return (
        "[%General]\n"
        "author=matugen\n"
        "\n"
        "[GeneralColors]\n"
        f"window.color={palette.base}\n"
        f"base.color={palette.surface}\n"
        f"alt.base.color={palette.surface}\n"
        f"button.color={palette.surface}\n"
        f"light.color={palette.surface}\n"
        f"text.color={palette.on_base}\n"
        f"window.text.color={palette.on_base}\n"
        f"button.text.color={palette.on_surface}\n"
        f"highlight.color={palette.accent}\n"
        f"highlight.text.color={palette.base}\n"
    )


def render_btop(palette: Palette) -> str:
    keys = {
        "main_bg": palette.base,
        "main_fg": palette.on_base,
        "title": palette.on_base,
        "hi_fg": palette.accent,
        "selected_bg": palette.surface,
        "selected_fg": palette.on_surface,
        "inactive_fg": palette.on_surface,
        "proc_misc": palette.accent,
        "cpu_box": palette.accent,
        "mem_box": palette.accent,
        "net_box": palette.accent,
        "proc_box": palette.accent,
        "div_line": palette.surface,
    }
    return "".join(f'theme[{key}]="{value}"\n' for key, value in keys.items())


def render_quickshell(palette: Palette) -> str:
    # Key names are read by the QML panel, launcher and sidebar
    data = {
        "accent": palette.accent,
        "base": palette.base,
        "onBase": palette.on_base,
        "surface": palette.surface,
        "onSurface": palette.on_surface,
    }
    return json.dumps(data, indent=2) + "\n"


def default_targets() -> list[ThemeTarget]:
    """All downstream files, in write order (raw palette cache first)."""
    return [
        ThemeTarget("palette", get_xdg_config_file("matugen", "palette.json"), render_palette_cache),
        ThemeTarget("gtk3", get_xdg_config_file("gtk-3.0", "gtk.css"), render_gtk_css),
        ThemeTarget("gtk4", get_xdg_config_file("gtk-4.0", "gtk.css"), render_gtk_css),
        ThemeTarget("kvantum", get_xdg_config_file("Kvantum", "Matugen/Matugen.kvconfig"), render_kvantum),
        ThemeTarget("btop", get_xdg_config_file("btop", "themes/matugen.theme"), render_btop),
        ThemeTarget("quickshell", get_xdg_config_file("quickshell", "palette.json"), render_quickshell),
    ]


def select_targets(names: list[str] | None) -> list[ThemeTarget]:
    """Return the default targets restricted to ``names`` (all when None).

    The palette cache is always kept.

    Raises:
        ValueError: If names is not a list of strings or a name is unknown
    """
    targets = default_targets()
    if names is None:
        return targets
    if not isinstance(names, (list, tuple)) or not all(isinstance(name, str) for name in names):
        raise ValueError(f"Theme targets must be a list of names, got {names!r}")

    known = {target.name for target in targets}
    unknown = sorted(set(names) - known)
    if unknown:
        raise ValueError(f"Unknown theme targets: {', '.join(unknown)}")
    wanted = set(names) | {"palette"}
    return [target for target in targets if target.name in wanted]
