"""Wallpaper module: rotate through a wallpaper directory and retheme."""

from .rotator import rotate, apply, list_wallpapers, step_index, DIRECTIONS, IMAGE_SUFFIXES

__all__ = ["rotate", "apply", "list_wallpapers", "step_index", "DIRECTIONS", "IMAGE_SUFFIXES"]
