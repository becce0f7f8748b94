"""XDG Base Directory helpers for locating application config files."""

import os
from pathlib import Path
from xdg import BaseDirectory


def get_xdg_config_file(application: str, filename: str) -> Path:
    """Get the path to an application's config file using XDG Base Directory spec.

    Args:
        application: Name of the application (e.g., 'quickshell', 'gtk-3.0')
        filename: Name of the config file (e.g., 'palette.json', 'gtk.css')

    Returns:
        Path to the config file (may not exist)

    Examples:
        >>> get_xdg_config_file('quickshell', 'palette.json')
        PosixPath('/home/user/.config/quickshell/palette.json')
    """
    config_dir = Path(BaseDirectory.xdg_config_home) / application
    return config_dir / filename


def get_runtime_dir() -> Path:
    """Return $XDG_RUNTIME_DIR, falling back to /run/user/<uid> when unset."""
    try:
        return Path(BaseDirectory.get_runtime_dir(strict=True))
    except KeyError:
        return Path("/run/user") / str(os.getuid())
