"""Desktop module: OSD notifications and screenshots."""

from .notify import notify
from .screenshots import screenshot, MODES

__all__ = ["notify", "screenshot", "MODES"]
