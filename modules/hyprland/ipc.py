"""
Hyprland IPC helpers.

Talks to the compositor's request socket directly (the same protocol hyprctl
uses) and exposes the active wallpaper option as a WallpaperStore.
"""

import json
import logging
import os
from pathlib import Path
from socket import AF_UNIX, socket
from typing import Any, Optional

from helpers import get_runtime_dir

__all__ = ["HyprlandIPC", "HyprctlWallpaperStore", "ACTIVE_WALLPAPER_OPTION"]

ACTIVE_WALLPAPER_OPTION = "decoration:active_wallpaper"


class HyprlandIPC:
    """Helper class for Hyprland IPC communication."""

    def __init__(self, signature: str | None = None, timeout: float = 1.0):
        signature = signature or os.environ.get("HYPRLAND_INSTANCE_SIGNATURE")
        if not signature:
            raise RuntimeError("HYPRLAND_INSTANCE_SIGNATURE environment variable not set")
        self.signature = signature
        self.timeout = timeout
        self.socket_path = self._find_socket(signature)
        self.log = logging.getLogger("HyprlandIPC")

    @staticmethod
    def _find_socket(signature: str) -> Path:
        candidates = [
            get_runtime_dir() / "hypr" / signature / ".socket.sock",
            # Hyprland < 0.40
            Path("/tmp/hypr") / signature / ".socket.sock",
        ]
        for candidate in candidates:
            if candidate.exists():
                return candidate
        return candidates[0]

    def _exchange(self, payload: str) -> str:
        with socket(AF_UNIX) as s:
            s.settimeout(self.timeout)
            s.connect(str(self.socket_path))
            s.sendall(payload.encode())
            chunks = []
            while True:
                chunk = s.recv(8192)
                if not chunk:
                    break
                chunks.append(chunk)
        return b"".join(chunks).decode()

    def send_command(self, command: str) -> str:
        """
        Send a raw command (e.g. "reload", "keyword a b") and return the reply.

        Raises:
            OSError: If the socket cannot be reached
        """
        if not isinstance(command, str) or not command.strip():
            raise ValueError("command must be a non-empty string")

        self.log.debug("Sending command: %s", command)
        response = self._exchange(command)
        self.log.debug("Response: %s", response.strip())
        return response

    def send_request(self, request: str) -> Optional[Any]:
        """
        Send a JSON request (e.g. "monitors", "activewindow") and parse the reply.

        Returns:
            Parsed response data or None on error
        """
        try:
            response = self.send_command(f"j/{request}")
            return json.loads(response)
        except (OSError, json.JSONDecodeError) as e:
            self.log.error("Failed to send request %s: %s", request, e)
            return None

    def get_option(self, name: str) -> Optional[dict]:
        data = self.send_request(f"getoption {name}")
        return data if isinstance(data, dict) else None

    def keyword(self, name: str, value: str) -> bool:
        """Set a runtime option. Returns True when Hyprland answered "ok"."""
        try:
            response = self.send_command(f"keyword {name} {value}")
        except OSError as e:
            self.log.error("Failed to set %s: %s", name, e)
            return False
        if response.strip() != "ok":
            self.log.error("Hyprland rejected %s: %s", name, response.strip())
            return False
        return True

    def reload(self) -> bool:
        try:
            return self.send_command("reload").strip() == "ok"
        except OSError as e:
            self.log.error("Failed to reload: %s", e)
            return False


class HyprctlWallpaperStore:
    """WallpaperStore backed by Hyprland's active wallpaper option."""

    def __init__(self, ipc: HyprlandIPC, option: str = ACTIVE_WALLPAPER_OPTION):
        self.ipc = ipc
        self.option = option

    def get_active(self) -> Optional[Path]:
        data = self.ipc.get_option(self.option)
        value = (data or {}).get("str")
        if not isinstance(value, str) or not value.strip() or value.strip() == "[[EMPTY]]":
            return None
        return Path(value.strip())

    def set_active(self, wallpaper: Path) -> None:
        if not self.ipc.keyword(self.option, str(wallpaper)):
            raise RuntimeError(f"Could not set {self.option} to {wallpaper}")
