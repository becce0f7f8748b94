#!/usr/bin/env python3
"""Backend/model selection of the Quickshell AI sidebar.

The record is shared with the sidebar QML, which reads and writes the same
file verbatim, so the on-disk keys stay camelCase.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from helpers import get_xdg_config_file, write_text_atomic

logger = logging.getLogger("ai")

BACKENDS = ("ChatGPT", "Google Gemini", "Zukijourney", "Ollama")


def default_state_path() -> Path:
    return get_xdg_config_file("ai", "sidebar_state.json")


@dataclass(frozen=True)
class SidebarState:
    backend: str = BACKENDS[0]
    backend_index: int = 0
    model: str = ""
    model_index: int = 0

    def to_json(self) -> dict:
        return {
            "backend": self.backend,
            "backendIndex": self.backend_index,
            "model": self.model,
            "modelIndex": self.model_index,
        }

    @classmethod
    def from_json(cls, data: dict) -> "SidebarState":
        default = cls()
        return cls(
            backend=str(data.get("backend", default.backend)),
            backend_index=int(data.get("backendIndex", default.backend_index)),
            model=str(data.get("model", default.model)),
            model_index=int(data.get("modelIndex", default.model_index)),
        )


def load_state(path: Path | None = None) -> SidebarState:
    """Read the sidebar state; a missing or unreadable file gives the defaults."""
    path = path or default_state_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("state is not a JSON object")
        return SidebarState.from_json(data)
    except FileNotFoundError:
        return SidebarState()
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        logger.warning("Ignoring invalid sidebar state %s: %s", path, e)
        return SidebarState()


def save_state(state: SidebarState, path: Path | None = None) -> None:
    path = path or default_state_path()
    write_text_atomic(path, json.dumps(state.to_json(), indent=2) + "\n")
    logger.info("Saved sidebar state: %s / %s", state.backend, state.model or "-")


def select_backend(state: SidebarState, name: str) -> SidebarState:
    """Raises ValueError if ``name`` is not a known backend."""
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend: {name} (expected one of {', '.join(BACKENDS)})")
    return replace(state, backend=name, backend_index=BACKENDS.index(name))


def select_model(state: SidebarState, name: str, models: list[str] | None = None) -> SidebarState:
    """Select a model; with ``models`` the index follows its position there.

    Raises ValueError if ``models`` is given and does not contain ``name``.
    """
    index = 0
    if models:
        if name not in models:
            raise ValueError(f"Unknown model: {name}")
        index = models.index(name)
    return replace(state, model=name, model_index=index)
