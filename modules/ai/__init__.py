"""AI module: persisted backend/model selection of the sidebar."""

from .state import SidebarState, BACKENDS, load_state, save_state, select_backend, select_model

__all__ = ["SidebarState", "BACKENDS", "load_state", "save_state", "select_backend", "select_model"]
