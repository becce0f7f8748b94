"""Helper utilities for hypr-quickshell modules."""

from .general_helpers import ScriptConfig, SUITE_NAME, write_text_atomic
from .module_helpers import (
    get_module_directory,
    list_modules,
    build_script_command,
    run_command,
    create_module_parser,
)
from .xdg_helpers import get_xdg_config_file, get_runtime_dir

__all__ = [
    "ScriptConfig",
    "SUITE_NAME",
    "write_text_atomic",
    "get_module_directory",
    "list_modules",
    "build_script_command",
    "run_command",
    "create_module_parser",
    "get_xdg_config_file",
    "get_runtime_dir",
]
