"""
General helpers for script configuration (XDG) and logging.

Every module of the suite builds one ScriptConfig per script: it resolves
the XDG config/state directories, merges the suite and module TOML files
and wires logging into the module's state directory.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any
from xdg import BaseDirectory


# Suite name used for the XDG config/state subdirectories
SUITE_NAME = "hypr-quickshell"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class ScriptConfig:
    """XDG-compliant configuration and logging for one script.

    Config values are looked up in the module's ``<script_name>.toml`` first,
    then in the suite-wide ``config.toml``, then in ``defaults``.
    """

    def __init__(
        self,
        module_name: str,
        script_name: str,
        load_config: bool = True,
        defaults: dict[str, Any] | None = None,
    ):
        if not isinstance(script_name, str) or not script_name.strip():
            raise ValueError("script_name must be a non-empty string")
        if not isinstance(module_name, str) or not module_name.strip():
            raise ValueError("module_name must be a non-empty string")

        self.module_name = module_name
        self.script_name = script_name

        self.suite_config_dir = Path(BaseDirectory.save_config_path(SUITE_NAME))
        self.config_dir = self.suite_config_dir / module_name
        self.state_dir = Path(BaseDirectory.save_state_path(SUITE_NAME)) / module_name

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.state_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.state_dir / f"{script_name}.log"
        self.config_file = self.config_dir / f"{script_name}.toml"

        self.config: dict[str, Any] = dict(defaults or {})
        if load_config:
            general_config_path = self.suite_config_dir / "config.toml"
            if general_config_path.exists():
                with open(general_config_path, "rb") as f:
                    self.config.update(tomllib.load(f))

            if self.config_file.exists():
                with open(self.config_file, "rb") as f:
                    self.config.update(tomllib.load(f))

    def get_config_value(self, key: str, default: Any | None = None) -> Any:
        """Return a possibly expanded configuration value or default."""
        return self.get_config_value_checked(key, default=default, require_str=False)

    def get_config_value_checked(
        self,
        key: str,
        default: Any | None = None,
        *,
        require_str: bool = False,
        allow_empty: bool = False,
    ) -> Any:
        value = self.config.get(key, default)

        if isinstance(value, str):
            value = os.path.expandvars(value)
            value = os.path.expanduser(value)

        if require_str:
            if value is None:
                raise ValueError(f"Configuration value for '{key}' is required and not set")
            if not isinstance(value, str):
                if isinstance(value, (int, float, bool)):
                    value = str(value)
                else:
                    raise ValueError(
                        f"Configuration value for '{key}' must be a string; got {type(value).__name__}"
                    )
            if not allow_empty and value.strip() == "":
                raise ValueError(f"Configuration value for '{key}' must not be empty")

        return value

    def get_config_path_value(self, key: str, default: str | Path) -> Path:
        """Return a configuration value as an expanded Path."""
        value = self.get_config_value_checked(key, default=str(default), require_str=True)
        return Path(value)

    def setup_logging(self, level=logging.INFO, include_console=True):
        """Setup logging to the script's log file and optionally the console."""
        handlers: list[logging.Handler] = [logging.FileHandler(self.log_file)]
        if include_console:
            handlers.append(logging.StreamHandler())

        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=handlers,
            force=True,
        )

        log = logging.getLogger(self.script_name)
        log.debug("Logging initialized. Log file: %s", self.log_file)
        return log


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one rename.

    Readers see either the old file or the new one, never a partial write.
    The parent directory is created if needed.
    """
    import tempfile

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=str(path.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        # mkstemp creates 0600 files
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
