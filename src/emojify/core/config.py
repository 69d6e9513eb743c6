#!/usr/bin/env python3
"""Configuration loader that reads from config files."""
import os
from pathlib import Path
from typing import Any

import tomllib

DEFAULT_CONFIG: dict[str, Any] = {
    "table": {"data_file": ""},
    "stream": {"chunk_size": 4096, "encoding": "utf-8", "flush_writes": True},
}


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, "rb") as f:
                full_config = tomllib.load(f)
            emojify_config = full_config.get("emojify", {})
        else:
            emojify_config = {}

        self._config = self._merge_dicts(DEFAULT_CONFIG, emojify_config)

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("EMOJIFY_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".emojify" / "config.toml"

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'stream.chunk_size')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def data_file(self) -> Path | None:
        """Alternate alias data file, or None for the embedded one."""
        env_path = os.environ.get("EMOJIFY_DATA_FILE")
        if env_path:
            return Path(env_path).expanduser()
        configured = self.get("table.data_file", "")
        if not configured:
            return None
        return Path(str(configured)).expanduser()

    @property
    def chunk_size(self) -> int:
        env_size = os.environ.get("EMOJIFY_CHUNK_SIZE")
        if env_size:
            try:
                size = int(env_size)
            except ValueError:
                size = 0
            if size > 0:
                return size
        size = int(self.get("stream.chunk_size", 4096))
        if size <= 0:
            raise ValueError(f"stream.chunk_size must be positive, got {size}")
        return size

    @property
    def encoding(self) -> str:
        return str(self.get("stream.encoding", "utf-8"))


# Global singleton instance
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


# Re-export logging functions
from .logging import get_logger, setup_logging  # noqa: E402, F401
