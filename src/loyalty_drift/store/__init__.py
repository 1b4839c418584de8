"""Config store implementation."""

from .config_store import ConfigError, JsonConfigStore, get_root_path, validate_tracked_fields

__all__ = ["ConfigError", "JsonConfigStore", "get_root_path", "validate_tracked_fields"]
