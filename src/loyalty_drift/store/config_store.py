"""JSON-based configuration store."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..models import DriftConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".loyalty-drift"
ROOT_ENV_VAR = "LOYALTY_DRIFT_ROOT"


class ConfigError(Exception):
    """Configuration file is unreadable or invalid."""

    pass


def get_root_path() -> Path:
    """Get the root path from environment or current directory."""
    root = os.environ.get(ROOT_ENV_VAR)
    if root:
        return Path(root)
    return Path.cwd()


def validate_tracked_fields(fields: Any) -> list[str]:
    """Check that tracked fields are a non-empty list of unique names.

    Raises:
        ConfigError: If the list is malformed.
    """
    if not isinstance(fields, list) or not fields:
        raise ConfigError("tracked_fields must be a non-empty list of field names")
    for name in fields:
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"Invalid tracked field name: {name!r}")
    duplicates = sorted({name for name in fields if fields.count(name) > 1})
    if duplicates:
        raise ConfigError(f"Duplicate tracked fields: {', '.join(duplicates)}")
    return list(fields)


class JsonConfigStore:
    """Config store using a JSON file in the .loyalty-drift/ directory."""

    def __init__(self, root_path: str | Path | None = None):
        """Initialize the store.

        Args:
            root_path: Root directory containing .loyalty-drift/. Defaults to current directory.
        """
        self.root = Path(root_path) if root_path else Path.cwd()
        self.config_dir = self.root / CONFIG_DIR_NAME
        self.config_file = self.config_dir / "config.json"

    def is_initialized(self) -> bool:
        return self.config_file.exists()

    def initialize(self) -> None:
        """Create the config directory with a default config."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        if not self.config_file.exists():
            self._write_json(self.config_file, DriftConfig().to_dict())
            logger.info("Wrote default config to %s", self.config_file)

    def _read_json(self, path: Path) -> dict[str, Any]:
        """Read and parse a JSON file."""
        with open(path) as f:
            return json.load(f)

    def _write_json(self, path: Path, data: dict[str, Any]) -> None:
        """Write data to JSON file atomically with sorted keys for git diffs."""
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent, prefix=".tmp_", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
            os.replace(temp_path, path)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def load_config(self) -> DriftConfig:
        """Load the config, falling back to defaults when none is saved.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        if not self.is_initialized():
            logger.debug("No config at %s, using defaults", self.config_file)
            return DriftConfig()

        try:
            data = self._read_json(self.config_file)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {self.config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a JSON object in {self.config_file}")

        config = DriftConfig.from_dict(data)
        validate_tracked_fields(config.tracked_fields)
        return config

    def save_config(self, config: DriftConfig) -> None:
        """Save the config."""
        validate_tracked_fields(config.tracked_fields)
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._write_json(self.config_file, config.to_dict())

    def set_tracked_fields(self, fields: list[str]) -> DriftConfig:
        """Replace the tracked field list and persist it."""
        config = self.load_config()
        config.tracked_fields = validate_tracked_fields(fields)
        self.save_config(config)
        logger.info("Tracked fields set to %s", ", ".join(config.tracked_fields))
        return config
