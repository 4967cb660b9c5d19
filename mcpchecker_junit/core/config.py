"""
Configuration management for the MCP checker JUnit converter.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from mcpchecker_junit.core.errors import ConfigurationError

CONFIG_ENV_VAR = "MCPCHECKER_JUNIT_CONFIG"
DEFAULT_CONFIG_NAME = "mcpchecker_junit.toml"
CONFIG_TABLE = "mcpchecker_junit"

PATH_KEYS = frozenset({"input_path", "log_file", "config_file"})

# Only set from the command line; a missing input argument always means stdin
CLI_ONLY_KEYS = frozenset({"input_path", "config_file"})


@dataclass
class Config:
    """Configuration for a single conversion run."""

    # Input file; None means standard input
    input_path: Optional[Path] = None

    # Logging
    verbosity: Optional[int] = None  # 0=warnings, 1-2=progress, 3=debug
    log_file: Optional[Path] = None

    # Defaults file; discovered from env / cwd when not set
    config_file: Optional[Path] = None

    def __post_init__(self):
        """Post-initialization processing."""
        self._load_config_file()

        if self.verbosity is None:
            self.verbosity = 0
        if not isinstance(self.verbosity, int) or isinstance(self.verbosity, bool):
            raise ConfigurationError(f"verbosity must be an integer, got {self.verbosity!r}")
        if not 0 <= self.verbosity <= 3:
            raise ConfigurationError(f"verbosity must be between 0 and 3, got {self.verbosity}")

        for key in PATH_KEYS:
            value = getattr(self, key)
            if value is not None and not isinstance(value, Path):
                setattr(self, key, Path(value))

    def _load_config_file(self) -> None:
        """Load defaults from mcpchecker_junit.toml if present.

        Values given to the constructor win over values from the file.
        """
        explicit = self.config_file is not None
        if explicit:
            self.config_file = Path(self.config_file)
        else:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                self.config_file = Path(env_path)
                explicit = True
            else:
                self.config_file = Path.cwd() / DEFAULT_CONFIG_NAME

        if not self.config_file.exists():
            if explicit:
                raise ConfigurationError(f"Config file not found: {self.config_file}")
            self.config_file = None
            return

        try:
            try:
                import tomllib  # Python 3.11+
            except ModuleNotFoundError:  # Python 3.9-3.10
                import tomli as tomllib

            data = tomllib.loads(self.config_file.read_text(encoding="utf-8"))
        except Exception as e:
            raise ConfigurationError(f"Failed to read config file: {self.config_file}: {e}") from e

        table = data.get(CONFIG_TABLE)
        if table is None:
            tool = data.get("tool", {})
            table = tool.get(CONFIG_TABLE, {}) if isinstance(tool, dict) else {}
        if not isinstance(table, dict):
            raise ConfigurationError(f"[{CONFIG_TABLE}] in {self.config_file} must be a table")

        for key, value in table.items():
            if key in CLI_ONLY_KEYS or not hasattr(self, key):
                continue
            if value is None or getattr(self, key) is not None:
                continue
            setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "input_path": str(self.input_path) if self.input_path else None,
            "verbosity": self.verbosity,
            "log_file": str(self.log_file) if self.log_file else None,
            "config_file": str(self.config_file) if self.config_file else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        data = dict(data)
        for key in PATH_KEYS:
            if key in data and isinstance(data[key], str):
                data[key] = Path(data[key])
        return cls(**data)
