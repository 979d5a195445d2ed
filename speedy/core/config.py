"""Speedy runtime configuration and settings."""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from speedy.core.errors import ValidationError

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "speedy" / "config.yml"


@dataclass
class SpeedyConfig:
    """Runtime configuration for Speedy operations.

    Attributes:
        package_runner: Package manager used to create and install (default: bun)
        package_executor: Runner for one-off package binaries (default: bunx)
        frontend_template: Vite template selector (default: react-ts)
        terminal_app: macOS terminal application for dev servers (default: Terminal)
    """

    package_runner: str = "bun"
    package_executor: str = "bunx"
    frontend_template: str = "react-ts"
    terminal_app: str = "Terminal"

    @classmethod
    def from_env(cls, base: Optional["SpeedyConfig"] = None) -> "SpeedyConfig":
        """Create config from environment variables.

        Environment variables:
            SPEEDY_PACKAGE_RUNNER: Package manager executable
            SPEEDY_PACKAGE_EXECUTOR: Package binary runner executable
            SPEEDY_FRONTEND_TEMPLATE: Vite template name
            SPEEDY_TERMINAL_APP: Terminal application name

        Args:
            base: Values to fall back on (defaults when omitted)

        Returns:
            SpeedyConfig instance with values from environment or base
        """
        base = base or cls()
        return cls(
            package_runner=os.getenv("SPEEDY_PACKAGE_RUNNER", base.package_runner),
            package_executor=os.getenv("SPEEDY_PACKAGE_EXECUTOR", base.package_executor),
            frontend_template=os.getenv("SPEEDY_FRONTEND_TEMPLATE", base.frontend_template),
            terminal_app=os.getenv("SPEEDY_TERMINAL_APP", base.terminal_app),
        )

    @classmethod
    def from_file(cls, path: Path) -> "SpeedyConfig":
        """Load config values from a YAML file.

        Raises:
            ValidationError: If the file cannot be read or parsed, is not a
                mapping, or has unknown keys
        """
        try:
            with open(path) as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid YAML in config file {path}: {e}") from e
        except OSError as e:
            raise ValidationError(f"Cannot read config file {path}: {e}") from e

        if not raw:
            return cls()

        if not isinstance(raw, dict):
            raise ValidationError(f"Config file {path} must contain a mapping")

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValidationError(
                f"Unknown config keys in {path}: {', '.join(unknown)}"
            )

        return cls(**{key: str(value) for key, value in raw.items()})

    @classmethod
    def load(cls) -> "SpeedyConfig":
        """Build config from the optional YAML file, then the environment."""
        config_path = Path(os.getenv("SPEEDY_CONFIG", DEFAULT_CONFIG_FILE))
        base = cls.from_file(config_path) if config_path.exists() else cls()
        return cls.from_env(base)


# Global config instance (can be overridden)
_config: Optional[SpeedyConfig] = None


def get_config() -> SpeedyConfig:
    """Get the global Speedy configuration.

    Returns:
        SpeedyConfig instance (loads file and environment if not set)
    """
    global _config
    if _config is None:
        _config = SpeedyConfig.load()
    return _config


def set_config(config: Optional[SpeedyConfig]):
    """Set the global Speedy configuration.

    Args:
        config: SpeedyConfig instance to use globally, or None to reload lazily
    """
    global _config
    _config = config
