"""Configuration management for flashdeck."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

import yaml

from .exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SessionConfig:
    """Settings for one interactive session."""
    # Deck file loaded before the first prompt
    import_path: Optional[str] = None

    # Deck file written on exit instead of nothing
    export_path: Optional[str] = None

    # Seed for quiz card selection (None = unpredictable)
    seed: Optional[int] = None


@dataclass
class Config:
    """Main configuration for flashdeck."""
    session: SessionConfig = field(default_factory=SessionConfig)

    # Text encoding for deck and log files (None = platform default)
    encoding: Optional[str] = None

    # Logging
    log_level: str = "WARNING"
    verbose: bool = False

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, DEBUG when verbose."""
        if self.verbose:
            return logging.DEBUG
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if "session" in data:
            session_data = data["session"] or {}
            seed = session_data.get("seed")
            if seed is not None and not isinstance(seed, int):
                raise ConfigError(f"session.seed must be an integer, got {seed!r}", "session.seed")
            config.session = SessionConfig(
                import_path=session_data.get("import_path"),
                export_path=session_data.get("export_path"),
                seed=seed,
            )

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {log_level}", "log_level")

        config.encoding = data.get("encoding")
        config.log_level = log_level
        config.verbose = bool(data.get("verbose", False))

        return config

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "session": {
                "import_path": self.session.import_path,
                "export_path": self.session.export_path,
                "seed": self.session.seed,
            },
            "encoding": self.encoding,
            "log_level": self.log_level,
            "verbose": self.verbose,
        }


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file or use defaults.

    Searches for config in:
    1. Provided path
    2. ./flashdeck.yaml
    3. ~/.config/flashdeck/config.yaml
    4. Falls back to defaults
    """
    search_paths = []

    if config_path:
        search_paths.append(Path(config_path))

    search_paths.extend([
        Path("./flashdeck.yaml"),
        Path.home() / ".config" / "flashdeck" / "config.yaml",
    ])

    for path in search_paths:
        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in config file: {e}")
            except OSError as e:
                raise ConfigError(f"Error loading config from {path}: {e}")
            if data is not None and not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")
            return Config.from_dict(data or {})

    return Config()


def save_config(config: Config, path: str) -> None:
    """Save configuration to YAML file."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False)
