"""Core models, configuration, and exceptions."""

from .models import Card, Command
from .config import Config, SessionConfig, load_config, save_config
from .exceptions import (
    FlashdeckError,
    DuplicateTermError,
    DuplicateDefinitionError,
    CardNotFoundError,
    DeckFileNotFoundError,
    MalformedRecordError,
    EmptyDeckError,
    InvalidIntegerError,
    StorageError,
    ConfigError,
)

__all__ = [
    "Card",
    "Command",
    "Config",
    "SessionConfig",
    "load_config",
    "save_config",
    "FlashdeckError",
    "DuplicateTermError",
    "DuplicateDefinitionError",
    "CardNotFoundError",
    "DeckFileNotFoundError",
    "MalformedRecordError",
    "EmptyDeckError",
    "InvalidIntegerError",
    "StorageError",
    "ConfigError",
]
