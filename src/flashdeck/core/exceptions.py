"""Custom exceptions for flashdeck."""


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""
    pass


class DuplicateTermError(FlashdeckError):
    """A card with this term is already in the deck."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f'The card "{term}" already exists.')


class DuplicateDefinitionError(FlashdeckError):
    """A card with this definition is already in the deck."""

    def __init__(self, definition: str):
        self.definition = definition
        super().__init__(f'The definition "{definition}" already exists.')


class CardNotFoundError(FlashdeckError):
    """No card in the deck has the requested term."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f'Can\'t remove "{term}": there is no such card.')


class DeckFileNotFoundError(FlashdeckError):
    """The deck file to import does not exist."""

    def __init__(self, file_path: str = None):
        self.file_path = file_path
        super().__init__("File not found.")


class MalformedRecordError(FlashdeckError):
    """A line in a deck file is not a valid card record."""

    def __init__(self, message: str, line_number: int = None, line: str = None):
        self.line_number = line_number
        self.line = line
        super().__init__(message)


class EmptyDeckError(FlashdeckError):
    """A card was requested from an empty deck."""

    def __init__(self, message: str = "There are no cards to ask."):
        super().__init__(message)


class InvalidIntegerError(FlashdeckError):
    """User input that should be a non-negative integer is not one."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'"{value}" is not a valid number.')


class StorageError(FlashdeckError):
    """Reading or writing a file failed."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path
        super().__init__(message)


class ConfigError(FlashdeckError):
    """Error in configuration."""

    def __init__(self, message: str, config_key: str = None):
        self.config_key = config_key
        super().__init__(message)
