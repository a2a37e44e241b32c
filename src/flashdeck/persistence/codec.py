"""Plain-text deck files.

One card per line, fields joined by ``##``:

    term##definition##missed

There is no header and no escaping. A term or definition containing
``##`` will not survive a save/load cycle.
"""

import locale
import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from ..core.models import Card
from ..core.exceptions import (
    DeckFileNotFoundError,
    MalformedRecordError,
    StorageError,
)

logger = logging.getLogger(__name__)

DELIMITER = "##"
FIELD_COUNT = 3

_COUNT_PATTERN = re.compile(r"[0-9]+")


def encode(cards: Iterable[Card]) -> str:
    """Serialize cards, one line each, without a trailing newline."""
    return "\n".join(
        DELIMITER.join([card.term, card.definition, str(card.missed)])
        for card in cards
    )


def decode(text: str) -> list[Card]:
    """Parse deck file contents into cards, in file order.

    Raises:
        MalformedRecordError: If any line does not have three fields or
            its miss count is not a non-negative integer
    """
    lines = text.split("\n") if text else []
    if lines and lines[-1] == "":
        lines.pop()

    cards = []
    for line_number, line in enumerate(lines, start=1):
        fields = line.split(DELIMITER)
        if len(fields) != FIELD_COUNT:
            raise MalformedRecordError(
                f"Malformed record on line {line_number}: "
                f"expected {FIELD_COUNT} fields separated by '{DELIMITER}', got {len(fields)}.",
                line_number=line_number,
                line=line,
            )

        term, definition, missed = fields
        if not _COUNT_PATTERN.fullmatch(missed):
            raise MalformedRecordError(
                f"Malformed record on line {line_number}: "
                f'miss count "{missed}" is not a non-negative integer.',
                line_number=line_number,
                line=line,
            )

        cards.append(Card(term, definition, int(missed)))

    return cards


def read_text(path: str, encoding: Optional[str] = None) -> str:
    """Read a whole file, mapping OS and decoding errors to flashdeck errors."""
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        raise DeckFileNotFoundError(path)
    except OSError as e:
        raise StorageError(f"Could not read {path}: {e.strerror or e}", file_path=path)
    except UnicodeDecodeError as e:
        raise StorageError(f"Could not read {path}: not valid {e.encoding} text", file_path=path)
    except LookupError as e:
        raise StorageError(f"Could not read {path}: {e}", file_path=path)


def write_text(text: str, path: str, encoding: Optional[str] = None) -> None:
    """Write a whole file, mapping OS and encoding errors to StorageError.

    The text is encoded before the file is opened, so an encoding failure
    leaves any existing file untouched.
    """
    try:
        data = text.encode(encoding or locale.getpreferredencoding(False))
    except UnicodeEncodeError as e:
        raise StorageError(
            f"Could not write {path}: {text[e.start:e.end]!r} cannot be saved as {e.encoding}",
            file_path=path,
        )
    except LookupError as e:
        raise StorageError(f"Could not write {path}: {e}", file_path=path)

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StorageError(f"Could not write {path}: {e.strerror or e}", file_path=path)


def read_cards(path: str, encoding: Optional[str] = None) -> list[Card]:
    """Load all cards from a deck file.

    Raises:
        DeckFileNotFoundError: If the file does not exist
        MalformedRecordError: If a line cannot be parsed
        StorageError: If the file cannot be read
    """
    cards = decode(read_text(path, encoding))
    logger.info(f"Read {len(cards)} cards from {Path(path).name}")
    return cards


def write_cards(cards: Iterable[Card], path: str, encoding: Optional[str] = None) -> int:
    """Save cards to a deck file, replacing it. Returns the number written."""
    cards = list(cards)
    write_text(encode(cards), path, encoding)
    logger.info(f"Wrote {len(cards)} cards to {Path(path).name}")
    return len(cards)
