"""Reading and writing deck files."""

from .codec import DELIMITER, encode, decode, read_cards, write_cards

__all__ = ["DELIMITER", "encode", "decode", "read_cards", "write_cards"]
