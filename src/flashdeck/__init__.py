"""
flashdeck - A terminal flashcard trainer.

Keeps a deck of term/definition cards, quizzes you on them, tracks
which cards you miss most, and saves decks to plain ``##``-delimited files.
"""

__version__ = "0.1.0"
__author__ = "flashdeck contributors"
