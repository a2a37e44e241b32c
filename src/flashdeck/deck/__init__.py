"""Card deck and quiz engine."""

from .store import Deck
from .quiz import QuizEngine, QuizResult

__all__ = ["Deck", "QuizEngine", "QuizResult"]
