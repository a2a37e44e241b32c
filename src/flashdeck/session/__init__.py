"""Interactive session: transcript and command loop."""

from .transcript import Transcript
from .loop import CommandLoop, SessionState, describe_hardest

__all__ = ["Transcript", "CommandLoop", "SessionState", "describe_hardest"]
