from .core import (
    DuplicateGuessError,
    GuessNotAllowedError,
    SessionConfig,
    SessionError,
    SolverSession,
    SubmitResult,
)
from .render import RENDER_LIMIT, render_candidates

__all__ = [
    "DuplicateGuessError", "GuessNotAllowedError", "SessionConfig", "SessionError",
    "SolverSession", "SubmitResult", "RENDER_LIMIT", "render_candidates",
]
