from .feedback import (
    WORD_LENGTH,
    FeedbackFormatError,
    FeedbackLike,
    FeedbackSymbol,
    GuessRecord,
    normalize_guess,
    parse_feedback,
    render_feedback,
)
from .scoring import score, score_symbols
from .constraints import ConstraintSet, derive_constraints
from .filtering import apply_guess, filter_candidates, filter_history, is_consistent
from .validation import validate_guess, validation_error

__all__ = [
    "WORD_LENGTH", "FeedbackFormatError", "FeedbackLike", "FeedbackSymbol", "GuessRecord",
    "normalize_guess", "parse_feedback", "render_feedback",
    "score", "score_symbols",
    "ConstraintSet", "derive_constraints",
    "apply_guess", "filter_candidates", "filter_history", "is_consistent",
    "validate_guess", "validation_error",
]
