"""
Lightweight input validation.

This module answers the question: "Can this (guess, feedback) be applied?"
A submission is acceptable iff:
  - the guess is 5 letters a–z (case-insensitive)
  - the feedback is 5 characters from G/Y/X (case-insensitive; - and . mean X)
  - optionally, the guess exists in the provided `allowed` list/set

validation_error() returns the message a UI would show; the engine itself
raises FeedbackFormatError for the same problems.
"""

from typing import Iterable, Optional, Set

from .feedback import FeedbackFormatError, normalize_guess, parse_feedback

GUESS_MESSAGE = "Guess must be 5 letters (A–Z)."
FEEDBACK_MESSAGE = "Feedback must be 5 characters using G/Y/X (- or . also mean X)."


def validation_error(guess: str, feedback: str) -> Optional[str]:
    """Return a user-facing message for the first problem found, else None."""
    try:
        normalize_guess(guess)
    except FeedbackFormatError:
        return GUESS_MESSAGE
    try:
        parse_feedback(feedback)
    except FeedbackFormatError:
        return FEEDBACK_MESSAGE
    return None


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is a well-formed guess present in `allowed`.

    Notes:
      - Pass a set for `allowed` when calling in a loop; other iterables are
        copied into a local set on every call.
    """
    if not isinstance(word, str):
        return False
    try:
        w = normalize_guess(word)
    except FeedbackFormatError:
        return False

    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) \
        else {a.strip().lower() for a in allowed}
    return w in allowed_set
