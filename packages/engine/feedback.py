"""
Feedback symbols and guess records.

Conventions (case-insensitive on input):
  - 'G'  : Correct = letter in exactly this position
  - 'Y'  : Present = letter in the answer, but not here
  - 'X'  : Absent  = no further copies of this letter beyond the G/Y marks
           ('-' and '.' are accepted as aliases)

Everything here is a boundary check: the interpreter and filter assume a
well-formed 5-letter guess and 5 symbols, so malformed input is rejected
early with FeedbackFormatError instead of producing a meaningless filter.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

WORD_LENGTH = 5
ALPHABET = string.ascii_lowercase


class FeedbackFormatError(ValueError):
    """Guess or feedback does not have the expected shape/alphabet."""


class FeedbackSymbol(str, Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "X"


_ALIASES = {
    "G": FeedbackSymbol.CORRECT,
    "Y": FeedbackSymbol.PRESENT,
    "X": FeedbackSymbol.ABSENT,
    "-": FeedbackSymbol.ABSENT,
    ".": FeedbackSymbol.ABSENT,
}

FeedbackLike = Union[str, Sequence[FeedbackSymbol]]


def normalize_guess(guess: str) -> str:
    """Trim + lowercase; raise unless exactly WORD_LENGTH letters a-z."""
    if not isinstance(guess, str):
        raise FeedbackFormatError(f"Guess must be a string, got {type(guess).__name__}")
    g = guess.strip().lower()
    if len(g) != WORD_LENGTH or any(ch not in ALPHABET for ch in g):
        raise FeedbackFormatError(f"Guess must be {WORD_LENGTH} letters (A–Z), got {guess!r}")
    return g


def parse_feedback(feedback: FeedbackLike) -> Tuple[FeedbackSymbol, ...]:
    """
    Turn 'gyXxg' (or a sequence of FeedbackSymbol) into a tuple of symbols.

    Raises FeedbackFormatError on wrong length or unknown characters.
    """
    if isinstance(feedback, str):
        raw = feedback.strip().upper()
        if len(raw) != WORD_LENGTH:
            raise FeedbackFormatError(
                f"Feedback must be {WORD_LENGTH} characters using G/Y/X, got {feedback!r}")
        try:
            return tuple(_ALIASES[ch] for ch in raw)
        except KeyError as e:
            raise FeedbackFormatError(
                f"Unknown feedback character {e.args[0]!r} in {feedback!r} (use G/Y/X)") from e

    symbols = tuple(feedback)
    if len(symbols) != WORD_LENGTH:
        raise FeedbackFormatError(
            f"Feedback must have {WORD_LENGTH} symbols, got {len(symbols)}")
    for i, s in enumerate(symbols):
        if not isinstance(s, FeedbackSymbol):
            raise FeedbackFormatError(f"Feedback[{i}] must be a FeedbackSymbol, got {s!r}")
    return symbols


def render_feedback(symbols: Sequence[FeedbackSymbol]) -> str:
    return "".join(s.value for s in symbols)


@dataclass(frozen=True)
class GuessRecord:
    """One submitted (guess, feedback) pair, normalized on construction."""
    guess: str
    feedback: Tuple[FeedbackSymbol, ...]

    def __post_init__(self):
        object.__setattr__(self, "guess", normalize_guess(self.guess))
        object.__setattr__(self, "feedback", parse_feedback(self.feedback))

    @property
    def pattern(self) -> str:
        return render_feedback(self.feedback)

    @property
    def solved(self) -> bool:
        return all(s is FeedbackSymbol.CORRECT for s in self.feedback)
