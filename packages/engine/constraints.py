"""
Constraint derivation from one (guess, feedback) pair.

Given:
  - a 5-letter guess
  - its 5 feedback symbols (G / Y / X)

Return:
  - a ConstraintSet describing what any consistent answer must look like:
      fixed_positions      : pos -> letter            (greens)
      excluded_at_position : pos -> letters forbidden (yellows)
      min_count            : letter -> at least k     (greens + yellows)
      max_count            : letter -> at most k      (only letters with a gray)

Duplicate letters are the tricky part. A gray on a letter that also has
green/yellow marks in the same guess does NOT mean "letter absent"; it means
the answer holds exactly as many copies as were confirmed. So the cap is the
confirmed count for that letter (0 if it had no G/Y marks at all).

Example: "sassy" with feedback Y G X X G
  confirmed: s=1, a=1, y=1
  grays on s (positions 2, 3) -> max s = 1
  => a candidate with 3 s's is out, "s" at position 0 is out.

Letter-indexed fields are fixed 26-slot tuples (index = ord(ch) - ord('a')),
position-indexed fields are 5-slot tuples, so "no entry" is an explicit
0 / None / empty set rather than a missing dict key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from .feedback import (
    ALPHABET,
    WORD_LENGTH,
    FeedbackLike,
    FeedbackSymbol,
    normalize_guess,
    parse_feedback,
    render_feedback,
)

log = logging.getLogger(__name__)

_A = ord("a")


def letter_index(ch: str) -> int:
    return ord(ch) - _A


@dataclass(frozen=True)
class ConstraintSet:
    guess: str
    feedback: Tuple[FeedbackSymbol, ...]
    fixed_positions: Tuple[Optional[str], ...]
    excluded_at_position: Tuple[FrozenSet[str], ...]
    min_count: Tuple[int, ...]
    max_count: Tuple[Optional[int], ...]

    # --- diagnostic views (plain dicts, only the populated entries) ---

    def greens(self) -> Dict[int, str]:
        return {i: ch for i, ch in enumerate(self.fixed_positions) if ch is not None}

    def excluded(self) -> Dict[int, list]:
        return {i: sorted(s) for i, s in enumerate(self.excluded_at_position) if s}

    def minimums(self) -> Dict[str, int]:
        return {ALPHABET[k]: v for k, v in enumerate(self.min_count) if v > 0}

    def maximums(self) -> Dict[str, int]:
        return {ALPHABET[k]: v for k, v in enumerate(self.max_count) if v is not None}

    @property
    def is_empty(self) -> bool:
        """True when nothing would be filtered (no G/Y and no caps)."""
        return not (self.greens() or self.excluded() or self.minimums() or self.maximums())

    def describe(self) -> str:
        return (
            f"Constraints from {self.guess.upper()} / {render_feedback(self.feedback)}:\n"
            f"Greens: {self.greens()}\n"
            f"Yellow-excluded: {self.excluded()}\n"
            f"Min: {self.minimums()}\n"
            f"Max: {self.maximums()}"
        )


def derive_constraints(guess: str, feedback: FeedbackLike) -> ConstraintSet:
    """
    Build the ConstraintSet implied by one guess and its feedback.

    Raises FeedbackFormatError if the guess is not 5 letters a-z or the
    feedback is not 5 G/Y/X symbols.
    """
    g = normalize_guess(guess)
    fb = parse_feedback(feedback)

    fixed: list = [None] * WORD_LENGTH
    excluded: list = [set() for _ in range(WORD_LENGTH)]
    confirmed = [0] * len(ALPHABET)  # G+Y tally for this guess only

    # Steps 1-2: greens and yellows (all positions before any cap is set)
    for i, (ch, sym) in enumerate(zip(g, fb)):
        if sym is FeedbackSymbol.CORRECT:
            fixed[i] = ch
            confirmed[letter_index(ch)] += 1
        elif sym is FeedbackSymbol.PRESENT:
            excluded[i].add(ch)
            confirmed[letter_index(ch)] += 1

    # Step 3: grays cap the letter at its confirmed count. The tally is final
    # here, so every gray of the same letter yields the same cap.
    max_count: list = [None] * len(ALPHABET)
    for ch, sym in zip(g, fb):
        if sym is FeedbackSymbol.ABSENT:
            k = letter_index(ch)
            max_count[k] = confirmed[k]

    # Step 4: minimums straight from the tally
    min_count = tuple(confirmed)

    cs = ConstraintSet(
        guess=g,
        feedback=fb,
        fixed_positions=tuple(fixed),
        excluded_at_position=tuple(frozenset(s) for s in excluded),
        min_count=min_count,
        max_count=tuple(max_count),
    )
    if log.isEnabledFor(logging.DEBUG):
        log.debug(cs.describe())
    return cs
