"""
Candidate filtering given a ConstraintSet.

Given:
  - constraints derived from one (guess, feedback) pair
  - the current candidate list

Return:
  - the candidates consistent with that feedback, in their original order.

This is the core step that turns feedback into a shrinking candidate set.
A candidate survives iff it passes all four checks:
  1) greens      : every fixed position holds its letter
  2) yellows     : the yellow letter is not at its guessed position, but is
                   somewhere in the word
  3) counts      : per-letter occurrences within [min_count, max_count]
  4) excluded    : no position holds a letter a yellow ruled out there

Result is always a subset of the input. An empty result is a valid answer
(either a feedback typo or a target outside the dictionary).
"""

from __future__ import annotations

import logging
from functools import partial
from multiprocessing import Pool
from typing import Iterable, List, Optional, Sequence, Tuple

from .constraints import ConstraintSet, derive_constraints, letter_index
from .feedback import WORD_LENGTH, FeedbackLike, FeedbackSymbol

log = logging.getLogger(__name__)

# Below this many candidates a process pool costs more than it saves.
PARALLEL_THRESHOLD = 20_000

History = Iterable[Tuple[str, FeedbackLike]]  # (guess, feedback)


def letter_counts(word: str) -> List[int]:
    """26-slot occurrence counts for a lowercase a-z word."""
    counts = [0] * 26
    for ch in word:
        counts[letter_index(ch)] += 1
    return counts


def is_consistent(word: str, constraints: ConstraintSet) -> bool:
    """Pure predicate: does `word` satisfy every check in `constraints`?"""
    # Basic hygiene: anything that isn't a clean lowercase 5-letter token fails
    if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha() and word.islower()):
        return False

    # 1) Greens at exact positions
    for pos, ch in enumerate(constraints.fixed_positions):
        if ch is not None and word[pos] != ch:
            return False

    # 2) Yellows must be present but not at that position
    for i, (ch, sym) in enumerate(zip(constraints.guess, constraints.feedback)):
        if sym is FeedbackSymbol.PRESENT:
            if word[i] == ch or ch not in word:
                return False

    # 3) Per-letter min/max counts
    counts = letter_counts(word)
    for k, lo in enumerate(constraints.min_count):
        if counts[k] < lo:
            return False
    for k, hi in enumerate(constraints.max_count):
        if hi is not None and counts[k] > hi:
            return False

    # 4) Yellow positional forbiddance
    for i, banned in enumerate(constraints.excluded_at_position):
        if word[i] in banned:
            return False

    return True


def _keep_mask(constraints: ConstraintSet, chunk: Sequence[str]) -> List[bool]:
    return [is_consistent(w, constraints) for w in chunk]


def _chunks(seq: Sequence[str], size: int) -> List[Sequence[str]]:
    return [seq[i:i + size] for i in range(0, len(seq), size)]


def filter_candidates(
        constraints: ConstraintSet,
        candidates: Iterable[str],
        *,
        workers: Optional[int] = None,
        min_parallel: int = PARALLEL_THRESHOLD,
) -> List[str]:
    """
    Keep only candidates consistent with `constraints` (order preserved).

    Args:
      constraints  : output of derive_constraints()
      candidates   : iterable of lowercase 5-letter words
      workers      : >1 evaluates the predicate in a process pool
      min_parallel : lists shorter than this are always filtered inline

    Returns:
      List[str] subset of `candidates`, same relative order.
    """
    words = list(candidates)

    if workers and workers > 1 and len(words) >= min_parallel:
        # Pool.map returns chunk results in submission order, so zipping the
        # masks back onto the words gives the same list as the inline path.
        size = max(1, -(-len(words) // (workers * 4)))
        with Pool(processes=workers) as pool:
            masks = pool.map(partial(_keep_mask, constraints), _chunks(words, size))
        out = [w for w, keep in zip(words, (k for m in masks for k in m)) if keep]
    else:
        out = [w for w in words if is_consistent(w, constraints)]

    log.debug("filter %s: %d -> %d candidates", constraints.guess, len(words), len(out))
    return out


def apply_guess(guess: str, feedback: FeedbackLike, candidates: Iterable[str],
                *, workers: Optional[int] = None) -> List[str]:
    """Derive constraints for one guess and filter `candidates` with them."""
    return filter_candidates(derive_constraints(guess, feedback), candidates, workers=workers)


def filter_history(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with ALL (guess, feedback) pairs in `history`,
    applied one guess at a time.
    """
    out = list(words)
    for guess, feedback in history:
        out = apply_guess(guess, feedback, out)
    return out
