"""
Solver session: the externally-held candidate list.

- The dictionary is frozen at construction; candidates start equal to it.
- submit() applies one (guess, feedback) pair and replaces the candidate list.
- reset() restores the full dictionary and forgets previous guesses.

The engine itself is stateless; everything that changes between guesses
lives here so a CLI, a notebook, or a web handler can share it unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from packages.engine import (
    ConstraintSet,
    FeedbackFormatError,
    FeedbackLike,
    derive_constraints,
    filter_candidates,
    normalize_guess,
    parse_feedback,
    render_feedback,
    validate_guess,
)

log = logging.getLogger(__name__)


class SessionError(ValueError):
    """A guess was rejected before filtering."""


class DuplicateGuessError(SessionError):
    pass


class GuessNotAllowedError(SessionError):
    pass


@dataclass(frozen=True)
class SessionConfig:
    require_guess_in_dictionary: bool = True
    prevent_duplicate_guesses: bool = True
    workers: Optional[int] = None          # >1 parallelizes large filters


@dataclass(frozen=True)
class SubmitResult:
    constraints: ConstraintSet
    before: int
    after: int

    @property
    def guess(self) -> str:
        return self.constraints.guess

    @property
    def pattern(self) -> str:
        return render_feedback(self.constraints.feedback)

    def status(self) -> str:
        return (f"Applied {self.guess.upper()} / {self.pattern}. "
                f"Remaining: {self.after} (was {self.before}).")


class SolverSession:
    def __init__(self, dictionary: Iterable[str], config: SessionConfig | None = None):
        self.dictionary: Tuple[str, ...] = tuple(dictionary)
        self.config = config or SessionConfig()
        self._dictionary_set = frozenset(self.dictionary)
        self.candidates: List[str] = list(self.dictionary)
        self.history: List[SubmitResult] = []
        self._guessed: Set[str] = set()

    @property
    def previous_guesses(self) -> List[str]:
        return [r.guess for r in self.history]

    def submit(self, guess: str, feedback: FeedbackLike) -> SubmitResult:
        """
        Apply one guess/feedback to the current candidates.

        Raises:
          FeedbackFormatError   : malformed guess or feedback
          GuessNotAllowedError  : guess not in the dictionary (if required)
          DuplicateGuessError   : guess already submitted (if prevented)
        """
        g = normalize_guess(guess)
        fb = parse_feedback(feedback)

        if self.config.require_guess_in_dictionary and not validate_guess(g, self._dictionary_set):
            raise GuessNotAllowedError(f'"{g.upper()}" is not in the dictionary.')
        if self.config.prevent_duplicate_guesses and g in self._guessed:
            raise DuplicateGuessError(f'You already guessed "{g.upper()}".')

        constraints = derive_constraints(g, fb)
        before = len(self.candidates)
        self.candidates = filter_candidates(constraints, self.candidates,
                                            workers=self.config.workers)

        result = SubmitResult(constraints=constraints, before=before, after=len(self.candidates))
        self.history.append(result)
        self._guessed.add(g)
        log.info("applied %s / %s: %d -> %d candidates", g, result.pattern, before, result.after)
        if not self.candidates:
            log.warning("no candidates remain after %s / %s", g, result.pattern)
        return result

    def reset(self) -> None:
        self.candidates = list(self.dictionary)
        self.history.clear()
        self._guessed.clear()
        log.info("reset: %d words", len(self.dictionary))


__all__ = [
    "SessionError", "DuplicateGuessError", "GuessNotAllowedError", "FeedbackFormatError",
    "SessionConfig", "SubmitResult", "SolverSession",
]
