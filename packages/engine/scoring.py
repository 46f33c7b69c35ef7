"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - 'X'  : gray   = letter not present (or present fewer times than guessed)

The filter never calls this: it works from the constraints a pattern implies.
Scoring is the reference the filter is checked against (a target must always
survive the constraints derived from its own feedback), and what the audit
harness and the CLI's --answer mode use to produce feedback automatically.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from collections import Counter
from typing import Tuple

from .feedback import FeedbackSymbol, parse_feedback


def score(guess: str, answer: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Returns:
      - string of length N composed only of 'G', 'Y', 'X'

    Examples:
      score("belle", "level") -> "XGYYY"
      score("lemon", "level") -> "GGXXX"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    pattern = ["X"] * n

    # Pass 1: greens, and leftover answer letters for pass 2
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows capped by what the answer still has
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def score_symbols(guess: str, answer: str) -> Tuple[FeedbackSymbol, ...]:
    """Same as score(), as a tuple of FeedbackSymbol."""
    return parse_feedback(score(guess, answer))
