# apps/cli/solve.py
"""
CLI entry point for narrowing Wordle candidates.

This script:
  1) Loads the dictionary (lenient: skips invalid lines, dedupes) and prints
     a one-line summary; optionally falls back to a tiny built-in list.
  2) Applies guesses either from --guess GUESS:FEEDBACK flags (batch mode)
     or from an interactive prompt ("crate gyxxg", "reset", "quit").
  3) After each guess prints the status line and the remaining candidates
     (capped by --limit).

Feedback uses G (green), Y (yellow), X (gray); case-insensitive.
With --answer WORD the feedback is computed, so --guess takes bare words.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Tuple

from packages.datasets import (
    DictionaryError,
    fallback_dictionary,
    load_dictionary,
    pretty_summary,
)
from packages.engine import FeedbackFormatError, score, validation_error
from packages.session import (
    RENDER_LIMIT,
    SessionConfig,
    SessionError,
    SolverSession,
    render_candidates,
)

PROMPT = "guess feedback> "


def _parse_guess_arg(raw: str, answer: str | None) -> Tuple[str, str]:
    """'crate:GYXXG' -> ('crate', 'GYXXG'); with an answer, 'crate' is enough."""
    if answer:
        guess = raw.split(":", 1)[0].strip().lower()
        return guess, score(guess, answer)
    if ":" not in raw:
        raise argparse.ArgumentTypeError(f"expected GUESS:FEEDBACK, got {raw!r}")
    guess, feedback = raw.split(":", 1)
    return guess.strip().lower(), feedback.strip().upper()


def _show(session: SolverSession, limit: int) -> None:
    print(f"Candidates: {len(session.candidates)}")
    for line in render_candidates(session.candidates, limit):
        print(f"  {line}")


def _apply(session: SolverSession, guess: str, feedback: str, limit: int) -> bool:
    """Validate + submit one pair; print the outcome. Returns False if rejected."""
    err = validation_error(guess, feedback)
    if err:
        print(f"Validation error: {err}", file=sys.stderr)
        return False
    try:
        result = session.submit(guess, feedback)
    except (SessionError, FeedbackFormatError) as e:
        print(str(e), file=sys.stderr)
        return False
    print(result.status())
    _show(session, limit)
    return True


def _interactive(session: SolverSession, limit: int, answer: str | None) -> None:
    print("Enter 'guess feedback' (e.g. 'crate gyxxg'), 'reset', or 'quit'.")
    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            print()
            return
        if not line:
            continue
        cmd = line.lower()
        if cmd in ("quit", "exit", "q"):
            return
        if cmd == "reset":
            session.reset()
            print(f"Reset. Loaded {len(session.dictionary)} words.")
            _show(session, limit)
            continue

        parts = line.split()
        if answer and len(parts) == 1:
            parts.append(score(parts[0], answer) if len(parts[0]) == len(answer) else "")
        if len(parts) != 2:
            print("Expected: GUESS FEEDBACK", file=sys.stderr)
            continue
        _apply(session, parts[0].lower(), parts[1].upper(), limit)


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load the dictionary, then run batch or interactive mode.
    Returns a process exit code.
    """
    ap = argparse.ArgumentParser(description="Wordle candidate filter")
    ap.add_argument("--words", default="words.txt", help="path to the dictionary (one word per line)")
    ap.add_argument("--fallback", action="store_true",
                    help="use a small built-in list if the dictionary fails to load")
    ap.add_argument("--guess", action="append", default=[], metavar="GUESS:FEEDBACK",
                    help="apply a guess non-interactively (repeatable)")
    ap.add_argument("--answer", help="hidden answer; feedback for each guess is computed")
    ap.add_argument("--limit", type=int, default=RENDER_LIMIT, help="max candidates to print")
    ap.add_argument("--allow-unknown", action="store_true",
                    help="accept guesses that are not in the dictionary")
    ap.add_argument("--allow-repeat", action="store_true",
                    help="accept a guess that was already submitted")
    ap.add_argument("--workers", type=int, help="process pool size for large dictionaries")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging (constraints)")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Load dictionary (lenient) and summarize
    try:
        rep = load_dictionary(args.words)
    except (FileNotFoundError, DictionaryError) as e:
        if not args.fallback:
            print(f"Load error: {e}", file=sys.stderr)
            return 1
        print(f"Load error: {e}; using fallback list.", file=sys.stderr)
        rep = fallback_dictionary()
    print(pretty_summary(rep))

    answer = args.answer.strip().lower() if args.answer else None

    # 2) Session
    session = SolverSession(rep.words, SessionConfig(
        require_guess_in_dictionary=not args.allow_unknown,
        prevent_duplicate_guesses=not args.allow_repeat,
        workers=args.workers,
    ))

    # 3) Batch or interactive
    if args.guess:
        for raw in args.guess:
            try:
                guess, feedback = _parse_guess_arg(raw, answer)
            except (argparse.ArgumentTypeError, ValueError) as e:
                print(str(e), file=sys.stderr)
                return 2
            if not _apply(session, guess, feedback, args.limit):
                return 2
        return 0

    _interactive(session, args.limit, answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
