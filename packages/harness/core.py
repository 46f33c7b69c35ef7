"""
Self-consistency audit primitives.

- audit_case:  score one guess against one hidden target, derive constraints
               from that feedback, filter the word list, and check the target
               survived.
- audit_batch: run audit_case over many (target, guess) pairs.
- summarize:   aggregate rows into pass/fail counts and pruning stats.
- sample_targets: deterministic target sample (seeded numpy Generator).

A target that does not survive its own feedback means the constraint
derivation or the filter is wrong. These functions are UI-agnostic so they
can be reused by the CLI, a notebook, or tests.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Sequence

import numpy as np

from packages.engine import derive_constraints, filter_candidates, render_feedback, score_symbols


def audit_case(target: str, guess: str, words: Sequence[str]) -> Dict:
    """
    Returns:
        dict with keys:
            target, guess, pattern, retained (bool),
            before (int), remaining (int), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    symbols = score_symbols(guess, target)
    constraints = derive_constraints(guess, symbols)
    kept = filter_candidates(constraints, words)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "target": target,
        "guess": guess,
        "pattern": render_feedback(symbols),
        "retained": target in kept,
        "before": len(words),
        "remaining": len(kept),
        "time_ms": dt,
    }


def audit_batch(targets: Iterable[str], guesses: Sequence[str], words: Sequence[str]) -> List[Dict]:
    """
    Every target is paired with every guess. `targets` may be a progress
    iterator (e.g. tqdm); it is consumed once.
    """
    words = list(words)
    out: List[Dict] = []
    for target in targets:
        for guess in guesses:
            out.append(audit_case(target, guess, words))
    return out


def summarize(rows: List[Dict]) -> Dict:
    """Aggregate audit rows. `passed` is True only if every target was retained."""
    if not rows:
        return {"pairs": 0, "failures": 0, "passed": True,
                "mean_remaining": 0.0, "median_remaining": 0.0, "mean_time_ms": 0.0,
                "failed_pairs": []}
    remaining = np.array([r["remaining"] for r in rows], dtype=float)
    times = np.array([r["time_ms"] for r in rows], dtype=float)
    failures = [r for r in rows if not r["retained"]]
    return {
        "pairs": len(rows),
        "failures": len(failures),
        "passed": not failures,
        "mean_remaining": round(float(remaining.mean()), 3),
        "median_remaining": float(np.median(remaining)),
        "mean_time_ms": round(float(times.mean()), 3),
        "failed_pairs": [(r["guess"], r["target"], r["pattern"]) for r in failures[:10]],
    }


def sample_targets(words: Sequence[str], sample: int | None, seed: int) -> List[str]:
    """Deterministic sample without replacement; all words if sample is None/too big."""
    if not sample or sample >= len(words):
        return list(words)
    rng = np.random.default_rng(seed)
    idx = rng.choice(len(words), size=sample, replace=False)
    return [words[i] for i in sorted(idx)]
