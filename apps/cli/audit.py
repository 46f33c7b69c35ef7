# apps/cli/audit.py
"""
CLI entry point for the self-consistency audit.

This script:
  1) Loads the dictionary and prints the one-line load summary.
  2) Samples hidden targets deterministically by seed.
  3) For every (target, guess) pair, scores the guess, derives constraints
     from that feedback, filters the dictionary, and checks the target
     survived. Shows a live progress indicator and writes:
       - CSV:  one row per pair (pattern, retained, remaining, time)
       - JSON: manifest with config, dictionary hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from packages.datasets import DictionaryError, load_dictionary, pretty_summary
from packages.engine import FeedbackFormatError, normalize_guess
from packages.harness import audit_batch, sample_targets, summarize
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest

DEFAULT_GUESSES = ["crate", "sassy", "eerie", "fuzzy"]


def _plain_progress(items: List[str]):
    """Yield items while writing a throttled '[i/n] pct | elapsed | ETA' line."""
    total = len(items)
    start = time.time()
    last_print = 0.0
    for idx, item in enumerate(items, 1):
        yield item
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle filter — self-consistency audit")
    ap.add_argument("--words", default="words.txt", help="path to the dictionary")
    ap.add_argument("--guesses", nargs="+", default=DEFAULT_GUESSES,
                    help="guesses to score against every sampled target")
    ap.add_argument("--sample", type=int, default=500,
                    help="number of targets (deterministic by seed); 0 = all")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="info logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Load dictionary
    try:
        rep = load_dictionary(args.words)
    except (FileNotFoundError, DictionaryError) as e:
        print(f"Load error: {e}", file=sys.stderr)
        return 1
    print(pretty_summary(rep))

    try:
        guesses = [normalize_guess(g) for g in args.guesses]
    except FeedbackFormatError as e:
        print(str(e), file=sys.stderr)
        return 2

    # 2) Targets
    targets = sample_targets(rep.words, args.sample, args.seed)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        iterator = tqdm(targets, ncols=80, desc="Auditing", unit="target")
    elif mode == "plain":
        iterator = _plain_progress(targets)
    else:
        iterator = targets

    rows = audit_batch(iterator, guesses, rep.words)
    summary = summarize(rows)

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"audit_{run_id}.csv"
    manifest_path = outdir / f"audit_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": {"path": rep.path, "count": rep.count, "sha256": rep.sha256},
        "num_targets": len(targets),
        "summary": summary,
    }, str(manifest_path))

    status = "OK" if summary["passed"] else "FAIL"
    print(f"{summary['pairs']} pairs | failures={summary['failures']} "
          f"| mean remaining={summary['mean_remaining']} | {status}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0 if summary["passed"] else 3


if __name__ == "__main__":
    sys.exit(main())
