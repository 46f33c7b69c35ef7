"""
I/O utilities for audit runs.

Responsibilities:
- write_csv:     audit rows into a tidy CSV (one row per target/guess pair).
- write_manifest:dump a JSON manifest with config, dictionary hash, summary.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
  like "GYXXG" or "-GYY-" as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

FIELDS = ["target", "guess", "pattern", "retained", "before", "remaining", "time_ms"]


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "GYXXG" -> "'GYXXG"
    """
    return "'" + patt if patt else patt


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize audit rows to CSV (columns: FIELDS). Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            row = {k: r[k] for k in FIELDS}
            row["pattern"] = _excel_safe_pattern(r["pattern"])
            row["time_ms"] = round(float(r["time_ms"]), 3)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and results summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, guesses, seed, sample, outdir)
      - dictionary: path, count, sha256
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
