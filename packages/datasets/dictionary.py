"""
Lenient dictionary loader.

What this module does:
- Read a word list (one word per line, UTF-8, optional BOM).
- Trim + lowercase each line; keep only words of exactly 5 letters a–z.
- Skip empty lines, collect invalid lines, drop duplicates (first one wins).
- Compute SHA-256 of the raw file and the load time.
- Return a structured report plus a pretty one-line summary.

Unlike a strict dataset validator, nothing here fails on a bad line: the
dictionary is whatever survives cleaning. Only a missing file or a file with
zero valid words is an error.

Typical use:
    from packages.datasets import load_dictionary, pretty_summary
    rep = load_dictionary("words.txt")
    print(pretty_summary(rep))
    words = rep.words
"""

from __future__ import annotations

import hashlib
import logging
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .io import read_text

log = logging.getLogger(__name__)

WORD_RE = re.compile(r"^[a-z]{5}$")

# Small built-in list so the app stays usable when the real list can't load.
FALLBACK_WORDS: Tuple[str, ...] = (
    "crate", "slate", "trace", "raise", "thing",
    "adieu", "roate", "stare", "arise", "later",
)


class DictionaryError(ValueError):
    """The word list is missing or has no usable words."""


# -----------------------------
# Report
# -----------------------------

@dataclass
class DictionaryReport:
    """Result of cleaning one word list."""
    path: str                         # source path ("" for in-memory text)
    words: Tuple[str, ...]            # valid, lowercase, deduped, input order
    invalid: List[str] = field(default_factory=list)  # raw invalid lines
    empty: int = 0                    # blank/whitespace-only lines
    duplicates: int = 0               # valid words seen more than once
    sha256: str = ""                  # SHA-256 of raw bytes ("" for text)
    elapsed_ms: float = 0.0           # wall time to read + clean

    @property
    def count(self) -> int:
        return len(self.words)

    @property
    def skipped(self) -> int:
        """Duplicates and empties together, as the one-line summary reports them."""
        return self.duplicates + self.empty


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def parse_dictionary(text: str, *, path: str = "") -> DictionaryReport:
    """
    Clean raw word-list text into a DictionaryReport.

    Rules:
      - a leading BOM is removed
      - lines split on LF or CRLF, then trimmed and lowercased
      - blank lines are counted as `empty`
      - anything not matching ^[a-z]{5}$ is kept verbatim in `invalid`
      - repeated valid words are counted as `duplicates`
    """
    text = text.lstrip("\ufeff")

    valid: List[str] = []
    invalid: List[str] = []
    seen = set()
    empty = 0
    duplicates = 0

    for raw in text.splitlines():
        w = raw.strip().lower()
        if not w:
            empty += 1
            continue
        if not WORD_RE.match(w):
            invalid.append(raw)
            continue
        if w in seen:
            duplicates += 1
            continue
        seen.add(w)
        valid.append(w)

    return DictionaryReport(
        path=path,
        words=tuple(valid),
        invalid=invalid,
        empty=empty,
        duplicates=duplicates,
    )


def load_dictionary(path: Path | str) -> DictionaryReport:
    """
    Load and clean a word list from disk.

    Raises:
      FileNotFoundError : path does not exist
      DictionaryError   : the file has no valid 5-letter words
    """
    p = Path(path)
    t0 = time.perf_counter()
    rep = parse_dictionary(read_text(p), path=str(p))
    rep.sha256 = _sha256_file(p)
    rep.elapsed_ms = (time.perf_counter() - t0) * 1000.0

    if rep.count == 0:
        raise DictionaryError(
            f"{p}: found no valid 5-letter words "
            f"(skipped {len(rep.invalid)} invalid entr{'y' if len(rep.invalid) == 1 else 'ies'})")

    log.info("loaded %d words from %s (%d invalid, %d duplicates, %d empty)",
             rep.count, p, len(rep.invalid), rep.duplicates, rep.empty)
    if rep.invalid:
        log.debug("sample invalid lines: %r", rep.invalid[:5])
    return rep


def fallback_dictionary() -> DictionaryReport:
    return DictionaryReport(path="<fallback>", words=FALLBACK_WORDS)


def pretty_summary(report: DictionaryReport) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        Loaded 14855 valid words in 12 ms. Skipped 3 invalid and 1 duplicates/empties.
    """
    return (
        f"Loaded {report.count} valid words in {round(report.elapsed_ms)} ms. "
        f"Skipped {len(report.invalid)} invalid and {report.skipped} duplicates/empties."
    )
