"""Plain-text rendering of a candidate list (display cap is a UI concern)."""

from __future__ import annotations

from typing import List, Sequence

RENDER_LIMIT = 200
EMPTY_MESSAGE = "No candidates remain. Check your guesses/feedback."


def render_candidates(candidates: Sequence[str], limit: int = RENDER_LIMIT) -> List[str]:
    """
    Lines to show for `candidates`: the first `limit` words, then a
    "… and K more" line if truncated, or EMPTY_MESSAGE if there are none.
    """
    if not candidates:
        return [EMPTY_MESSAGE]
    shown = list(candidates[:max(0, limit)])
    if len(candidates) > len(shown):
        shown.append(f"… and {len(candidates) - len(shown)} more")
    return shown
