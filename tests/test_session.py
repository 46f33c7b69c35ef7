import logging

import pytest
from packages.engine import FeedbackFormatError
from packages.session import (
    DuplicateGuessError,
    GuessNotAllowedError,
    SessionConfig,
    SolverSession,
    render_candidates,
)

WORDS = ["crate", "trace", "react", "cater", "crane", "raise", "stare", "glass", "class"]


def test_submit_shrinks_and_reports_status():
    s = SolverSession(WORDS)
    r = s.submit("raise", "yyxxg")
    assert r.before == len(WORDS)
    assert r.after == len(s.candidates) <= r.before
    assert set(s.candidates) <= set(WORDS)
    assert r.status() == f"Applied RAISE / YYXXG. Remaining: {r.after} (was {len(WORDS)})."


def test_submit_all_green_then_reset():
    s = SolverSession(WORDS)
    s.submit("crate", "GGGGG")
    assert s.candidates == ["crate"]
    assert s.previous_guesses == ["crate"]
    s.reset()
    assert s.candidates == WORDS
    assert s.previous_guesses == []
    # history is cleared, so the same guess is accepted again
    s.submit("crate", "GGGGG")


def test_duplicate_guess_rejected():
    s = SolverSession(WORDS)
    s.submit("crane", "XXXXX")
    with pytest.raises(DuplicateGuessError):
        s.submit("CRANE", "XXXXX")


def test_duplicate_guess_allowed_when_configured():
    s = SolverSession(WORDS, SessionConfig(prevent_duplicate_guesses=False))
    s.submit("crane", "XXXXX")
    s.submit("crane", "XXXXX")
    assert len(s.history) == 2


def test_unknown_guess_rejected_unless_allowed():
    with pytest.raises(GuessNotAllowedError):
        SolverSession(WORDS).submit("zzzzz", "XXXXX")
    s = SolverSession(WORDS, SessionConfig(require_guess_in_dictionary=False))
    assert s.submit("zzzzz", "XXXXX").after == len(WORDS)


def test_malformed_feedback_leaves_candidates_untouched():
    s = SolverSession(WORDS)
    with pytest.raises(FeedbackFormatError):
        s.submit("crate", "GGG")
    assert s.candidates == WORDS and s.history == []


def test_empty_result_is_not_an_error():
    s = SolverSession(WORDS)
    r = s.submit("glass", "GGGGX")
    assert r.after == 0 and s.candidates == []


def test_render_candidates():
    assert render_candidates([]) == ["No candidates remain. Check your guesses/feedback."]
    assert render_candidates(["crate", "trace"]) == ["crate", "trace"]
    assert render_candidates(WORDS, limit=2) == ["crate", "trace", f"… and {len(WORDS) - 2} more"]


def test_dictionary_check_normalizes_guess():
    s = SolverSession(WORDS)
    r = s.submit("  CRATE ", "GGGGG")
    assert r.guess == "crate" and s.candidates == ["crate"]
    with pytest.raises(GuessNotAllowedError, match='"ABBEY" is not in the dictionary.'):
        s.submit("abbey", "XXXXX")


def test_submit_logs_counts(caplog):
    s = SolverSession(WORDS)
    with caplog.at_level(logging.INFO, logger="packages.session.core"):
        s.submit("crate", "GGGGG")
        s.submit("trace", "XXXXX")
    assert f"applied crate / GGGGG: {len(WORDS)} -> 1 candidates" in caplog.text
    assert "no candidates remain after trace / XXXXX" in caplog.text
