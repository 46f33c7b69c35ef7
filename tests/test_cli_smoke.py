import io
from pathlib import Path

from apps.cli import audit, solve


def _words(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("crate\ntrace\nreact\ncater\nglass\nclass\nsassy\n", encoding="utf-8")
    return str(p)


def test_solve_batch(tmp_path, capsys):
    rc = solve.main(["--words", _words(tmp_path), "--guess", "crate:GGGGG"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Loaded 7 valid words" in out
    assert "Applied CRATE / GGGGG. Remaining: 1 (was 7)." in out


def test_solve_with_answer(tmp_path, capsys):
    rc = solve.main(["--words", _words(tmp_path), "--answer", "glass", "--guess", "sassy"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Applied SASSY / YYXGX." in out


def test_solve_rejects_bad_feedback(tmp_path, capsys):
    rc = solve.main(["--words", _words(tmp_path), "--guess", "crate:GGGG"])
    assert rc == 2
    assert "Feedback must be 5 characters" in capsys.readouterr().err


def test_solve_missing_dictionary_fallback(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert solve.main(["--words", missing, "--guess", "crate:GGGGG"]) == 1
    assert solve.main(["--words", missing, "--fallback", "--guess", "crate:GGGGG"]) == 0
    assert "Remaining: 1 (was 10)" in capsys.readouterr().out


def test_audit_writes_reports(tmp_path, capsys):
    outdir = tmp_path / "reports"
    rc = audit.main(["--words", _words(tmp_path), "--guesses", "sassy", "crate",
                     "--sample", "0", "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    assert len(list(outdir.glob("audit_*.csv"))) == 1
    assert len(list(outdir.glob("audit_*_manifest.json"))) == 1
    assert "| OK" in capsys.readouterr().out


def _three_words(tmp_path: Path) -> str:
    p = tmp_path / "three.txt"
    p.write_text("crate\ntrace\nreact\n", encoding="utf-8")
    return str(p)


def test_solve_interactive_reset_clears_history(tmp_path, capsys, monkeypatch):
    script = "crate ggggg\ncrate ggggg\nreset\ncrate ggggg\nquit\nreact xxxxx\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    rc = solve.main(["--words", _three_words(tmp_path)])
    captured = capsys.readouterr()
    assert rc == 0
    assert 'You already guessed "CRATE".' in captured.err
    assert "Reset. Loaded 3 words." in captured.out
    # applied before and after the reset; nothing after quit
    assert captured.out.count("Applied CRATE / GGGGG. Remaining: 1 (was 3).") == 2
    assert "REACT" not in captured.out


def test_solve_interactive_stops_at_eof(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\ncrate\ntrace yg\n"))
    rc = solve.main(["--words", _three_words(tmp_path)])
    captured = capsys.readouterr()
    assert rc == 0
    assert "Expected: GUESS FEEDBACK" in captured.err
    assert "Validation error: Feedback must be 5 characters" in captured.err
    assert "Applied" not in captured.out


def test_solve_interactive_with_answer_scores_bare_words(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("trace\nabc\nreact\n"))
    rc = solve.main(["--words", _three_words(tmp_path), "--answer", "crate"])
    captured = capsys.readouterr()
    assert rc == 0
    assert "Applied TRACE / YGGYG. Remaining: 1 (was 3)." in captured.out
    # a wrong-length word gets no computed feedback and is rejected as a guess
    assert "Validation error: Guess must be 5 letters (A–Z)." in captured.err
    assert "Applied REACT / " in captured.out
