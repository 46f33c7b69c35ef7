import csv
import json

from packages.harness import audit_batch, audit_case, sample_targets, summarize, write_csv, write_manifest

WORDS = ["crane", "raise", "stare", "trace", "cared", "glass", "class", "sassy", "eerie", "geese"]


def test_audit_case_retains_target():
    r = audit_case("glass", "sassy", WORDS)
    assert r["pattern"] == "YYXGX"
    assert r["retained"] is True
    assert 1 <= r["remaining"] <= r["before"] == len(WORDS)


def test_audit_batch_all_pairs_pass():
    rows = audit_batch(WORDS, ["crate", "sassy", "eerie"], WORDS)
    assert len(rows) == len(WORDS) * 3
    s = summarize(rows)
    assert s["passed"] is True and s["failures"] == 0
    assert s["pairs"] == len(rows)


def test_summarize_empty():
    assert summarize([])["passed"] is True


def test_sample_targets_deterministic():
    a = sample_targets(WORDS, 4, seed=7)
    b = sample_targets(WORDS, 4, seed=7)
    assert a == b and len(a) == 4 and set(a) <= set(WORDS)
    assert sample_targets(WORDS, None, seed=7) == WORDS
    assert sample_targets(WORDS, 100, seed=7) == WORDS


def test_write_outputs(tmp_path):
    rows = audit_batch(["glass"], ["sassy"], WORDS)
    csv_path = write_csv(rows, str(tmp_path / "out" / "audit.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        got = list(csv.DictReader(f))
    assert got[0]["pattern"] == "'YYXGX"
    assert got[0]["retained"] == "True"

    m = write_manifest({"summary": summarize(rows)}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["summary"]["passed"] is True
