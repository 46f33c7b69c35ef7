from pathlib import Path

import pytest
from packages.datasets import (
    FALLBACK_WORDS,
    DictionaryError,
    fallback_dictionary,
    load_dictionary,
    parse_dictionary,
    pretty_summary,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_parse_dictionary_lenient_rules():
    text = "\ufeffCrate\r\n  trace \n\nreact\ncrate\nabc\nsl@te\n   \ncater\n"
    rep = parse_dictionary(text)
    assert rep.words == ("crate", "trace", "react", "cater")
    assert rep.invalid == ["abc", "sl@te"]
    assert rep.duplicates == 1
    assert rep.empty == 2
    assert rep.skipped == 3


def test_load_dictionary_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare", "RAISE", "toolong"])

    rep = load_dictionary(p)
    assert rep.words == ("crane", "raise", "stare")
    assert rep.count == 3
    assert len(rep.sha256) == 64
    s = pretty_summary(rep)
    assert s.startswith("Loaded 3 valid words in ")
    assert "Skipped 1 invalid and 1 duplicates/empties." in s


def test_load_dictionary_bom_file(tmp_path: Path):
    p = tmp_path / "bom.txt"
    p.write_bytes("\ufeffadieu\nroate\n".encode("utf-8"))
    assert load_dictionary(p).words == ("adieu", "roate")


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError) as exc:
        load_dictionary(tmp_path / "nope.txt")
    # missing file and empty word list are distinct failures
    assert not isinstance(exc.value, DictionaryError)


def test_load_dictionary_no_valid_words(tmp_path: Path):
    p = tmp_path / "bad.txt"
    _write(p, ["abc", "", "123456"])
    with pytest.raises(DictionaryError, match="no valid 5-letter words"):
        load_dictionary(p)


def test_fallback_dictionary():
    rep = fallback_dictionary()
    assert rep.words == FALLBACK_WORDS
    assert len(set(FALLBACK_WORDS)) == 10


def test_clean_wordlist_script(tmp_path: Path):
    from script import clean_wordlist

    src = tmp_path / "raw.txt"
    out = tmp_path / "clean.txt"
    _write(src, ["Trace", "crate", "", "trace", "x"])
    clean_wordlist.main(["--in", str(src), "--out", str(out), "--sort"])
    assert out.read_text(encoding="utf-8") == "crate\ntrace\n"
