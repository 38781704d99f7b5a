from pathlib import Path

import pytest
from packages.datasets import load_words, pretty_summary, validate_wordlists


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_words_filters_lines(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "Crane", "cranes", "", "cr4ne", "slate  ", "place"])
    assert load_words(p, 5) == ["crane", "slate", "place"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt", 5)


def test_validate_wordlists_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    answers = tmp_path / "answers.txt"
    _write(words, ["crane", "raise", "stare", "trace"])
    _write(answers, ["crane", "stare"])

    rep = validate_wordlists(5, str(words), str(answers))
    assert rep["passed"] is True
    assert rep["guesses_subset_dictionary"] is True
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "subset=True" in s and s.endswith("OK")


def test_validate_wordlists_dictionary_only(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "CRANE", "crane"])
    rep = validate_wordlists(5, str(words))
    assert rep["passed"] is True
    assert rep["guesses"] is None
    assert any("dropped" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert "guesses=-" in pretty_summary(rep)


def test_validate_wordlists_flags_problems(tmp_path: Path):
    words = tmp_path / "words.txt"
    answers = tmp_path / "answers.txt"
    _write(words, ["crane"])
    _write(answers, ["place"])
    rep = validate_wordlists(5, str(words), str(answers))
    assert rep["passed"] is True
    assert rep["guesses_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])

    rep = validate_wordlists(5, str(tmp_path / "missing.txt"))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])
