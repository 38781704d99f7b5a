"""
Dictionary validator.

Checks the word list(s) a run will use:
- the full dictionary (every word the assistant may type), and
- an optional reduced guess list (words that can be the answer).

Reports counts, duplicates, dropped lines and SHA-256 per file, and whether
the guess list is a subset of the dictionary. A guess list outside the
dictionary is allowed (those words get scored too) but is flagged.

Typical use:
    rep = validate_wordlists(5, "words.txt", "answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from .io import keep_word


@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int           # words kept after filtering
    unique_count: int
    invalid_lines: int   # lines dropped by the filter (blank lines excluded)
    sha256: str          # of raw bytes; empty if missing


@dataclass
class ValidationReport:
    N: int
    dictionary: FileReport
    guesses: Optional[FileReport]
    guesses_subset_dictionary: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _inspect(path: str, N: int) -> tuple[FileReport, set]:
    p = Path(path)
    if not p.exists():
        return FileReport(path, False, 0, 0, 0, ""), set()

    kept: List[str] = []
    invalid = 0
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if keep_word(w, N):
                kept.append(w)
            else:
                invalid += 1

    words = set(kept)
    return FileReport(str(p), True, len(kept), len(words), invalid, _sha256_file(p)), words


def validate_wordlists(N: int, dictionary_path: str,
                       guesses_path: Optional[str] = None) -> Dict:
    """
    Validate the dictionary (and optional guess list) for word length N.

    Returns a JSON-serialisable dict (ValidationReport schema). `passed`
    requires every given file to exist and contain at least one word;
    dropped lines, duplicates and a non-subset guess list are only issues.
    """
    issues: List[str] = []

    dict_rep, dict_words = _inspect(dictionary_path, N)
    guess_rep, guess_words = (None, set())
    if guesses_path is not None:
        guess_rep, guess_words = _inspect(guesses_path, N)

    for label, rep in (("dictionary", dict_rep), ("guesses", guess_rep)):
        if rep is None:
            continue
        if not rep.exists:
            issues.append(f"{label} file not found: {rep.path}")
            continue
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} dropped {rep.invalid_lines} line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate words")

    subset_ok = guess_words.issubset(dict_words)
    if not subset_ok:
        missing = sorted(guess_words - dict_words)[:5]
        issues.append(f"guesses not subset of dictionary (e.g., {missing})")

    passed = all(rep.exists and rep.count > 0
                 for rep in (dict_rep, guess_rep) if rep is not None)

    return asdict(ValidationReport(
        N=N,
        dictionary=dict_rep,
        guesses=guess_rep,
        guesses_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | dictionary=12972 (uniq=12972, sha=abc123...) | guesses=2315 (...) | subset=True | OK
    """
    def part(label: str, rep: Optional[Dict]) -> str:
        if rep is None:
            return f"{label}=-"
        return f"{label}={rep['count']} (uniq={rep['unique_count']}, sha={(rep.get('sha256') or '')[:12]})"

    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | {part('dictionary', report['dictionary'])} "
        f"| {part('guesses', report['guesses'])} "
        f"| subset={report['guesses_subset_dictionary']} | {status}"
    )
