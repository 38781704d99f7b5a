"""
Output writers for batch runs.

- write_csv:      one row per game with its guess/pattern history.
- write_manifest: JSON with the run configuration and dictionary report.
- timestamp_id / git_commit_or_unknown: run identification.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Columns: strategy, answer, status, success, tries, time_ms, then
    guess_i/patt_i for i in 1..max(max_turns, longest game).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    width = max([max_turns] + [len(r.get("history", [])) for r in results])
    fields = ["strategy", "answer", "status", "success", "tries", "time_ms"]
    for i in range(1, width + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "strategy": r.get("strategy", "?"),
                "answer": r["answer"],
                "status": r["status"],
                "success": r["success"],
                "tries": r["tries"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, width + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current checkout; 'unknown' otherwise.
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
