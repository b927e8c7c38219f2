"""
I/O utilities for scoring runs.

Responsibilities:
- write_csv:     flatten per-submission results into a tidy CSV (one row per case).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Free-text cells that start with = + - @ are prefixed with an apostrophe to
  keep Excel from interpreting player guesses as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = [
    "challenge_id", "guess", "valid", "score", "matched", "total_words",
    "hint_penalty", "hints", "eligible", "time_ms", "matched_words",
]


def _excel_safe_text(s) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "=cat in space" -> "'=cat in space"
    """
    s = "" if s is None else str(s)
    return "'" + s if s[:1] in ("=", "+", "-", "@") else s


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of case results to CSV.

    Schema (columns): see CSV_FIELDS. List-valued fields (hints, matched_words)
    are joined with a single space; every free-text cell is Excel-safe.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            hints = r.get("hints")
            w.writerow({
                "challenge_id": r["challenge_id"],
                "guess": _excel_safe_text(r.get("guess")),
                "valid": r["valid"],
                "score": r["score"],
                "matched": len(r["matched_words"]),
                "total_words": r["total_words"],
                "hint_penalty": r.get("hint_penalty", 0),
                "hints": _excel_safe_text(" ".join(map(str, hints)) if isinstance(hints, list) else hints),
                "eligible": r.get("eligible", False),
                "time_ms": round(float(r["time_ms"]), 3),
                "matched_words": _excel_safe_text(" ".join(r["matched_words"])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and catalog validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (catalog, submissions, seed, today, outdir)
      - catalog: output of datasets.validate_catalog(...)
      - summary: output of harness.stats.summarize_scores(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
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
