"""
Catalog validator for promptle.

What this module does:
- Validate a challenge catalog file (JSON list of {"id", "imageUrl", "prompt"}).
- Enforce shape rules (non-empty string fields, prompts that normalize to at
  least one token) and flag duplicate ids; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from promptle.datasets import validate_catalog, pretty_summary
    rep = validate_catalog("data/challenges.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib
import json

from promptle.engine import normalize
from .io import CHALLENGE_FIELDS


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class CatalogReport:
    """Diagnostics and metadata for one catalog file."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    count: int             # number of VALID entries
    unique_ids: int        # distinct ids among valid entries
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    invalid_entries: int   # entries failing the shape rules
    token_counts: Dict[str, int] = field(default_factory=dict)  # id -> unique prompt tokens
    passed: bool = False
    issues: List[str] = field(default_factory=list)


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


def _entry_ok(entry) -> bool:
    """Every required field present, a string, and non-blank."""
    if not isinstance(entry, dict):
        return False
    for k in CHALLENGE_FIELDS:
        v = entry.get(k)
        if not isinstance(v, str) or not v.strip():
            return False
    return True


# -----------------------------
# Public API
# -----------------------------

def validate_catalog(path: str) -> Dict:
    """
    Validate a challenge catalog file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see CatalogReport) with counts,
        SHA-256, per-challenge token counts, `passed` (strict: parses, non-empty,
        no invalid entries, no duplicate ids) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = CatalogReport(path, False, 0, 0, "", 0,
                            issues=[f"catalog file not found: {path}"])
        return asdict(rep)

    sha = _sha256_file(p)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        rep = CatalogReport(str(p), True, 0, 0, sha, 0,
                            issues=[f"catalog is not valid JSON: {e.msg} (line {e.lineno})"])
        return asdict(rep)

    if not isinstance(data, list):
        rep = CatalogReport(str(p), True, 0, 0, sha, 0,
                            issues=[f"catalog must be a JSON list, got {type(data).__name__}"])
        return asdict(rep)

    issues: List[str] = []
    invalid = 0
    ids: List[str] = []
    token_counts: Dict[str, int] = {}

    for i, entry in enumerate(data):
        if not _entry_ok(entry):
            invalid += 1
            continue
        n_tokens = len(normalize(entry["prompt"]))
        if n_tokens == 0:
            # would always score 0; treat as broken data
            invalid += 1
            issues.append(f"entry {i} ({entry['id']}) prompt has no scorable words")
            continue
        ids.append(entry["id"])
        token_counts[entry["id"]] = n_tokens

    if invalid:
        issues.append(f"catalog has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if not ids:
        issues.append("catalog contains 0 valid challenges")

    unique = set(ids)
    if len(unique) != len(ids):
        dupes = sorted({x for x in ids if ids.count(x) > 1})[:5]
        issues.append(f"catalog contains duplicate ids (e.g., {dupes})")

    passed = invalid == 0 and len(ids) > 0 and len(unique) == len(ids)

    rep = CatalogReport(
        path=str(p),
        exists=True,
        count=len(ids),
        unique_ids=len(unique),
        sha256=sha,
        invalid_entries=invalid,
        token_counts=token_counts,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        catalog=data/challenges.json | challenges=7 (uniq=7, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"catalog={report['path']} | challenges={report['count']} "
        f"(uniq={report['unique_ids']}, sha={sha}) "
        f"| invalid={report['invalid_entries']} | {status}"
    )
