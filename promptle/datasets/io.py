from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List

from promptle.challenges import Challenge

# Keys a catalog entry must carry (caller field names).
CHALLENGE_FIELDS = ("id", "imageUrl", "prompt")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_challenges(p: Path | str) -> List[Challenge]:
    """
    Load a JSON catalog: a list of {"id", "imageUrl", "prompt"} objects.
    Raises FileNotFoundError / ValueError on a missing or malformed file.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{p}: catalog must be a JSON list, got {type(data).__name__}")

    out: List[Challenge] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict) or any(k not in entry for k in CHALLENGE_FIELDS):
            raise ValueError(f"{p}: entry {i} must have keys {list(CHALLENGE_FIELDS)}")
        out.append(Challenge(id=str(entry["id"]), image_url=str(entry["imageUrl"]),
                             prompt=str(entry["prompt"])))
    return out


def load_submissions(p: Path | str) -> List[Dict]:
    """
    Read a JSON Lines file of submissions (one object per line, blanks skipped).
    """
    out: List[Dict] = []
    for lineno, raw in enumerate(read_lines(p), start=1):
        if not raw.strip():
            continue
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"{p}:{lineno}: invalid JSON ({e.msg})") from e
        if not isinstance(obj, dict):
            raise ValueError(f"{p}:{lineno}: submission must be a JSON object")
        out.append(obj)
    return out


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one line per item to a UTF-8 text file (e.g. the words a guess
    missed). Every line ends in a newline, so no items means an empty file.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)
