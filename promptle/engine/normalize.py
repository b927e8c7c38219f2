"""
Prompt/guess normalization.

Turns raw text into the canonical token sequence the scorer and hint
selector work on:
  - lowercase
  - strip the fixed punctuation class  . , / # ! $ % ^ & * ; : { } = - _ ` ~ ( )
    (characters are removed, not whole tokens: "neon-lit" -> "neonlit")
  - split on runs of whitespace, drop empties
  - dedupe, keeping the first-seen order (deterministic for tests/hints)

Examples:
  normalize("A cute cat, a CUTE dog!")  -> ["a", "cute", "cat", "dog"]
  normalize("... --- ...")              -> []
"""

from __future__ import annotations

import re
from typing import Iterable, List

# Note: the apostrophe and quotes are NOT in the class; only these go.
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()"
_PUNCT_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")


def normalize(text: str | None) -> List[str]:
    """
    Return the unique lowercase tokens of `text` in first-seen order.

    Always succeeds; None and punctuation/whitespace-only input give [].
    """
    if not text:
        return []

    cleaned = _PUNCT_RE.sub("", text.lower())

    # dict preserves insertion order -> stable dedupe
    return list(dict.fromkeys(w for w in cleaned.split() if w))


def tokens_to_text(tokens: Iterable[str]) -> str:
    """Join tokens back into a single-spaced string."""
    return " ".join(tokens)
