"""
Lightweight submission validation.

This module answers the question: "Is this request well-formed enough to
score?" It is the caller's check; the scoring functions themselves assume
their inputs are sane. A submission is valid iff:
  - the guess is a string (empty is fine; it just scores 0)
  - the hint penalty is a non-negative int (bools rejected)
  - hints is a list/tuple of strings
  - the number of hints to draw, if any, is a non-negative int (bools rejected)
"""

from __future__ import annotations

from typing import Any


def _non_negative_int(v: Any) -> bool:
    # bool is a subclass of int; `true` is not a count
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0


def validate_submission(guess: Any, hint_penalty: Any = 0, hints: Any = (),
                        request_hints: Any = 0) -> bool:
    """
    Return True if the submission fields are acceptable.

    Notes:
      - JSON decoders hand us whatever the client sent, so every field is
        type-checked rather than trusted.
    """
    if not isinstance(guess, str):
        return False

    if not _non_negative_int(hint_penalty) or not _non_negative_int(request_hints):
        return False

    if not isinstance(hints, (list, tuple)):
        return False
    return all(isinstance(h, str) for h in hints)
