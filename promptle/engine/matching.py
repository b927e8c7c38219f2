"""
Fuzzy word matching between a guess token and a target token.

Given:
  - a normalized guess token
  - a normalized target token (or the target's token list)

Decide whether the guess "hits" the target word:
  - Levenshtein distance (unit cost insert / delete / substitute)
  - threshold keyed on the TARGET length:
        len(target) <= 3  -> exact match required ("a", "of", "the")
        len(target) >  3  -> one edit tolerated ("floting" ~ "floating")

The threshold is deliberately asymmetric: short words would otherwise collide
with each other ("cat" vs "kat", "in" vs "on").
"""

from __future__ import annotations

from typing import Iterable, List

# Target words longer than this tolerate one edit.
SHORT_WORD_MAX_LEN = 3


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between `a` and `b`.

    The DP table lives in one flat list (the "arena"), cell (i, j) at
    i * width + j, where i walks `a` and j walks `b`:
      row 0    = 0..len(b)
      column 0 = 0..len(a)
      cell     = diag if chars equal else 1 + min(up, left, diag)

    Examples:
      levenshtein("kitten", "sitting") -> 3
      levenshtein("floting", "floating") -> 1
    """
    la, lb = len(a), len(b)
    if la == 0:
        return lb
    if lb == 0:
        return la

    width = lb + 1
    table: List[int] = [0] * ((la + 1) * width)

    for j in range(width):
        table[j] = j
    for i in range(la + 1):
        table[i * width] = i

    for i in range(1, la + 1):
        row = i * width
        prev = row - width
        ca = a[i - 1]
        for j in range(1, width):
            if ca == b[j - 1]:
                table[row + j] = table[prev + j - 1]
            else:
                table[row + j] = 1 + min(
                    table[prev + j],      # delete
                    table[row + j - 1],   # insert
                    table[prev + j - 1],  # substitute
                )

    return table[la * width + lb]


def match_threshold(target: str) -> int:
    """Edits tolerated when matching against `target`."""
    return 1 if len(target) > SHORT_WORD_MAX_LEN else 0


def is_match(guess_token: str, target_token: str) -> bool:
    """True iff the guess token is within the target's threshold."""
    return levenshtein(guess_token, target_token) <= match_threshold(target_token)


def first_match(guess_token: str, target_tokens: Iterable[str]) -> str | None:
    """
    Return the first target token (in target order) that `guess_token`
    matches, or None.

    First match wins: a guess word that could fuzzily hit two different
    target words only credits the earlier one.
    """
    for t in target_tokens:
        if is_match(guess_token, t):
            return t
    return None
