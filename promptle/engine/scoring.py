"""
Promptle scoring for a single (guess, target prompt) pair.

Conventions:
  - score          : integer percentage 0..100
  - matched_words  : target words the player hit, plus every revealed hint
  - total_words    : number of unique tokens in the target prompt

This implementation is:
  - pure (no I/O, no state between calls)
  - typo tolerant (see matching.is_match)
  - deterministic (same inputs -> same outputs)

Algorithm:
  1) Normalize guess and target into unique tokens.
  2) Seed the matched set with the used hints; a revealed word always counts,
     whether or not the player typed it.
  3) For each guess token, credit the FIRST target token it matches.
     Matched is a set, so hitting the same target word twice is a no-op.
  4) base = round_half_up(100 * |matched| / total_words)  (0 if no words)
  5) final = clamp(base - hint_penalty, 0, 100)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .matching import first_match
from .normalize import normalize


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one scoring call. Built fresh per guess, never cached."""
    score: int
    matched_words: Tuple[str, ...]
    total_words: int
    original_prompt: str

    def as_dict(self) -> Dict:
        """Field names as the request layer serializes them."""
        return {
            "score": self.score,
            "matchedWords": list(self.matched_words),
            "totalWords": self.total_words,
            "originalPrompt": self.original_prompt,
        }


def percent_half_up(part: int, whole: int) -> int:
    """
    round(100 * part / whole) with halves rounded UP, in integer arithmetic.

    Examples:
      percent_half_up(1, 2) -> 50
      percent_half_up(1, 8) -> 13   (12.5 rounds up)
      percent_half_up(6, 7) -> 86
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def score_guess(
        guess: str,
        target_prompt: str,
        hint_penalty: int = 0,
        used_hints: Iterable[str] = (),
) -> ScoreResult:
    """
    Score `guess` against `target_prompt`.

    Args:
      guess        : raw player text
      target_prompt: the challenge's known prompt
      hint_penalty : percentage points to deduct (caller-owned, >= 0)
      used_hints   : words already revealed to the player

    Returns:
      ScoreResult. Never raises for string inputs; an empty target scores 0.

    Example:
      score_guess("a cute kat astronaut floting in space",
                  "a cute cat astronaut floating in space").score -> 86
    """
    guess_tokens = normalize(guess)
    target_tokens = normalize(target_prompt)

    # Ordered set: hints first, then hits in discovery order.
    matched: Dict[str, None] = dict.fromkeys(h.lower() for h in used_hints)

    for g in guess_tokens:
        hit = first_match(g, target_tokens)
        if hit is not None:
            matched[hit] = None

    total = len(target_tokens)
    base = percent_half_up(len(matched), total) if total else 0

    final = max(0, base - hint_penalty)
    final = min(final, 100)

    return ScoreResult(
        score=final,
        matched_words=tuple(matched),
        total_words=total,
        original_prompt=target_prompt,
    )
