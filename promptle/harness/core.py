"""
Play harness core primitives.

- Turn:       caller-side state for one attempt (revealed hints, penalty).
- run_case:   score a single guess, optionally drawing hints first.
- run_submission: run_case for one request-shaped record.
- iter_batch / run_batch: score many submissions against a catalog.
- Applies the 5-point-per-hint penalty at the harness layer; the engine only
  consumes the accumulated value.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or a request handler without changes.
"""

from __future__ import annotations

import datetime as dt
import random
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence

from promptle.challenges import Challenge, daily_challenge, get_challenge
from promptle.engine import score_guess, select_hint, validate_submission

# Single source of truth for the hint price (percentage points).
HINT_PENALTY_STEP = 5

# A daily score must beat this to be offered a leaderboard slot.
LEADERBOARD_MIN_SCORE = 50


@dataclass
class Turn:
    """
    One player's attempt at one challenge. Owns the hint state the engine
    reads but never stores.
    """
    challenge_id: str
    hints: List[str] = field(default_factory=list)
    hint_penalty: int = 0

    def request_hint(self, prompt: str, rng: random.Random | None = None) -> str | None:
        """
        Reveal one more word of `prompt` and charge for it.
        Returns None (and charges nothing) once every word is revealed.
        """
        hint = select_hint(prompt, self.hints, rng=rng)
        if hint is not None:
            self.hints.append(hint)
            self.hint_penalty += HINT_PENALTY_STEP
        return hint

    def reset(self) -> None:
        """Start over on the same challenge (try again)."""
        self.hints = []
        self.hint_penalty = 0


def leaderboard_eligible(score: int, *, is_daily: bool) -> bool:
    """Only today's challenge with a score above the bar may be submitted."""
    return is_daily and score > LEADERBOARD_MIN_SCORE


def share_text(result: Dict) -> str:
    """The blurb a player copies after a round."""
    matched = len(result["matched_words"])
    return (
        f"I scored {result['score']}% on today's Promptle! 🎨\n"
        f"I guessed {matched}/{result['total_words']} words correctly.\n"
        f"Can you beat my score?\n#PromptleGame"
    )


def run_case(
        challenge: Challenge,
        guess,
        *,
        hints: Iterable[str] = (),
        hint_penalty=0,
        request_hints=0,
        seed: int | None = None,
        is_daily: bool = False,
) -> Dict:
    """
    Score one submission.

    Args:
        challenge:     the challenge being guessed
        guess:         raw guess (validated; non-strings score as invalid)
        hints:         words already revealed before this call
        hint_penalty:  penalty already accrued for those hints
        request_hints: extra hints to draw (each costs HINT_PENALTY_STEP;
                       a non-int or negative count makes the case invalid)
        seed:          RNG seed so hint draws are reproducible
        is_daily:      whether this is today's challenge (leaderboard rule)

    Returns:
        dict with keys:
            challenge_id, guess, hints, hint_penalty, valid, score,
            matched_words, total_words, time_ms, eligible
    """
    hints = list(hints) if isinstance(hints, (list, tuple)) else hints
    if not validate_submission(guess, hint_penalty, hints, request_hints):
        return {
            "challenge_id": challenge.id, "guess": guess, "hints": hints,
            "hint_penalty": hint_penalty, "valid": False, "score": 0,
            "matched_words": [], "total_words": 0, "time_ms": 0.0, "eligible": False,
        }

    turn = Turn(challenge.id, hints=list(hints), hint_penalty=hint_penalty)
    rng = random.Random(seed)
    for _ in range(request_hints):
        if turn.request_hint(challenge.prompt, rng) is None:
            break  # every word already revealed

    t0 = time.perf_counter_ns()
    res = score_guess(guess, challenge.prompt, turn.hint_penalty, turn.hints)
    dt_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "challenge_id": challenge.id,
        "guess": guess,
        "hints": list(turn.hints),
        "hint_penalty": turn.hint_penalty,
        "valid": True,
        "score": res.score,
        "matched_words": list(res.matched_words),
        "total_words": res.total_words,
        "time_ms": dt_ms,
        "eligible": leaderboard_eligible(res.score, is_daily=is_daily),
    }


def run_submission(
        sub: Dict,
        challenges: Sequence[Challenge],
        *,
        seed: int | None = None,
        daily_id: str | None = None,
) -> Dict:
    """
    Score one submission record ({"challengeId", "guess", "hints"?, "hintPenalty"?,
    "requestHints"?}). Malformed fields make the case invalid; unknown or
    non-string challenge ids raise ValueError.
    """
    challenge = get_challenge(sub.get("challengeId"), challenges)
    return run_case(
        challenge,
        sub.get("guess"),
        hints=sub.get("hints", []),
        hint_penalty=sub.get("hintPenalty", 0),
        request_hints=sub.get("requestHints", 0),
        seed=seed,
        is_daily=(challenge.id == daily_id),
    )


def iter_batch(
        submissions: Iterable[Dict],
        challenges: Sequence[Challenge],
        *,
        seed: int | None = None,
        today: dt.date | None = None,
) -> Iterator[Dict]:
    """
    Score submission records back-to-back, yielding one result per record
    (see run_submission). Lazy, so callers can wrap either side in progress.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    daily_id = daily_challenge(today, challenges).id

    for idx, sub in enumerate(submissions, start=1):
        case_seed = None if seed is None else (seed + idx)
        yield run_submission(sub, challenges, seed=case_seed, daily_id=daily_id)


def run_batch(
        submissions: Iterable[Dict],
        challenges: Sequence[Challenge],
        *,
        seed: int | None = None,
        today: dt.date | None = None,
) -> List[Dict]:
    """Eager form of iter_batch."""
    return list(iter_batch(submissions, challenges, seed=seed, today=today))
