import datetime as dt

import pytest
from promptle.challenges import Challenge, DEFAULT_CHALLENGES
from promptle.engine import normalize
from promptle.harness import (
    HINT_PENALTY_STEP, Turn, leaderboard_eligible, share_text, run_case, run_batch, iter_batch,
    summarize_scores,
)

OCEAN = Challenge("sea", "https://img/sea.webp", "ocean waves")


def test_run_case_smoke():
    c = DEFAULT_CHALLENGES[0]
    r = run_case(c, c.prompt, seed=42)
    assert r["valid"] is True and r["score"] == 100
    assert r["total_words"] == len(normalize(c.prompt))
    assert r["hints"] == [] and r["hint_penalty"] == 0


def test_run_case_draws_hints_reproducibly():
    c = DEFAULT_CHALLENGES[1]
    a = run_case(c, "steampunk city", request_hints=2, seed=42)
    b = run_case(c, "steampunk city", request_hints=2, seed=42)
    assert a["hints"] == b["hints"] and len(a["hints"]) == 2
    assert a["hint_penalty"] == 2 * HINT_PENALTY_STEP
    assert set(a["hints"]) <= set(a["matched_words"])


def test_run_case_stops_drawing_when_prompt_exhausted():
    r = run_case(OCEAN, "", request_hints=5, seed=1)
    assert sorted(r["hints"]) == ["ocean", "waves"]
    assert r["hint_penalty"] == 10
    assert r["score"] == 90


def test_run_case_keeps_prior_hints():
    r = run_case(OCEAN, "waves", hints=["Ocean"], hint_penalty=5)
    assert r["score"] == 95
    assert r["matched_words"] == ["ocean", "waves"]


@pytest.mark.parametrize("guess,penalty,hints", [
    (None, 0, []),
    ("ocean", -5, []),
    ("ocean", 0, "ocean"),
])
def test_run_case_invalid_submission_scores_zero(guess, penalty, hints):
    r = run_case(OCEAN, guess, hints=hints, hint_penalty=penalty)
    assert r["valid"] is False and r["score"] == 0 and r["eligible"] is False


@pytest.mark.parametrize("request_hints", [-1, None, True, "2"])
def test_run_case_malformed_hint_request_is_invalid(request_hints):
    r = run_case(OCEAN, "ocean", request_hints=request_hints)
    assert r["valid"] is False and r["score"] == 0 and r["hints"] == []


def test_turn_tracks_hints_and_penalty():
    t = Turn("sea")
    assert t.request_hint(OCEAN.prompt) in ("ocean", "waves")
    assert t.request_hint(OCEAN.prompt) is not None
    assert t.request_hint(OCEAN.prompt) is None
    assert t.hint_penalty == 10 and len(t.hints) == 2
    t.reset()
    assert t.hints == [] and t.hint_penalty == 0


@pytest.mark.parametrize("score,is_daily,expected", [
    (51, True, True),
    (50, True, False),
    (100, False, False),
])
def test_leaderboard_eligible(score, is_daily, expected):
    assert leaderboard_eligible(score, is_daily=is_daily) is expected


def test_share_text():
    r = run_case(OCEAN, "ocean")
    assert share_text(r) == (
        "I scored 50% on today's Promptle! 🎨\n"
        "I guessed 1/2 words correctly.\n"
        "Can you beat my score?\n#PromptleGame"
    )


def test_run_batch_marks_daily_and_seeds_per_case():
    today = dt.date(2025, 1, 1)  # day1 is the daily
    day1 = DEFAULT_CHALLENGES[0].prompt
    subs = [
        {"challengeId": "day1", "guess": day1},
        {"challengeId": "day2", "guess": DEFAULT_CHALLENGES[1].prompt},
        {"challengeId": "day3", "guess": "glowing mushrooms", "requestHints": 1},
        {"challengeId": "day1", "guess": "cat", "hintPenalty": -1},
    ]
    out = run_batch(subs, DEFAULT_CHALLENGES, seed=7, today=today)
    assert [r["eligible"] for r in out] == [True, False, False, False]
    assert [r["valid"] for r in out] == [True, True, True, False]
    assert out[2]["hint_penalty"] == HINT_PENALTY_STEP

    again = run_batch(subs, DEFAULT_CHALLENGES, seed=7, today=today)
    assert again[2]["hints"] == out[2]["hints"]


def test_run_batch_unknown_challenge():
    with pytest.raises(ValueError, match="Unknown challenge id"):
        run_batch([{"challengeId": "zzz", "guess": "x"}], DEFAULT_CHALLENGES)


def test_summarize_scores():
    results = [
        {"valid": True, "score": 100, "eligible": True},
        {"valid": True, "score": 50, "eligible": False},
        {"valid": True, "score": 0, "eligible": False},
        {"valid": False, "score": 0, "eligible": False},
    ]
    s = summarize_scores(results)
    assert s["num_cases"] == 4 and s["num_valid"] == 3 and s["eligible"] == 1
    assert s["mean"] == 50.0 and s["median"] == 50.0
    assert (s["min"], s["max"]) == (0, 100)
    assert s["perfect_rate"] == round(1 / 3, 4)

    empty = summarize_scores([])
    assert empty["num_cases"] == 0 and empty["mean"] == 0.0


def test_run_batch_malformed_hint_requests_are_invalid_cases():
    subs = [
        {"challengeId": "day1", "guess": "cat", "requestHints": None},
        {"challengeId": "day1", "guess": "cat", "requestHints": True},
        {"challengeId": "day1", "guess": "cat", "requestHints": -1},
        {"challengeId": "day1", "guess": "cat"},
    ]
    out = run_batch(subs, DEFAULT_CHALLENGES, seed=7)
    assert [r["valid"] for r in out] == [False, False, False, True]


@pytest.mark.parametrize("challenge_id", [["day1"], None, 1])
def test_run_batch_non_string_challenge_id(challenge_id):
    with pytest.raises(ValueError, match="must be a string"):
        run_batch([{"challengeId": challenge_id, "guess": "x"}], DEFAULT_CHALLENGES)


def test_iter_batch_is_lazy_and_matches_run_batch():
    today = dt.date(2025, 1, 3)
    subs = [
        {"challengeId": "day3", "guess": "forest", "requestHints": 2},
        {"challengeId": "day1", "guess": "cat"},
        {"challengeId": "zzz", "guess": "x"},
    ]
    cases = iter_batch(subs, DEFAULT_CHALLENGES, seed=11, today=today)
    first = next(cases)
    assert first["eligible"] is False and len(first["hints"]) == 2
    assert next(cases)["challenge_id"] == "day1"
    with pytest.raises(ValueError, match="Unknown challenge id"):
        next(cases)

    eager = run_batch(subs[:2], DEFAULT_CHALLENGES, seed=11, today=today)
    assert eager[0]["hints"] == first["hints"]
