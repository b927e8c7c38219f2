# apps/cli/play.py
"""
Score one guess from the command line.

Either pick a catalog challenge (--challenge day3) or score against a raw
prompt (--prompt "..."). Hints can be passed as already revealed (--hint)
or drawn here (--request-hints N, seeded). Prints the result as JSON and can
save the prompt words the guess missed (--missed PATH, one per line).
"""

from __future__ import annotations

import argparse
import json

from promptle.challenges import DEFAULT_CHALLENGES, Challenge, get_challenge
from promptle.datasets import load_challenges, write_lines
from promptle.engine import normalize
from promptle.harness import run_case, share_text


def _non_negative_int(s: str) -> int:
    try:
        n = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {s!r}") from e
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def main():
    ap = argparse.ArgumentParser(description="promptle — score a single guess")
    ap.add_argument("--guess", required=True, help="the player's guess")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--challenge", help="challenge id (e.g. day1)")
    src.add_argument("--prompt", help="score against this prompt instead of a catalog entry")
    ap.add_argument("--catalog", help="JSON challenge catalog for --challenge "
                                      "(default: built-in rotation)")
    ap.add_argument("--hint", action="append", default=[], dest="hints",
                    help="an already revealed word (repeatable)")
    ap.add_argument("--hint-penalty", type=_non_negative_int, default=0,
                    help="penalty already accrued for --hint words")
    ap.add_argument("--request-hints", type=_non_negative_int, default=0,
                    help="reveal N more words before scoring (5 points each)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for hint draws")
    ap.add_argument("--missed", help="write the prompt words the guess missed to this file")
    ap.add_argument("--share", action="store_true", help="also print the share text")
    args = ap.parse_args()

    if args.prompt is not None:
        if args.catalog:
            ap.error("--catalog only applies to --challenge, not --prompt")
        challenge = Challenge(id="adhoc", image_url="", prompt=args.prompt)
    else:
        challenges = load_challenges(args.catalog) if args.catalog else DEFAULT_CHALLENGES
        try:
            challenge = get_challenge(args.challenge, challenges)
        except ValueError as e:
            ap.error(str(e))

    r = run_case(
        challenge,
        args.guess,
        hints=args.hints,
        hint_penalty=args.hint_penalty,
        request_hints=args.request_hints,
        seed=args.seed,
    )

    print(json.dumps({
        "score": r["score"],
        "matchedWords": r["matched_words"],
        "totalWords": r["total_words"],
        "hints": r["hints"],
        "hintPenalty": r["hint_penalty"],
        "originalPrompt": challenge.prompt,
    }, indent=2))
    if args.missed:
        matched = set(r["matched_words"])
        write_lines([t for t in normalize(challenge.prompt) if t not in matched], args.missed)
    if args.share:
        print(share_text(r))


if __name__ == "__main__":
    main()
