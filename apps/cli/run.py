# apps/cli/run.py
"""
CLI entry point for batch-scoring promptle submissions.

This script:
  1) Validates the challenge catalog (prints count + SHA, flags bad entries).
  2) Loads the catalog and the submissions (JSON Lines, one guess per line).
  3) Scores every submission with a live progress indicator and writes:
       - CSV:  per-submission results (score, matched words, hints)
       - JSON: manifest with config, catalog hash, git commit, score summary
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
import tempfile
import time
from pathlib import Path

from tqdm import tqdm

from promptle.challenges import DEFAULT_CHALLENGES
from promptle.datasets import load_challenges, load_submissions, pretty_summary, validate_catalog
from promptle.harness import iter_batch, summarize_scores
from promptle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _builtin_catalog_report() -> dict:
    """
    Validate the built-in catalog through the same file-based validator so the
    manifest always carries a catalog hash.
    """
    with tempfile.TemporaryDirectory() as tmp:
        p = Path(tmp) / "builtin_challenges.json"
        p.write_text(json.dumps([c.as_dict() for c in DEFAULT_CHALLENGES], indent=2),
                     encoding="utf-8")
        rep = validate_catalog(str(p))
    rep["path"] = "<builtin>"
    return rep


def _parse_date(s: str) -> dt.date:
    try:
        return dt.date.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}") from e


def main():
    """
    Parse CLI args, validate the catalog, score the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="promptle — batch-score guesses")
    ap.add_argument("--submissions", required=True,
                    help="JSON Lines file, one {challengeId, guess, hints?, hintPenalty?, "
                         "requestHints?} per line")
    ap.add_argument("--catalog", help="JSON challenge catalog (default: built-in rotation)")
    ap.add_argument("--today", type=_parse_date,
                    help="pin the calendar date (YYYY-MM-DD) for the daily rotation")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed for hint draws")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate the catalog and print a one-liner summary
    if args.catalog:
        rep = validate_catalog(args.catalog)
        print(pretty_summary(rep))
        if not rep["passed"]:
            print("Catalog validation failed: " + "; ".join(rep["issues"]))
            sys.exit(1)
        challenges = load_challenges(args.catalog)
    else:
        rep = _builtin_catalog_report()
        print(pretty_summary(rep))
        challenges = list(DEFAULT_CHALLENGES)

    # 2) Load submissions
    submissions = load_submissions(args.submissions)
    total = len(submissions)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    # 4) Score lazily (per-case seeds = base + index) so progress stays live
    cases = iter_batch(submissions, challenges, seed=args.seed, today=args.today)
    iterator = tqdm(cases, total=total, ncols=80, desc="Scoring", unit="guess") \
        if mode == "bar" else cases

    for idx, r in enumerate(iterator, 1):
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize_scores(results)
    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "catalog": rep,
        "num_cases": len(results),
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Scored {summary['num_valid']}/{summary['num_cases']} valid submissions "
          f"| mean={summary['mean']} median={summary['median']} max={summary['max']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
