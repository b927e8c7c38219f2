from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize_scores(results: List[Dict]) -> Dict:
    """
    Aggregate a batch of case results into a JSON-friendly summary.

    Only valid cases contribute to the score statistics; an all-invalid (or
    empty) batch reports zeros.
    """
    valid = [r for r in results if r.get("valid")]
    scores = np.array([r["score"] for r in valid], dtype=float)

    summary = {
        "num_cases": len(results),
        "num_valid": len(valid),
        "eligible": sum(1 for r in valid if r.get("eligible")),
    }
    if scores.size == 0:
        summary.update(mean=0.0, median=0.0, p90=0.0, min=0, max=0, perfect_rate=0.0)
        return summary

    summary.update(
        mean=round(float(scores.mean()), 2),
        median=round(float(np.median(scores)), 2),
        p90=round(float(np.percentile(scores, 90)), 2),
        min=int(scores.min()),
        max=int(scores.max()),
        perfect_rate=round(float(np.mean(scores == 100)), 4),
    )
    return summary
