from .core import (
    HINT_PENALTY_STEP,
    LEADERBOARD_MIN_SCORE,
    Turn,
    leaderboard_eligible,
    share_text,
    run_case,
    run_submission,
    iter_batch,
    run_batch,
)
from .io import write_csv, write_manifest
from .stats import summarize_scores

__all__ = [
    "HINT_PENALTY_STEP", "LEADERBOARD_MIN_SCORE", "Turn", "leaderboard_eligible",
    "share_text", "run_case", "run_submission", "iter_batch", "run_batch",
    "write_csv", "write_manifest", "summarize_scores",
]
