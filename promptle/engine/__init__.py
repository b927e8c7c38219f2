from .normalize import normalize, tokens_to_text
from .matching import levenshtein, match_threshold, is_match, first_match
from .scoring import ScoreResult, score_guess
from .hints import select_hint, available_hints
from .validation import validate_submission

__all__ = [
    "normalize", "tokens_to_text",
    "levenshtein", "match_threshold", "is_match", "first_match",
    "ScoreResult", "score_guess",
    "select_hint", "available_hints",
    "validate_submission",
]
