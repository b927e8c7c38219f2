from .catalog import (
    Challenge,
    DEFAULT_CHALLENGES,
    day_of_year,
    daily_challenge,
    past_challenges,
    challenge_prompt,
    get_challenge,
)

__all__ = [
    "Challenge", "DEFAULT_CHALLENGES", "day_of_year", "daily_challenge",
    "past_challenges", "challenge_prompt", "get_challenge",
]
