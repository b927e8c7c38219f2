"""
Daily challenge catalog.

A challenge is an (image, prompt) pair behind an opaque id. The catalog
rotates through its challenges by day of year, and the archive shows every
challenge up to and including today's.

Rotation:
  index(today) = (day_of_year(today) - 1) % len(challenges)

Archive:
  the first min(day_of_year - 1, len(challenges)) + 1 challenges

These functions take `today` explicitly (defaulting to the local date) so
tests and batch runs can pin the calendar.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Dict, List, Sequence


@dataclass(frozen=True)
class Challenge:
    id: str
    image_url: str
    prompt: str

    def public_dict(self) -> Dict:
        """What a player is allowed to see before guessing."""
        return {"id": self.id, "imageUrl": self.image_url}

    def as_dict(self) -> Dict:
        return {"id": self.id, "imageUrl": self.image_url, "prompt": self.prompt}


_CDN = "https://promptle.b-cdn.net"

DEFAULT_CHALLENGES: List[Challenge] = [
    Challenge(
        "day1", f"{_CDN}/astronaut-cat.webp",
        "A cute cat astronaut floating in space, whimsical, digital art, vibrant colors, "
        "detailed background of stars and galaxies",
    ),
    Challenge(
        "day2", f"{_CDN}/steampunk-city.webp",
        "A sprawling steampunk city at sunset, with airships, intricate clockwork towers, "
        "and glowing lights, oil painting, detailed and atmospheric",
    ),
    Challenge(
        "day3", f"{_CDN}/enchanted-forest.webp",
        "An enchanted forest path with glowing mushrooms and mystical creatures, fantasy, "
        "hyperrealistic, cinematic lighting, 4K",
    ),
    Challenge(
        "day4", f"{_CDN}/cyberpunk-diner.webp",
        "A lone figure in a rainy, neon-lit cyberpunk alleyway diner, Blade Runner aesthetic, "
        "moody, cinematic, photorealistic",
    ),
    Challenge(
        "day5", f"{_CDN}/underwater-kingdom.webp",
        "A majestic underwater kingdom with bioluminescent coral and ancient ruins, schools of "
        "fish swimming by, fantasy art, vibrant and detailed",
    ),
    Challenge(
        "day6", f"{_CDN}/dragon-mountain.webp",
        "A majestic dragon perched atop a snowy mountain peak at dawn, epic fantasy, digital "
        "painting, breathtaking view, dramatic lighting",
    ),
    Challenge(
        "day7", f"{_CDN}/sushi-robots.webp",
        "Tiny robots preparing intricate sushi on a wooden board, macro photography, detailed, "
        "whimsical, high resolution",
    ),
]


def day_of_year(today: dt.date | None = None) -> int:
    """1-based ordinal day (Jan 1 -> 1)."""
    today = today or dt.date.today()
    return today.timetuple().tm_yday


def daily_challenge(
        today: dt.date | None = None,
        challenges: Sequence[Challenge] = DEFAULT_CHALLENGES,
) -> Challenge:
    """Today's challenge from the rotation."""
    if not challenges:
        raise ValueError("challenge catalog is empty")
    idx = (day_of_year(today) - 1) % len(challenges)
    return challenges[idx]


def past_challenges(
        today: dt.date | None = None,
        challenges: Sequence[Challenge] = DEFAULT_CHALLENGES,
) -> List[Challenge]:
    """Archive view: every challenge released so far, today's included."""
    elapsed = day_of_year(today) - 1
    count = min(elapsed, len(challenges))
    return list(challenges[: count + 1])


def challenge_prompt(
        challenge_id: str,
        challenges: Sequence[Challenge] = DEFAULT_CHALLENGES,
) -> str | None:
    """Prompt for `challenge_id`, or None if the id is unknown."""
    for c in challenges:
        if c.id == challenge_id:
            return c.prompt
    return None


def get_challenge(
        challenge_id: str,
        challenges: Sequence[Challenge] = DEFAULT_CHALLENGES,
) -> Challenge:
    """
    Look up a challenge by id; unknown or non-string ids are a caller error.
    """
    if not isinstance(challenge_id, str):
        raise ValueError(f"challenge id must be a string; got {challenge_id!r}")
    by_id = {c.id: c for c in challenges}
    try:
        return by_id[challenge_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown challenge id: {challenge_id}. Available: {sorted(by_id)}") from e
