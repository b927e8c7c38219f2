"""
Hint selection: reveal one target word the player has not been shown yet.

Returns None when every word of the prompt is already revealed. That is a
normal end state ("no hint available"), not an error.
"""

from __future__ import annotations

import random
from typing import Iterable, List

from .normalize import normalize


def available_hints(target_prompt: str, used_hints: Iterable[str] = ()) -> List[str]:
    """Target tokens not yet revealed, in prompt order."""
    used = {h.lower() for h in used_hints}
    return [t for t in normalize(target_prompt) if t not in used]


def select_hint(
        target_prompt: str,
        used_hints: Iterable[str] = (),
        rng: random.Random | None = None,
) -> str | None:
    """
    Pick an unrevealed token uniformly at random.

    Args:
      target_prompt: the challenge prompt
      used_hints   : words already revealed (case-insensitive)
      rng          : random.Random to draw from; pass a seeded one for
                     reproducible picks. Defaults to a fresh unseeded
                     instance, never the module-level global.
    """
    pool = available_hints(target_prompt, used_hints)
    if not pool:
        return None

    if rng is None:
        rng = random.Random()
    return pool[rng.randrange(len(pool))]
