"""
Star scoring for completed lessons.

Stars depend only on the raw number of incorrect checks across the whole
session (main pass and remedial pass):
    0 mistakes   -> 3 stars
    1-2 mistakes -> 2 stars
    3+ mistakes  -> 1 star
"""

from __future__ import annotations

from typing import NamedTuple

MAX_STARS = 3


class Score(NamedTuple):
    stars: int
    xp: int


def score(mistake_count: int, experience: int) -> Score:
    """Convert a session's mistake count and earned xp into the final reward."""
    if mistake_count == 0:
        stars = 3
    elif mistake_count <= 2:
        stars = 2
    else:
        stars = 1
    return Score(stars=stars, xp=experience)


def stars_label(stars: int) -> str:
    """Render a rating as filled/empty stars, e.g. ★★☆."""
    stars = max(0, min(MAX_STARS, stars))
    return "★" * stars + "☆" * (MAX_STARS - stars)
