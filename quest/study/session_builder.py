"""
Session builder for lesson playthroughs.

Turns a read-only Level into a queue of disposable SessionExercise
instances:
- the level's own exercises in shuffled order, each with freshly shuffled
  option / token / column orderings
- review items from earlier levels interleaved at a fixed interval
  (REVIEW_INTERVAL new items, then one review item) for spaced repetition

The curriculum is never mutated; every build reshuffles.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, NamedTuple, Sequence

from loguru import logger

from quest.curriculum.models import Exercise, ExerciseKind, Level
from quest.exercises import get_handler
from quest.exercises.base import shuffled

# New items between two review items.
REVIEW_INTERVAL = 3


@dataclass(frozen=True)
class SessionExercise:
    """
    One appearance of an exercise inside a session.

    ``session_id`` distinguishes repeated appearances of the same exercise.
    The presentation orderings are session-only; the answer key stays on
    ``exercise``.
    """
    exercise: Exercise
    session_id: str
    options: tuple[str, ...] | None = None
    tokens: tuple[str, ...] | None = None
    left: tuple[str, ...] | None = None
    right: tuple[str, ...] | None = None
    is_review: bool = False
    source_level_id: str | None = None
    source_level_title: str | None = None

    @property
    def id(self) -> str:
        return self.exercise.id

    @property
    def kind(self) -> ExerciseKind:
        return ExerciseKind(self.exercise.type)

    @property
    def prompt(self) -> str:
        return self.exercise.prompt

    @property
    def xp(self) -> int:
        return self.exercise.xp

    @property
    def explanation(self) -> str | None:
        return self.exercise.explanation

    @property
    def tip(self) -> str | None:
        return self.exercise.tip


class ReviewCandidate(NamedTuple):
    """An exercise from an earlier level, eligible for interleaving."""
    exercise: Exercise
    level_id: str
    level_title: str


def to_session_instance(
    exercise: Exercise,
    session_id: str,
    rng: random.Random | None = None,
    **extra: Any,
) -> SessionExercise:
    """
    Wrap an exercise for one session, shuffling its selectable sets.

    Args:
        exercise: Curriculum exercise (left untouched)
        session_id: Session-unique identifier for this appearance
        rng: Random source (module-level random when None)
        **extra: Review provenance fields (is_review, source_level_id, ...)

    Returns:
        SessionExercise with fresh presentation orderings
    """
    handler = get_handler(exercise.type)
    orderings = handler.shuffle(exercise, rng) if handler is not None else {}
    return SessionExercise(exercise=exercise, session_id=session_id, **orderings, **extra)


def collect_review_pool(levels: Sequence[Level], active_position: int | None) -> list[ReviewCandidate]:
    """
    Every exercise from levels strictly before ``active_position``.

    Args:
        levels: All levels in curriculum order
        active_position: Index of the active level in ``levels``

    Returns:
        Candidates in curriculum order; empty for the first level or an
        unknown position
    """
    if active_position is None or active_position <= 0 or active_position >= len(levels):
        return []
    return [
        ReviewCandidate(exercise=step, level_id=level.id, level_title=level.title)
        for level in levels[:active_position]
        for step in level.steps
    ]


def build_session(
    level: Level,
    review_pool: Sequence[ReviewCandidate],
    rng: random.Random | None = None,
) -> list[SessionExercise]:
    """
    Build the ordered queue for one playthrough of ``level``.

    Layout: 3 base items, 1 review item, 3 base items, 1 review item, ...
    until the picked review items run out, then the remaining base items.

    Args:
        level: Level to play
        review_pool: Candidates from earlier levels (see collect_review_pool)
        rng: Random source (module-level random when None)

    Returns:
        Session queue (empty for a level without steps)
    """
    base = [
        to_session_instance(step, f"base-{level.id}-{step.id}-{index}", rng)
        for index, step in enumerate(shuffled(level.steps, rng))
    ]

    if not review_pool:
        logger.debug(f"Built session for {level.id}: {len(base)} items, no review pool")
        return base

    review_slots = len(base) // REVIEW_INTERVAL
    if review_slots == 0:
        return base

    picked = shuffled(review_pool, rng)[:review_slots]
    result: list[SessionExercise] = []
    review_index = 0

    for index, item in enumerate(base):
        result.append(item)
        if (index + 1) % REVIEW_INTERVAL == 0 and review_index < len(picked):
            review = picked[review_index]
            result.append(
                to_session_instance(
                    review.exercise,
                    f"review-{level.id}-{review.exercise.id}-{review_index}",
                    rng,
                    is_review=True,
                    source_level_id=review.level_id,
                    source_level_title=review.level_title,
                )
            )
            review_index += 1

    logger.debug(
        f"Built session for {level.id}: {len(base)} items, "
        f"{review_index} review (pool: {len(review_pool)})"
    )
    return result
