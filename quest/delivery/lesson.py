"""
Lesson progression: the mistake-retry loop.

A lesson runs the session queue once (main pass). Every item answered
incorrectly is remembered once per session instance; when the main pass
ends with mistakes, exactly those items are replayed once in shuffled order
(remedial pass). After that the lesson completes and is scored.

State lives in one immutable SessionState value. Each user action is a
transition function returning a new state; actions that make no sense in
the current state (checking twice, advancing before checking, anything
after completion) return the state unchanged.

    IN_PROGRESS --(end of pass, mistakes)--> REMEDIAL --(end of pass)--> COMPLETE
    IN_PROGRESS --(end of pass, no mistakes)-----------------------------> COMPLETE
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Sequence

from loguru import logger

from quest.curriculum.models import Level
from quest.exercises import get_handler, is_correct
from quest.exercises.base import shuffled
from quest.study.session_builder import ReviewCandidate, SessionExercise, build_session

from .scoring import score


class LessonStatus(str, Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    REMEDIAL = "remedial"
    COMPLETE = "complete"


@dataclass(frozen=True)
class LessonResult:
    """Final reward of a completed lesson."""
    stars: int
    xp: int
    mistake_count: int


@dataclass(frozen=True)
class SessionState:
    """Everything a lesson in progress needs to know."""

    level_id: str
    queue: tuple[SessionExercise, ...] = ()
    position: int = 0

    # Per-item transient state
    answer: Any = None
    checked: bool = False
    correct: bool = False
    tip_shown: bool = False

    # Session totals
    xp: int = 0
    mistake_count: int = 0  # every incorrect check
    mistakes: tuple[SessionExercise, ...] = ()  # distinct by session_id
    remedial: bool = False

    result: LessonResult | None = None

    @property
    def current(self) -> SessionExercise | None:
        if self.result is not None or not (0 <= self.position < len(self.queue)):
            return None
        return self.queue[self.position]

    @property
    def status(self) -> LessonStatus:
        if self.result is not None:
            return LessonStatus.COMPLETE
        if not self.queue:
            return LessonStatus.EMPTY
        if self.remedial:
            return LessonStatus.REMEDIAL
        return LessonStatus.IN_PROGRESS

    @property
    def total_steps(self) -> int:
        return len(self.queue)

    @property
    def step_number(self) -> int:
        return self.position + 1 if self.queue else 0

    @property
    def progress_percent(self) -> int:
        if not self.queue:
            return 0
        # half-up, so 1 of 8 reads 13%
        return int(self.step_number / len(self.queue) * 100 + 0.5)


def _blank_answer(item: SessionExercise | None) -> Any:
    if item is None:
        return None
    handler = get_handler(item.exercise.type)
    return handler.default_answer(item.exercise) if handler is not None else None


def _at_item(state: SessionState, **changes: Any) -> SessionState:
    """Move to another item, resetting answer buffer and flags."""
    state = replace(state, **changes, checked=False, correct=False, tip_shown=False)
    return replace(state, answer=_blank_answer(state.current))


# =============================================================================
# Transitions
# =============================================================================


def start_session(
    level: Level,
    review_pool: Sequence[ReviewCandidate] = (),
    rng: random.Random | None = None,
) -> SessionState:
    """Build a fresh queue for ``level`` and position on its first item."""
    queue = tuple(build_session(level, review_pool, rng))
    if not queue:
        logger.info(f"Level {level.id} has no exercises")
    return _at_item(SessionState(level_id=level.id, queue=queue), position=0)


def set_answer(state: SessionState, answer: Any) -> SessionState:
    """Replace the answer buffer of the current, not yet checked item."""
    if state.current is None or state.checked:
        return state
    return replace(state, answer=answer)


def reveal_tip(state: SessionState) -> SessionState:
    if state.current is None or state.checked or not state.current.tip:
        return state
    return replace(state, tip_shown=True)


def check_answer(state: SessionState) -> SessionState:
    """Grade the answer buffer against the current item."""
    item = state.current
    if item is None or state.checked:
        return state

    if is_correct(item.exercise, state.answer):
        return replace(state, checked=True, correct=True, xp=state.xp + item.xp)

    mistakes = state.mistakes
    if all(seen.session_id != item.session_id for seen in mistakes):
        mistakes = mistakes + (item,)
    return replace(
        state,
        checked=True,
        correct=False,
        mistake_count=state.mistake_count + 1,
        mistakes=mistakes,
    )


def retry_step(state: SessionState) -> SessionState:
    """Let the learner try an incorrectly answered item again."""
    if state.current is None or not state.checked or state.correct:
        return state
    return replace(state, checked=False, answer=_blank_answer(state.current))


def advance_step(state: SessionState, rng: random.Random | None = None) -> SessionState:
    """
    Move past the current (checked) item.

    At the end of the main pass with mistakes, start the remedial pass over
    exactly the missed items. At the end of the remedial pass, or of a main
    pass without mistakes, complete the lesson.
    """
    if state.current is None or not state.checked:
        return state

    if state.position + 1 < len(state.queue):
        return _at_item(state, position=state.position + 1)

    if not state.remedial and state.mistakes:
        logger.debug(f"Level {state.level_id}: remedial pass over {len(state.mistakes)} items")
        return _at_item(
            state,
            queue=tuple(shuffled(state.mistakes, rng)),
            position=0,
            mistakes=(),
            remedial=True,
        )

    stars, xp = score(state.mistake_count, state.xp)
    logger.debug(f"Level {state.level_id} complete: {stars} stars, {xp} xp, {state.mistake_count} mistakes")
    return replace(
        state,
        checked=False,
        correct=False,
        tip_shown=False,
        answer=None,
        result=LessonResult(stars=stars, xp=xp, mistake_count=state.mistake_count),
    )


# =============================================================================
# Lesson runner
# =============================================================================


class Lesson:
    """
    Drives one level through the transitions above.

    ``on_complete`` is called exactly once per build with the LessonResult;
    restart() builds a new queue and re-arms it.
    """

    def __init__(
        self,
        level: Level,
        review_pool: Sequence[ReviewCandidate] = (),
        on_complete: Callable[[LessonResult], None] | None = None,
        rng: random.Random | None = None,
    ):
        self.level = level
        self.review_pool = tuple(review_pool)
        self.on_complete = on_complete
        self._rng = rng
        self.restart()

    def restart(self) -> None:
        self.state = start_session(self.level, self.review_pool, self._rng)
        self._reported = False

    @property
    def status(self) -> LessonStatus:
        return self.state.status

    @property
    def current(self) -> SessionExercise | None:
        return self.state.current

    def answer(self, value: Any) -> None:
        self.state = set_answer(self.state, value)

    def show_tip(self) -> str | None:
        self.state = reveal_tip(self.state)
        return self.current.tip if self.state.tip_shown and self.current else None

    def check(self) -> bool:
        """Grade the current answer; returns whether it was correct."""
        self.state = check_answer(self.state)
        return self.state.correct

    def retry(self) -> None:
        self.state = retry_step(self.state)

    def advance(self) -> LessonResult | None:
        """Move on; returns the result the first time the lesson completes."""
        self.state = advance_step(self.state, self._rng)
        result = self.state.result
        if result is None or self._reported:
            return None
        self._reported = True
        if self.on_complete is not None:
            self.on_complete(result)
        return result
