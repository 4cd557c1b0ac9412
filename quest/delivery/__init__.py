"""
Delivery: lesson progression, scoring, persistence and the terminal CLI.

Components:
- lesson: SessionState transitions and the Lesson runner (mistake-retry loop)
- scoring: star rating
- progress_store: best-effort per-level progress persistence
- prompts / cli: rich + typer presentation
"""

from .lesson import (
    Lesson,
    LessonResult,
    LessonStatus,
    SessionState,
    advance_step,
    check_answer,
    reveal_tip,
    retry_step,
    set_answer,
    start_session,
)
from .progress_store import (
    JsonProgressStore,
    LevelProgress,
    MemoryProgressStore,
    ProgressBackend,
    completed_count,
    record_completion,
    total_xp,
    unit_completed,
)
from .scoring import Score, score, stars_label

__all__ = [
    # Lesson flow
    "Lesson",
    "LessonResult",
    "LessonStatus",
    "SessionState",
    "advance_step",
    "check_answer",
    "reveal_tip",
    "retry_step",
    "set_answer",
    "start_session",
    # Persistence
    "JsonProgressStore",
    "LevelProgress",
    "MemoryProgressStore",
    "ProgressBackend",
    "completed_count",
    "record_completion",
    "total_xp",
    "unit_completed",
    # Scoring
    "Score",
    "score",
    "stars_label",
]
