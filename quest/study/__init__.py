"""
Study: session construction.

Components:
- SessionExercise: per-session copy of an exercise with shuffled presentation
- collect_review_pool: exercises from earlier levels
- build_session: shuffled level queue with interleaved review items
"""

from .session_builder import (
    REVIEW_INTERVAL,
    ReviewCandidate,
    SessionExercise,
    build_session,
    collect_review_pool,
    to_session_instance,
)

__all__ = [
    "REVIEW_INTERVAL",
    "ReviewCandidate",
    "SessionExercise",
    "build_session",
    "collect_review_pool",
    "to_session_instance",
]
