"""
Exercise kind handlers.

Each exercise kind (choice, fill, order, match, select-line) has its own
module with:
- check(): grade a submitted answer
- shuffle(): session-only presentation orderings
- default_answer(): empty answer buffer
- describe_solution(): the expected answer as text
"""

from typing import TYPE_CHECKING, Any

from quest.curriculum.models import ExerciseKind

if TYPE_CHECKING:
    from .base import ExerciseHandler


# Handler registry - populated by @register decorator
HANDLERS: dict[ExerciseKind, "ExerciseHandler"] = {}


def register(kind: ExerciseKind):
    """Decorator to register an exercise handler."""
    def decorator(cls):
        HANDLERS[kind] = cls()
        return cls
    return decorator


def get_handler(kind: "str | ExerciseKind | None") -> "ExerciseHandler | None":
    """Get the handler for an exercise kind."""
    if not isinstance(kind, str):
        return None
    if not isinstance(kind, ExerciseKind):
        try:
            kind = ExerciseKind(kind.lower())
        except ValueError:
            return None
    return HANDLERS.get(kind)


def is_correct(exercise: Any, answer: Any) -> bool:
    """
    Grade an answer against an exercise.

    Never raises: unknown kinds and answers of the wrong shape are incorrect.
    """
    handler = get_handler(getattr(exercise, "type", None))
    if handler is None:
        return False
    return handler.check(exercise, answer)


# Import handlers to trigger registration
from . import choice
from . import fill
from . import order
from . import match
from . import select_line

from .fill import normalize_answer

__all__ = [
    "ExerciseKind",
    "HANDLERS",
    "get_handler",
    "is_correct",
    "normalize_answer",
    "register",
]
