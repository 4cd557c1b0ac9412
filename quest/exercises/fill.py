"""
Fill-in exercise handler.

Free text grading. Both the submitted text and every accepted answer go
through normalize_answer() before comparison, so surrounding whitespace,
repeated inner spaces and one layer of quoting do not matter.
"""

import random
import re
from typing import Any

from quest.curriculum.models import ExerciseKind, FillExercise

from . import register

_WHITESPACE = re.compile(r"\s+")
# Applied in this order; each strips one enclosing pair around a non-empty body.
_QUOTE_PATTERNS = (
    re.compile(r"^`(.+)`$"),
    re.compile(r'^"(.+)"$'),
    re.compile(r"^'(.+)'$"),
)


def normalize_answer(value: str) -> str:
    """Trim, collapse whitespace and strip surrounding quote characters."""
    text = _WHITESPACE.sub(" ", value.strip())
    for pattern in _QUOTE_PATTERNS:
        text = pattern.sub(r"\1", text)
    return text


@register(ExerciseKind.FILL)
class FillHandler:
    """Handler for typed short-answer exercises."""

    def check(self, exercise: FillExercise, answer: Any) -> bool:
        if not isinstance(answer, str):
            return False
        normalized = normalize_answer(answer)
        return any(normalize_answer(option) == normalized for option in exercise.answers)

    def shuffle(self, exercise: FillExercise, rng: random.Random) -> dict[str, tuple[str, ...]]:
        return {}

    def default_answer(self, exercise: FillExercise) -> str:
        return ""

    def describe_solution(self, exercise: FillExercise) -> str:
        return " | ".join(exercise.answers)
