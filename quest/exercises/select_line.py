"""
Select-line exercise handler.

The learner points at one line of a listing by its 1-based number.
"""

import random
from typing import Any

from quest.curriculum.models import ExerciseKind, SelectLineExercise

from . import register


@register(ExerciseKind.SELECT_LINE)
class SelectLineHandler:
    """Handler for select-line exercises."""

    def check(self, exercise: SelectLineExercise, answer: Any) -> bool:
        # bool is an int subclass; True must not select line 1
        if isinstance(answer, bool) or not isinstance(answer, (int, float)):
            return False
        return answer == exercise.answer_line

    def shuffle(self, exercise: SelectLineExercise, rng: random.Random) -> dict[str, tuple[str, ...]]:
        return {}

    def default_answer(self, exercise: SelectLineExercise) -> int:
        return 0

    def describe_solution(self, exercise: SelectLineExercise) -> str:
        index = exercise.answer_line - 1
        line = exercise.lines[index] if 0 <= index < len(exercise.lines) else ""
        return f"line {exercise.answer_line}: {line}"
