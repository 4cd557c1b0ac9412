"""
Order exercise handler.

The learner assembles the shuffled tokens into a sequence. Grading is
order-sensitive: the space-joined answer must equal the space-joined solution.
"""

import random
from typing import Any

from quest.curriculum.models import ExerciseKind, OrderExercise

from . import register
from .base import shuffled


@register(ExerciseKind.ORDER)
class OrderHandler:
    """Handler for token ordering exercises."""

    def check(self, exercise: OrderExercise, answer: Any) -> bool:
        if not isinstance(answer, (list, tuple)):
            return False
        if not all(isinstance(token, str) for token in answer):
            return False
        return " ".join(answer) == " ".join(exercise.solution)

    def shuffle(self, exercise: OrderExercise, rng: random.Random) -> dict[str, tuple[str, ...]]:
        return {"tokens": tuple(shuffled(exercise.tokens, rng))}

    def default_answer(self, exercise: OrderExercise) -> list[str]:
        return []

    def describe_solution(self, exercise: OrderExercise) -> str:
        return " ".join(exercise.solution)
