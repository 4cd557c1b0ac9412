"""
Choice exercise handler.

- Presents a prompt with several options.
- The learner picks exactly one; it must equal the keyed answer.
"""

import random
from typing import Any

from quest.curriculum.models import ChoiceExercise, ExerciseKind

from . import register
from .base import shuffled


@register(ExerciseKind.CHOICE)
class ChoiceHandler:
    """Handler for single-answer choice exercises."""

    def check(self, exercise: ChoiceExercise, answer: Any) -> bool:
        return isinstance(answer, str) and answer == exercise.answer

    def shuffle(self, exercise: ChoiceExercise, rng: random.Random) -> dict[str, tuple[str, ...]]:
        return {"options": tuple(shuffled(exercise.options, rng))}

    def default_answer(self, exercise: ChoiceExercise) -> str:
        return ""

    def describe_solution(self, exercise: ChoiceExercise) -> str:
        return exercise.answer
