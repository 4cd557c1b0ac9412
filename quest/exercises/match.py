"""
Match exercise handler.

User connects left items to right items. Both columns are shuffled
independently for presentation. The answer is a mapping left -> right;
every required pair must be present, extra keys are ignored.
"""

import random
from collections.abc import Mapping
from typing import Any

from quest.curriculum.models import ExerciseKind, MatchExercise

from . import register
from .base import shuffled


@register(ExerciseKind.MATCH)
class MatchHandler:
    """Handler for matching exercises."""

    def check(self, exercise: MatchExercise, answer: Any) -> bool:
        if not isinstance(answer, Mapping):
            return False
        return all(answer.get(pair.left) == pair.right for pair in exercise.pairs)

    def shuffle(self, exercise: MatchExercise, rng: random.Random) -> dict[str, tuple[str, ...]]:
        return {
            "left": tuple(shuffled(exercise.left, rng)),
            "right": tuple(shuffled(exercise.right, rng)),
        }

    def default_answer(self, exercise: MatchExercise) -> dict[str, str]:
        return {}

    def describe_solution(self, exercise: MatchExercise) -> str:
        return "\n".join(f"{pair.left} → {pair.right}" for pair in exercise.pairs)
