"""
Base protocol for exercise handlers.
"""

import random
from typing import Any, Protocol


class ExerciseHandler(Protocol):
    """Protocol for exercise kind handlers."""

    def check(self, exercise: Any, answer: Any) -> bool:
        """Grade a submitted answer. Must not raise on malformed input."""
        ...

    def shuffle(self, exercise: Any, rng: random.Random) -> dict[str, tuple[str, ...]]:
        """Return session-only presentation orderings keyed by field name."""
        ...

    def default_answer(self, exercise: Any) -> Any:
        """Empty answer buffer for a fresh attempt."""
        ...

    def describe_solution(self, exercise: Any) -> str:
        """Plain-text rendering of the expected answer."""
        ...


def shuffled(items, rng: random.Random | None = None) -> list:
    """Return a uniformly permuted copy of ``items``; the input is left untouched."""
    result = list(items)
    (rng or random).shuffle(result)
    return result
