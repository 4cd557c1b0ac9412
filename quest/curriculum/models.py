"""
Curriculum data model.

A course is an ordered list of units, each unit an ordered list of levels,
each level an ordered list of exercise steps. Everything here is read-only
once loaded: models are frozen and sequences are stored as tuples.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ExerciseKind(str, Enum):
    """Supported exercise types."""
    CHOICE = "choice"
    FILL = "fill"
    ORDER = "order"
    MATCH = "match"
    SELECT_LINE = "select-line"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _ExerciseBase(_Frozen):
    id: str
    prompt: str
    xp: int = 10
    explanation: str | None = None
    tip: str | None = None


class ChoiceExercise(_ExerciseBase):
    """Pick one option out of several."""
    type: Literal["choice"] = "choice"
    options: tuple[str, ...]
    answer: str


class FillExercise(_ExerciseBase):
    """Type a short answer; any of ``answers`` is accepted after normalization."""
    type: Literal["fill"] = "fill"
    answers: tuple[str, ...]
    placeholder: str | None = None


class OrderExercise(_ExerciseBase):
    """Assemble ``tokens`` into the ``solution`` sequence."""
    type: Literal["order"] = "order"
    tokens: tuple[str, ...]
    solution: tuple[str, ...]


class MatchPair(_Frozen):
    left: str
    right: str


class MatchExercise(_ExerciseBase):
    """Connect every left item to its right item."""
    type: Literal["match"] = "match"
    left: tuple[str, ...]
    right: tuple[str, ...]
    pairs: tuple[MatchPair, ...]


class SelectLineExercise(_ExerciseBase):
    """Point at one line of a code listing (1-based)."""
    type: Literal["select-line"] = "select-line"
    lines: tuple[str, ...]
    answer_line: int = Field(alias="answerLine")


Exercise = Annotated[
    Union[ChoiceExercise, FillExercise, OrderExercise, MatchExercise, SelectLineExercise],
    Field(discriminator="type"),
]


class Level(_Frozen):
    """Ordered group of exercises with a completion goal."""
    id: str
    title: str
    goal: str = ""
    steps: tuple[Exercise, ...] = ()


class Unit(_Frozen):
    """Top organizational tier: an ordered group of levels."""
    id: str
    title: str
    description: str = ""
    accent: str = ""
    levels: tuple[Level, ...] = ()


class CourseMeta(_Frozen):
    title: str = ""
    subtitle: str = ""
    locale: str = ""
    version: str = ""
    author: str = ""


class Course(_Frozen):
    """The whole curriculum document."""
    meta: CourseMeta = CourseMeta()
    units: tuple[Unit, ...] = ()

    @property
    def levels(self) -> list[Level]:
        """All levels in curriculum order (unit-major)."""
        return [level for unit in self.units for level in unit.levels]

    def level_position(self, level_id: str | None) -> int | None:
        """Index of a level in the flattened curriculum, or None if unknown."""
        if not level_id:
            return None
        for index, level in enumerate(self.levels):
            if level.id == level_id:
                return index
        return None

    def find_level(self, level_id: str | None) -> Level | None:
        position = self.level_position(level_id)
        if position is None:
            return None
        return self.levels[position]

    def unit_for_level(self, level_id: str) -> Unit | None:
        for unit in self.units:
            if any(level.id == level_id for level in unit.levels):
                return unit
        return None
