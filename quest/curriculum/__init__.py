"""
Curriculum: read-only course content.

- models: Course -> Unit -> Level -> Exercise (discriminated on ``type``)
- loader: JSON loading, bundled sample course
"""

from .loader import CurriculumError, load_course, parse_course
from .models import (
    ChoiceExercise,
    Course,
    CourseMeta,
    Exercise,
    ExerciseKind,
    FillExercise,
    Level,
    MatchExercise,
    MatchPair,
    OrderExercise,
    SelectLineExercise,
    Unit,
)

__all__ = [
    "ChoiceExercise",
    "Course",
    "CourseMeta",
    "CurriculumError",
    "Exercise",
    "ExerciseKind",
    "FillExercise",
    "Level",
    "MatchExercise",
    "MatchPair",
    "OrderExercise",
    "SelectLineExercise",
    "Unit",
    "load_course",
    "parse_course",
]
