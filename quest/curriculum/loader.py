"""
Curriculum loader.

Reads the course JSON document either from an explicit path or from the
sample course bundled with the package (``quest/curriculum/data/course.json``).
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .models import Course

BUNDLED_PACKAGE = "quest.curriculum.data"
BUNDLED_COURSE = "course.json"


class CurriculumError(Exception):
    """Raised when the curriculum document cannot be read or parsed."""
    pass


def parse_course(data: dict) -> Course:
    """Build a Course from an already-decoded JSON document."""
    try:
        return Course.model_validate(data)
    except ValidationError as e:
        raise CurriculumError(f"Invalid curriculum document: {e}") from e


def load_course(path: Path | None = None) -> Course:
    """
    Load the curriculum.

    Args:
        path: Course JSON file (bundled sample course when None)

    Returns:
        Parsed, read-only Course

    Raises:
        CurriculumError: file missing, not JSON, or not shaped like a course
    """
    try:
        if path is None:
            text = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_COURSE).read_text(encoding="utf-8")
            source = f"{BUNDLED_PACKAGE}/{BUNDLED_COURSE}"
        else:
            text = Path(path).read_text(encoding="utf-8-sig")
            source = str(path)
        data = json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        raise CurriculumError(f"Failed to load curriculum: {e}") from e

    course = parse_course(data)
    logger.info(
        f"Curriculum loaded from {source}: {len(course.units)} units, "
        f"{len(course.levels)} levels"
    )
    return course
