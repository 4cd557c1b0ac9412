"""
Progress persistence for completed lessons.

One LevelProgress record per level id, overwritten on every completion.
The engine only ever reads or writes the whole mapping through a
ProgressBackend:
- JsonProgressStore: single JSON file (default ~/.quest/progress.json)
- MemoryProgressStore: in-process dict, for tests and dry runs

Loading and saving are best-effort. A missing, unreadable or corrupt file
loads as an empty mapping; a failed save is logged and ignored.
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Protocol

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from quest.curriculum.models import Unit

from .lesson import LessonResult


class LevelProgress(BaseModel):
    """Persisted outcome of a level."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    completed: bool = False
    stars: int = Field(default=0, ge=0, le=3)
    xp: int = 0
    last_played: str = Field(default="", alias="lastPlayed")


ProgressMap = dict[str, LevelProgress]

_PROGRESS_ADAPTER = TypeAdapter(dict[str, LevelProgress])


class ProgressBackend(Protocol):
    """Load/save pair injected into the engine."""

    def load_progress(self) -> ProgressMap:
        ...

    def save_progress(self, progress: Mapping[str, LevelProgress]) -> None:
        ...


class JsonProgressStore:
    """
    Stores the progress mapping as one JSON object keyed by level id.

    Writes go to a temporary file in the same directory first and are then
    moved into place, so readers never see a half-written file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_progress(self) -> ProgressMap:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            progress = _PROGRESS_ADAPTER.validate_python(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable progress file {self.path}: {e}")
            return {}
        logger.info(f"Loaded progress for {len(progress)} levels from {self.path}")
        return progress

    def save_progress(self, progress: Mapping[str, LevelProgress]) -> None:
        payload = {
            level_id: record.model_dump(by_alias=True)
            for level_id, record in progress.items()
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".progress-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.warning(f"Could not save progress to {self.path}: {e}")
            return
        logger.info(f"Saved progress for {len(payload)} levels to {self.path}")


class MemoryProgressStore:
    """In-memory backend; keeps a copy so callers cannot mutate stored state."""

    def __init__(self, initial: Mapping[str, LevelProgress] | None = None):
        self._data: ProgressMap = dict(initial or {})
        self.saves = 0

    def load_progress(self) -> ProgressMap:
        return dict(self._data)

    def save_progress(self, progress: Mapping[str, LevelProgress]) -> None:
        self._data = dict(progress)
        self.saves += 1


# =============================================================================
# Progress helpers
# =============================================================================


def record_completion(
    progress: Mapping[str, LevelProgress],
    level_id: str,
    result: LessonResult,
    now: datetime | None = None,
) -> ProgressMap:
    """Return a new mapping with ``level_id``'s record replaced by ``result``."""
    played = (now or datetime.now(timezone.utc)).isoformat()
    updated = dict(progress)
    updated[level_id] = LevelProgress(
        completed=True,
        stars=result.stars,
        xp=result.xp,
        last_played=played,
    )
    return updated


def total_xp(progress: Mapping[str, LevelProgress]) -> int:
    return sum(record.xp for record in progress.values())


def completed_count(progress: Mapping[str, LevelProgress]) -> int:
    return sum(1 for record in progress.values() if record.completed)


def unit_completed(unit: Unit, progress: Mapping[str, LevelProgress]) -> int:
    """Number of the unit's levels marked completed."""
    return sum(
        1 for level in unit.levels
        if level.id in progress and progress[level.id].completed
    )
