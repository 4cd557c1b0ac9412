"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quest.curriculum import (  # noqa: E402
    ChoiceExercise,
    Course,
    FillExercise,
    Level,
    MatchExercise,
    OrderExercise,
    SelectLineExercise,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def setup_logging():
    """Route loguru to stderr at DEBUG for the duration of a test."""
    from loguru import logger

    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG",
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    yield

    logger.remove()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def choice_step():
    return ChoiceExercise(
        id="c1",
        prompt="Which type fits 42?",
        options=("string", "number", "boolean"),
        answer="number",
        xp=10,
        explanation="Numbers are number.",
    )


@pytest.fixture
def fill_step():
    return FillExercise(id="f1", prompt="Type it", answers=("Answer", "other  answer"), xp=5, tip="Starts with A")


@pytest.fixture
def order_step():
    return OrderExercise(
        id="o1",
        prompt="Build it",
        tokens=("let", "x", "=", "1"),
        solution=("let", "x", "=", "1"),
        xp=15,
    )


@pytest.fixture
def match_step():
    return MatchExercise(
        id="m1",
        prompt="Match",
        left=("a", "b"),
        right=("1", "2"),
        pairs=({"left": "a", "right": "1"}, {"left": "b", "right": "2"}),
        xp=20,
    )


@pytest.fixture
def select_line_step():
    return SelectLineExercise(id="s1", prompt="Which line?", lines=("ok", "bad", "ok"), answer_line=2, xp=15)


def fill(step_id: str, answer: str | None = None, xp: int = 10) -> FillExercise:
    """Fill exercise whose accepted answer is its own id unless given."""
    return FillExercise(id=step_id, prompt=f"Prompt {step_id}", answers=(answer or step_id,), xp=xp)


@pytest.fixture
def make_level():
    """Factory: level made of fill steps answered by their own id."""
    def factory(level_id: str, step_ids, title: str | None = None) -> Level:
        return Level(id=level_id, title=title or level_id.title(), goal="", steps=tuple(fill(s) for s in step_ids))
    return factory


@pytest.fixture
def answer_for():
    """Correct answer value for any exercise kind."""
    def factory(exercise):
        if exercise.type == "choice":
            return exercise.answer
        if exercise.type == "fill":
            return exercise.answers[0]
        if exercise.type == "order":
            return list(exercise.solution)
        if exercise.type == "match":
            return {pair.left: pair.right for pair in exercise.pairs}
        if exercise.type == "select-line":
            return exercise.answer_line
        raise AssertionError(f"unknown kind {exercise.type}")
    return factory


@pytest.fixture
def course_data():
    """Raw curriculum document with two units and four levels."""
    return {
        "meta": {"title": "Test Course", "subtitle": "For tests", "locale": "en", "version": "1", "author": "t"},
        "units": [
            {
                "id": "u1",
                "title": "Unit one",
                "description": "First",
                "accent": "#fff",
                "levels": [
                    {
                        "id": "l1",
                        "title": "Level one",
                        "goal": "g1",
                        "steps": [
                            {"id": "l1-a", "type": "fill", "prompt": "p", "answers": ["a"], "xp": 10},
                            {"id": "l1-b", "type": "choice", "prompt": "p", "options": ["x", "y"], "answer": "y", "xp": 10},
                        ],
                    },
                    {
                        "id": "l2",
                        "title": "Level two",
                        "goal": "g2",
                        "steps": [
                            {"id": "l2-a", "type": "select-line", "prompt": "p", "lines": ["1", "2"], "answerLine": 1, "xp": 10},
                        ],
                    },
                ],
            },
            {
                "id": "u2",
                "title": "Unit two",
                "description": "Second",
                "accent": "#000",
                "levels": [
                    {
                        "id": "l3",
                        "title": "Level three",
                        "goal": "g3",
                        "steps": [
                            {"id": "l3-a", "type": "fill", "prompt": "p", "answers": ["a"], "xp": 10},
                            {"id": "l3-b", "type": "fill", "prompt": "p", "answers": ["b"], "xp": 10},
                            {"id": "l3-c", "type": "fill", "prompt": "p", "answers": ["c"], "xp": 10},
                        ],
                    },
                    {"id": "l4", "title": "Empty", "goal": "", "steps": []},
                ],
            },
        ],
    }


@pytest.fixture
def course(course_data):
    return Course.model_validate(course_data)
