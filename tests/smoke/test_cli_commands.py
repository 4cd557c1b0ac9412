"""
Smoke Tests for CLI Commands.

These tests drive the typer app in-process with scripted stdin and check
exit codes, key output and the saved progress file.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json

import pytest
from typer.testing import CliRunner

from quest.delivery.cli import app

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

runner = CliRunner()


@pytest.fixture
def course_file(tmp_path):
    data = {
        "meta": {"title": "Smoke Course"},
        "units": [
            {
                "id": "u1",
                "title": "Only unit",
                "levels": [
                    {
                        "id": "one",
                        "title": "Single step",
                        "goal": "Type a",
                        "steps": [
                            {"id": "s1", "type": "fill", "prompt": "Type a", "answers": ["a"], "xp": 10, "tip": "It is a"},
                        ],
                    },
                    {
                        "id": "lines",
                        "title": "Pick a line",
                        "steps": [
                            {"id": "s2", "type": "select-line", "prompt": "First?", "lines": ["x", "y"], "answerLine": 1, "xp": 5},
                        ],
                    },
                    {"id": "empty", "title": "Nothing here [draft]", "steps": []},
                ],
            }
        ],
    }
    path = tmp_path / "course.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def progress_file(tmp_path):
    return tmp_path / "state" / "progress.json"


def invoke(*args, input=None):
    return runner.invoke(app, [str(a) for a in args], input=input)


def saved(progress_file):
    return json.loads(progress_file.read_text(encoding="utf-8"))


class TestCLIHelp:

    def test_main_help(self):
        result = invoke("--help")
        assert result.exit_code == 0
        for command in ("map", "play", "progress", "reset"):
            assert command in result.output

    def test_play_help(self):
        assert invoke("play", "--help").exit_code == 0


class TestMap:

    def test_bundled_course(self, progress_file):
        result = invoke("map", "--progress", progress_file)
        assert result.exit_code == 0, result.output
        assert "TypeScript Quest" in result.output

    def test_custom_course_with_progress(self, course_file, progress_file):
        progress_file.parent.mkdir(parents=True)
        progress_file.write_text(
            json.dumps({"one": {"completed": True, "stars": 2, "xp": 10, "lastPlayed": "2026-01-01"}}),
            encoding="utf-8",
        )
        result = invoke("map", "--course", course_file, "--progress", progress_file)
        assert result.exit_code == 0, result.output
        assert "Smoke Course" in result.output
        assert "★★☆" in result.output
        assert "1/3 done" in result.output

    def test_broken_course_file(self, tmp_path, progress_file):
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        result = invoke("map", "--course", bad, "--progress", progress_file)
        assert result.exit_code == 1


class TestPlay:

    def test_perfect_lesson_saves_three_stars(self, course_file, progress_file):
        result = invoke("play", "one", "--course", course_file, "--progress", progress_file, input="a\n\n")
        assert result.exit_code == 0, result.output
        assert "Lesson complete" in result.output
        record = saved(progress_file)["one"]
        assert (record["completed"], record["stars"], record["xp"]) == (True, 3, 10)
        assert record["lastPlayed"]

    def test_mistake_is_replayed_before_scoring(self, course_file, progress_file):
        result = invoke("play", "one", "--course", course_file, "--progress", progress_file, input="b\n\na\n\n")
        assert result.exit_code == 0, result.output
        assert "Incorrect" in result.output
        assert "Mistake review" in result.output
        record = saved(progress_file)["one"]
        assert (record["stars"], record["xp"]) == (2, 10)

    def test_tip_on_request(self, course_file, progress_file):
        result = invoke("play", "one", "--course", course_file, "--progress", progress_file, input="h\na\n\n")
        assert result.exit_code == 0, result.output
        assert "It is a" in result.output

    def test_unreadable_input_asks_again(self, course_file, progress_file):
        result = invoke("play", "lines", "--course", course_file, "--progress", progress_file, input="9\n1\n\n")
        assert result.exit_code == 0, result.output
        assert "try again" in result.output
        assert saved(progress_file)["lines"]["stars"] == 3

    def test_unknown_level(self, course_file, progress_file):
        result = invoke("play", "nope", "--course", course_file, "--progress", progress_file)
        assert result.exit_code == 1
        assert "Unknown level" in result.output

    def test_empty_level(self, course_file, progress_file):
        result = invoke("play", "empty", "--course", course_file, "--progress", progress_file)
        assert result.exit_code == 0
        assert "Nothing here [draft]" in result.output
        assert "no exercises" in result.output
        assert not progress_file.exists()

    def test_interrupted_lesson_not_saved(self, course_file, progress_file):
        result = invoke("play", "one", "--course", course_file, "--progress", progress_file, input="")
        assert result.exit_code == 1
        assert not progress_file.exists()

    def test_replay_overwrites_record(self, course_file, progress_file):
        invoke("play", "one", "--course", course_file, "--progress", progress_file, input="a\n\n")
        invoke("play", "one", "--course", course_file, "--progress", progress_file, input="b\n\nb\n\n")
        record = saved(progress_file)["one"]
        assert (record["stars"], record["xp"]) == (2, 0)


class TestProgressAndReset:

    def test_progress_totals(self, course_file, progress_file):
        invoke("play", "one", "--course", course_file, "--progress", progress_file, input="a\n\n")
        result = invoke("progress", "--course", course_file, "--progress", progress_file)
        assert result.exit_code == 0, result.output
        assert "10" in result.output
        assert "1/3" in result.output

    def test_reset(self, course_file, progress_file):
        invoke("play", "one", "--course", course_file, "--progress", progress_file, input="a\n\n")
        result = invoke("reset", "--yes", "--progress", progress_file)
        assert result.exit_code == 0
        assert saved(progress_file) == {}

    def test_reset_declined(self, course_file, progress_file):
        invoke("play", "one", "--course", course_file, "--progress", progress_file, input="a\n\n")
        result = invoke("reset", "--progress", progress_file, input="n\n")
        assert result.exit_code == 0
        assert "one" in saved(progress_file)
