"""
Terminal presentation of session exercises.

Rendering and input parsing for each exercise kind. Nothing in the engine
depends on this module; the CLI uses it to turn a SessionExercise into
panels and a typed line back into an answer value.

Input formats:
- choice: option number, e.g. ``2``
- fill: free text
- order: token numbers in order, e.g. ``3 1 2``
- match: one right-column number per left item, e.g. ``2 3 1``
- select-line: line number, e.g. ``4``
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from quest.curriculum.models import ExerciseKind
from quest.exercises import get_handler
from quest.study.session_builder import SessionExercise

from .lesson import LessonResult, SessionState
from .scoring import stars_label

THEME = {
    "accent": "cyan",
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "review": "magenta",
}

INPUT_HELP = {
    ExerciseKind.CHOICE: "Enter the option number. 'h'=tip",
    ExerciseKind.FILL: "Type your answer. 'h'=tip",
    ExerciseKind.ORDER: "Enter token numbers in order (e.g. 3 1 2). 'h'=tip",
    ExerciseKind.MATCH: "Enter a right-column number for each left item, in order (e.g. 2 3 1). 'h'=tip",
    ExerciseKind.SELECT_LINE: "Enter the line number. 'h'=tip",
}


# =============================================================================
# Input parsing
# =============================================================================


def _numbers(text: str) -> list[int] | None:
    parts = text.replace(",", " ").split()
    if not parts or not all(p.isdigit() for p in parts):
        return None
    return [int(p) for p in parts]


def _pick(numbers: list[int], items: tuple[str, ...]) -> list[str] | None:
    if any(not 1 <= n <= len(items) for n in numbers):
        return None
    return [items[n - 1] for n in numbers]


def parse_answer(item: SessionExercise, text: str) -> Any:
    """
    Turn typed input into an answer value for ``item``.

    Returns None when the input cannot be read for this kind, so the
    caller can ask again.
    """
    exercise = item.exercise
    kind = item.kind

    if kind == ExerciseKind.FILL:
        return text

    numbers = _numbers(text)
    if numbers is None:
        return None

    if kind == ExerciseKind.CHOICE:
        picked = _pick(numbers, item.options or exercise.options)
        return picked[0] if picked and len(picked) == 1 else None

    if kind == ExerciseKind.ORDER:
        if len(set(numbers)) != len(numbers):
            return None
        return _pick(numbers, item.tokens or exercise.tokens)

    if kind == ExerciseKind.MATCH:
        left = item.left or exercise.left
        rights = _pick(numbers, item.right or exercise.right)
        if rights is None or len(rights) != len(left):
            return None
        return dict(zip(left, rights))

    if kind == ExerciseKind.SELECT_LINE:
        if len(numbers) != 1 or not 1 <= numbers[0] <= len(exercise.lines):
            return None
        return numbers[0]

    return None


# =============================================================================
# Rendering
# =============================================================================


def _numbered(items: tuple[str, ...], label: str = "") -> Table:
    table = Table(box=box.MINIMAL, show_header=bool(label))
    table.add_column("#", style="cyan", justify="right", width=4)
    table.add_column(label or "Option", style="white")
    for i, text in enumerate(items, 1):
        table.add_row(f"[{i}]", text)
    return table


def render_exercise(item: SessionExercise, state: SessionState, level_title: str) -> Panel:
    """Question panel: header badges, prompt and the kind's selectable items."""
    exercise = item.exercise
    kind = item.kind

    header = Text()
    header.append(f"{level_title}  ·  Step {state.step_number} of {state.total_steps}")
    header.append(f"  ·  {state.progress_percent}%", style="dim")
    if state.remedial:
        header.append("  [Mistake review]", style=Style(color=THEME["warning"], bold=True))
    if item.is_review:
        header.append("  [Review]", style=Style(color=THEME["review"], bold=True))

    body = Table.grid(padding=(0, 0))
    body.add_row(Text(exercise.prompt, style="bold"))
    if item.is_review and item.source_level_title:
        body.add_row(Text(f"Revisiting: {item.source_level_title}", style="dim italic"))
    body.add_row(Text(""))

    if kind == ExerciseKind.CHOICE:
        body.add_row(_numbered(item.options or exercise.options))
    elif kind == ExerciseKind.ORDER:
        body.add_row(_numbered(item.tokens or exercise.tokens, "Token"))
    elif kind == ExerciseKind.MATCH:
        grid = Table.grid(padding=(0, 4))
        grid.add_row(
            _numbered(item.left or exercise.left, "Left"),
            _numbered(item.right or exercise.right, "Right"),
        )
        body.add_row(grid)
    elif kind == ExerciseKind.SELECT_LINE:
        body.add_row(_numbered(exercise.lines, "Code"))
    elif kind == ExerciseKind.FILL and exercise.placeholder:
        body.add_row(Text(f"({exercise.placeholder})", style="dim"))

    return Panel(
        body,
        title=header,
        title_align="left",
        border_style=THEME["accent"],
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_result(item: SessionExercise, correct: bool) -> Panel:
    """Feedback panel shown after a check."""
    color = THEME["success"] if correct else THEME["error"]
    content = Text()
    content.append("✓ Correct!" if correct else "✗ Incorrect", style=Style(color=color, bold=True))

    if item.explanation:
        content.append("\n\n")
        content.append(item.explanation, style="dim")

    if not correct:
        handler = get_handler(item.exercise.type)
        if handler is not None:
            content.append("\n\nAnswer: ", style="dim")
            content.append(handler.describe_solution(item.exercise), style="bold")

    return Panel(content, border_style=color, box=box.HEAVY, padding=(1, 2))


def render_summary(level_title: str, result: LessonResult) -> Panel:
    content = Text()
    content.append("Lesson complete!", style="bold")
    content.append(f"\n\n{level_title}\nRating: ")
    content.append(stars_label(result.stars), style="yellow")
    content.append(f"\nXP earned: +{result.xp}\nMistakes: {result.mistake_count}")
    return Panel(
        content,
        title="Summary",
        border_style=THEME["success"],
    )


def show_tip(console: Console, tip: str | None) -> None:
    if tip:
        console.print(f"[{THEME['warning']}]Tip:[/{THEME['warning']}] {tip}")
    else:
        console.print("[dim]No tip for this step[/dim]")
