"""
Quest: terminal front-end for micro-lessons.

Commands:
- quest map       - Show units, levels and earned stars
- quest play ID   - Play one level
- quest progress  - Show total XP and completed lessons
- quest reset     - Clear saved progress
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from quest.config import get_settings
from quest.curriculum import Course, CurriculumError, load_course
from quest.study.session_builder import collect_review_pool

from . import prompts as ui
from .lesson import Lesson, LessonResult, LessonStatus
from .progress_store import (
    JsonProgressStore,
    completed_count,
    record_completion,
    total_xp,
    unit_completed,
)
from .scoring import stars_label

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quest",
    help="Quest: adaptive micro-lessons in the terminal",
    no_args_is_help=True,
)
console = Console()

CourseOption = typer.Option(None, "--course", "-c", help="Curriculum JSON file")
ProgressOption = typer.Option(None, "--progress", "-p", help="Progress JSON file")


def _load(course_file: Optional[Path]) -> Course:
    try:
        return load_course(course_file or get_settings().course_file)
    except CurriculumError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def _store(progress_file: Optional[Path]) -> JsonProgressStore:
    return JsonProgressStore(progress_file or get_settings().progress_file)


# =============================================================================
# Commands
# =============================================================================


@app.command("map")
def show_map(
    course_file: Optional[Path] = CourseOption,
    progress_file: Optional[Path] = ProgressOption,
) -> None:
    """Show the learning path with per-level stars."""
    course = _load(course_file)
    progress = _store(progress_file).load_progress()

    console.print(f"\n[bold cyan]{escape(course.meta.title or 'Course')}[/bold cyan]")
    if course.meta.subtitle:
        console.print(f"[dim]{escape(course.meta.subtitle)}[/dim]")

    for index, unit in enumerate(course.units, 1):
        table = Table(
            title=f"Unit {index}: {escape(unit.title)}  ({unit_completed(unit, progress)}/{len(unit.levels)} done)",
            title_justify="left",
            caption=unit.description or None,
            caption_justify="left",
        )
        table.add_column("ID", style="dim")
        table.add_column("Level")
        table.add_column("Goal")
        table.add_column("Steps", justify="right")
        table.add_column("Stars")

        for level in unit.levels:
            record = progress.get(level.id)
            stars = stars_label(record.stars) if record and record.completed else stars_label(0)
            table.add_row(escape(level.id), escape(level.title), escape(level.goal), str(len(level.steps)), stars)

        console.print()
        console.print(table)


@app.command()
def play(
    level_id: str = typer.Argument(..., help="Level to play (see 'quest map')"),
    course_file: Optional[Path] = CourseOption,
    progress_file: Optional[Path] = ProgressOption,
) -> None:
    """
    Play one level.

    Steps from earlier levels are mixed in for review. Missed steps are
    replayed once at the end before the lesson is scored.
    """
    course = _load(course_file)
    level = course.find_level(level_id)
    if level is None:
        console.print(f"[red]Unknown level: {escape(level_id)}[/red]")
        raise typer.Exit(1)

    store = _store(progress_file)

    def save(result: LessonResult) -> None:
        store.save_progress(record_completion(store.load_progress(), level.id, result))

    review_pool = collect_review_pool(course.levels, course.level_position(level.id))
    lesson = Lesson(level, review_pool, on_complete=save)

    if lesson.status == LessonStatus.EMPTY:
        console.print(f"\n[bold]{escape(level.title)}[/bold]")
        console.print("[yellow]This lesson has no exercises yet.[/yellow]")
        raise typer.Exit(0)

    result: LessonResult | None = None
    try:
        while result is None:
            item = lesson.current
            console.print()
            console.print(ui.render_exercise(item, lesson.state, level.title))
            console.print(f"[dim]{ui.INPUT_HELP[item.kind]}[/dim]")

            while True:
                raw = Prompt.ask("[cyan]>[/cyan]")
                if raw.strip().lower() == "h":
                    ui.show_tip(console, lesson.show_tip())
                    continue
                answer = ui.parse_answer(item, raw)
                if answer is None:
                    console.print("[yellow]Could not read that answer, try again.[/yellow]")
                    continue
                break

            lesson.answer(answer)
            correct = lesson.check()
            console.print(ui.render_result(item, correct))
            Prompt.ask("[dim]Press Enter to continue[/dim]", default="", show_default=False)
            result = lesson.advance()
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n[yellow]Lesson interrupted, progress not saved.[/yellow]")
        raise typer.Exit(1)

    console.print()
    console.print(ui.render_summary(level.title, result))


@app.command()
def progress(
    course_file: Optional[Path] = CourseOption,
    progress_file: Optional[Path] = ProgressOption,
) -> None:
    """Show total XP and completed lessons."""
    course = _load(course_file)
    saved = _store(progress_file).load_progress()

    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("XP", str(total_xp(saved)))
    table.add_row("Lessons completed", f"{completed_count(saved)}/{len(course.levels)}")

    console.print("\n[bold cyan]Progress[/bold cyan]")
    console.print(table)


@app.command()
def reset(
    progress_file: Optional[Path] = ProgressOption,
    confirm: bool = typer.Option(
        False,
        "--yes", "-y",
        help="Skip confirmation",
    ),
) -> None:
    """Clear all saved progress."""
    if not confirm and not Confirm.ask("Reset ALL progress? This cannot be undone!", default=False):
        raise typer.Exit(0)

    _store(progress_file).save_progress({})
    console.print("[green]All progress has been reset.[/green]")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
