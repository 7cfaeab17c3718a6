"""Per-exercise views: exercise index, 1RM trend and stats pages."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from ..config import Settings
from ..exceptions import NoteStoreError
from ..models.notes import ONE_REP_MAX_PREFIX
from ..store.base import NoteStore
from ..utils.naming import exercise_slug, sanitize_file_name
from ..utils.periods import note_date
from .corpus import list_workout_notes, metric_value

logger = logging.getLogger(__name__)


@dataclass
class TrendPoint:
    """Estimated 1RM of one exercise on one workout day."""
    day: date
    value: float


@dataclass
class ExerciseTrend:
    """1RM history of an exercise, oldest first."""
    exercise: str
    key: str
    points: List[TrendPoint]

    @property
    def latest(self) -> Optional[TrendPoint]:
        return self.points[-1] if self.points else None


async def list_exercises(store: NoteStore, settings: Settings) -> List[str]:
    """Sorted names of every exercise recorded in workout note front matter."""
    names = set()
    for note in await list_workout_notes(store, settings):
        try:
            front_matter = await store.read_metadata(note.path)
        except NoteStoreError as e:
            logger.warning(f"Ignoring {note.path}: {e.message}")
            continue
        exercises = front_matter.get("exercises")
        if isinstance(exercises, list):
            names.update(str(e) for e in exercises)
    return sorted(names)


def _point_date(raw_date, fallback: date) -> Optional[date]:
    if raw_date is None or raw_date == "":
        return fallback
    if isinstance(raw_date, datetime):
        return raw_date.date()
    if isinstance(raw_date, date):
        return raw_date
    try:
        return note_date(str(raw_date))
    except ValueError:
        return None


async def exercise_trend(store: NoteStore, settings: Settings, exercise: str) -> ExerciseTrend:
    """
    Collect the estimated 1RM of ``exercise`` from every workout note that has it.

    The point date is the note's ``date`` metadata, or the file name date
    when that is missing. Notes with an unreadable date or value are skipped.
    """
    key = f"{ONE_REP_MAX_PREFIX}{exercise_slug(exercise)}"
    points = []
    for note in await list_workout_notes(store, settings):
        try:
            front_matter = await store.read_metadata(note.path)
        except NoteStoreError as e:
            logger.warning(f"Ignoring {note.path}: {e.message}")
            continue
        if key not in front_matter:
            continue

        value = metric_value(front_matter[key])
        day = _point_date(front_matter.get("date"), note.day)
        if value is None or day is None:
            continue
        points.append(TrendPoint(day=day, value=value))

    points.sort(key=lambda p: p.day)
    return ExerciseTrend(exercise=exercise, key=key, points=points)


def exercise_stats_path(settings: Settings, exercise: str) -> str:
    return f"{settings.exercise_stats_folder}/{sanitize_file_name(exercise)}.md"


def render_exercise_stats_page(exercise: str) -> str:
    """Stats page embedding a 1RM chart block for the exercise."""
    return (
        f"# Stats: {exercise}\n"
        f"\n"
        f"## 1RM trend\n"
        f"```hevy-chart\n"
        f"exercise: {exercise}\n"
        f"```"
    )


async def generate_exercise_stats_page(store: NoteStore, settings: Settings, exercise: str) -> str:
    """Create the stats page for an exercise unless it exists; returns its path."""
    await store.ensure_folder(settings.exercise_stats_folder)
    path = exercise_stats_path(settings, exercise)
    if not await store.exists(path):
        await store.create(path, render_exercise_stats_page(exercise))
        logger.info(f"Created stats page {path}")
    return path
