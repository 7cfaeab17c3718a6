"""
Weekly Training Reports

Training volume per ISO week, read back from the set lines of workout notes.
A week that already has a report is left as it is.
"""

import logging
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config import Settings
from ..exceptions import NoteStoreError
from ..metrics.units import WeightUnit, convert_between
from ..store.base import NoteStore
from ..utils.periods import iso_week_label, week_sort_key
from .corpus import NoteRef, list_workout_notes

logger = logging.getLogger(__name__)


SET_LINE = re.compile(r"\*\*([\d.]+)\s*(kg|lbs)\*\*\s*x\s*(\d+)")
SET_LINE_PREFIX = "- Set "


@dataclass
class WeeklyReport:
    """Volume summary for one ISO week."""

    week: str
    notes: List[NoteRef]
    volume: float
    unit: WeightUnit
    skipped_lines: int = 0

    @property
    def workout_count(self) -> int:
        return len(self.notes)

    def to_markdown(self) -> str:
        links = "\n".join(f"- {note.link}" for note in self.notes)
        return (
            f"# Weekly Report: {self.week}\n"
            f"- Workouts: {self.workout_count}\n"
            f"- Volume: {self.volume:.1f} {WeightUnit(self.unit).value}\n"
            f"\n"
            f"## Workouts\n"
            f"{links}"
        )


def extract_volume(content: str, unit: WeightUnit) -> Tuple[float, int]:
    """
    Sum weight x reps over every set line in a note.

    Weights written in the other unit are converted to ``unit``. Lines that
    look like set lines but cannot be parsed are skipped.

    Returns:
        Tuple of (volume, number of skipped set lines)
    """
    volume = 0.0
    skipped = 0
    for line in content.split("\n"):
        match = SET_LINE.search(line)
        if match:
            try:
                weight = float(match.group(1))
            except ValueError:
                skipped += 1
                continue
            reps = int(match.group(3))
            weight = convert_between(weight, WeightUnit(match.group(2)), unit)
            volume += weight * reps
        elif line.lstrip().startswith(SET_LINE_PREFIX):
            skipped += 1
    return volume, skipped


def group_by_week(notes: List[NoteRef]) -> Dict[str, List[NoteRef]]:
    """Group notes by the ISO week of their file name date, in chronological order."""
    weeks: Dict[str, List[NoteRef]] = defaultdict(list)
    for note in notes:
        weeks[iso_week_label(note.day)].append(note)
    return {week: weeks[week] for week in sorted(weeks, key=week_sort_key)}


def weekly_report_path(settings: Settings, week: str) -> str:
    return f"{settings.weekly_reports_folder}/Report-{week}.md"


async def generate_weekly_reports(store: NoteStore, settings: Settings) -> List[WeeklyReport]:
    """
    Write a report for every week that has workout notes but no report yet.

    Args:
        store: Note store holding the vault.
        settings: Folder layout and display unit.

    Returns:
        The reports written by this run.
    """
    if not await store.exists(settings.base_folder):
        logger.info(f"No workout folder at {settings.base_folder}; nothing to report")
        return []

    weeks = group_by_week(await list_workout_notes(store, settings))
    await store.ensure_folder(settings.weekly_reports_folder)

    written = []
    for week, notes in weeks.items():
        path = weekly_report_path(settings, week)
        if await store.exists(path):
            continue

        volume = 0.0
        skipped = 0
        try:
            for note in notes:
                note_volume, note_skipped = extract_volume(await store.read(note.path), settings.weight_unit)
                volume += note_volume
                skipped += note_skipped
        except NoteStoreError as e:
            logger.warning(f"Skipping report for {week}: {e.message}")
            continue

        if skipped:
            logger.debug(f"{week}: skipped {skipped} unparseable set lines")

        report = WeeklyReport(
            week=week,
            notes=notes,
            volume=volume,
            unit=settings.weight_unit,
            skipped_lines=skipped,
        )
        await store.create(path, report.to_markdown())
        written.append(report)

    logger.info(f"Weekly reports updated: {len(written)} written")
    return written
