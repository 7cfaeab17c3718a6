"""
Monthly Fitness Reviews

Peak estimated 1RM per exercise for each calendar month, taken from the
``1rm-*`` front matter of workout notes. Reviews are rebuilt from scratch on
every run.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from ..config import Settings
from ..exceptions import NoteStoreError
from ..metrics.units import WeightUnit
from ..models.notes import ONE_REP_MAX_PREFIX
from ..store.base import NoteStore
from ..utils.periods import month_label
from .corpus import NoteRef, list_workout_notes, metric_value

logger = logging.getLogger(__name__)


@dataclass
class MonthlyReview:
    """Personal records and sessions for one month."""

    month: str
    records: Dict[str, float]
    notes: List[NoteRef]
    unit: WeightUnit

    def to_markdown(self) -> str:
        unit = WeightUnit(self.unit).value
        lines = [
            f"# Fitness Review: {self.month}",
            "",
            "## 🏆 Personal records this month",
            f"| Exercise | Peak 1RM ({unit}) |",
            "| --- | --- |",
        ]
        for name, value in sorted(self.records.items()):
            lines.append(f"| **{name.upper()}** | {value:.1f} |")
        lines.append("")
        lines.append("## 📅 Sessions")
        lines.extend(f"- {note.link}" for note in self.notes)
        return "\n".join(lines)


def exercise_name_from_key(key: str) -> str:
    """'1rm-bench-press' -> 'bench press'."""
    return key[len(ONE_REP_MAX_PREFIX):].replace("-", " ")


def collect_personal_records(front_matters: Iterable[Dict[str, Any]]) -> Dict[str, float]:
    """Highest ``1rm-*`` value per exercise across the given front matter mappings."""
    records: Dict[str, float] = {}
    for front_matter in front_matters:
        for key, raw in front_matter.items():
            if not isinstance(key, str) or not key.startswith(ONE_REP_MAX_PREFIX):
                continue
            value = metric_value(raw)
            if value is None:
                continue
            name = exercise_name_from_key(key)
            if name not in records or value > records[name]:
                records[name] = value
    return records


def group_by_month(notes: List[NoteRef]) -> Dict[str, List[NoteRef]]:
    """Group notes by the YYYY-MM prefix of their file name, in chronological order."""
    months: Dict[str, List[NoteRef]] = defaultdict(list)
    for note in notes:
        months[month_label(note.day)].append(note)
    return {month: months[month] for month in sorted(months)}


def monthly_review_path(settings: Settings, month: str) -> str:
    return f"{settings.monthly_reports_folder}/{month}.md"


async def generate_monthly_reviews(store: NoteStore, settings: Settings) -> List[MonthlyReview]:
    """
    Rebuild the review of every month that has workout notes.

    An existing review for a month is deleted and written again.

    Returns:
        The reviews written by this run.
    """
    await store.ensure_folder(settings.monthly_reports_folder)
    months = group_by_month(await list_workout_notes(store, settings))

    written = []
    for month, notes in months.items():
        try:
            front_matters = [await store.read_metadata(note.path) for note in notes]
        except NoteStoreError as e:
            logger.warning(f"Skipping review for {month}: {e.message}")
            continue

        review = MonthlyReview(
            month=month,
            records=collect_personal_records(front_matters),
            notes=notes,
            unit=settings.weight_unit,
        )

        path = monthly_review_path(settings, month)
        if await store.exists(path):
            await store.delete(path)
        await store.create(path, review.to_markdown())
        written.append(review)

    logger.info(f"Monthly reviews archived: {len(written)} written")
    return written
