"""Sync Hevy workouts into Markdown notes and aggregate strength reports."""

from hevy_notes.api.client import HevyClient
from hevy_notes.config import Settings, get_settings
from hevy_notes.store import NoteStore, VaultStore
from hevy_notes.services import NoteWriteResult, SyncResult, SyncService
from hevy_notes.analysis import (
    generate_exercise_stats_page,
    generate_monthly_reviews,
    generate_weekly_reports,
    exercise_trend,
    list_exercises,
)

__version__ = "0.1.0"

__all__ = [
    "HevyClient",
    "Settings",
    "get_settings",
    "NoteStore",
    "VaultStore",
    "NoteWriteResult",
    "SyncResult",
    "SyncService",
    "generate_exercise_stats_page",
    "generate_monthly_reviews",
    "generate_weekly_reports",
    "exercise_trend",
    "list_exercises",
]
