"""Workout sync service.

Pulls workouts from Hevy and writes them into the vault as notes. Notes are
matched by their derived path; a workout whose title or date changed
upstream is written to a new path instead of updating the old note.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..api.client import HevyClient
from ..config import Settings
from ..models.workouts import WorkoutPage
from ..notes.codec import encode_workout_note, merge_metadata, render_note
from ..store.base import NoteStore
from ..utils.naming import workout_note_path

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Result of a bulk sync."""
    success: bool
    notes_created: int = 0
    notes_skipped: int = 0
    notes_failed: int = 0
    error_message: Optional[str] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> Optional[int]:
        """Calculate sync duration in seconds."""
        if self.started_at and self.completed_at:
            return int((self.completed_at - self.started_at).total_seconds())
        return None


@dataclass
class NoteWriteResult:
    """Outcome of converting one workout."""
    path: str
    created: bool


class SyncService:
    """Coordinates the Hevy client, the note codec and the note store."""

    def __init__(self, client: HevyClient, store: NoteStore, settings: Settings):
        """Initialize the service.

        Args:
            client: Hevy API client.
            store: Store holding the notes.
            settings: Sync settings (folder, display unit, default limit).
        """
        self.client = client
        self.store = store
        self.settings = settings

    async def list_remote_workouts(self, limit: Optional[int] = None) -> Optional[WorkoutPage]:
        """Recent workouts available for conversion; None if Hevy is unreachable."""
        return await self.client.get_workouts(limit or self.settings.default_limit)

    async def sync_all(self, limit: Optional[int] = None) -> SyncResult:
        """
        Create notes for recent workouts that have no note yet.

        Existing notes are left alone. A workout whose details cannot be
        fetched is counted as failed and the loop moves on.

        Args:
            limit: Number of recent workouts to consider (defaults to settings).

        Returns:
            SyncResult with per-outcome counts.
        """
        result = SyncResult(success=False, started_at=datetime.now())
        limit = limit or self.settings.default_limit

        page = await self.client.get_workouts(limit)
        if page is None:
            result.error_message = "No workout data received from Hevy. Check the API key."
            result.completed_at = datetime.now()
            return result

        folder = self.settings.base_folder
        await self.store.ensure_folder(folder)

        for workout in page.workouts:
            path = workout_note_path(folder, workout.title, workout.start_time)
            if await self.store.exists(path):
                result.notes_skipped += 1
                continue

            written = await self.convert_workout(workout.id)
            if written is None:
                result.notes_failed += 1
            else:
                result.notes_created += 1

        result.success = True
        result.completed_at = datetime.now()
        logger.info(
            f"Sync complete: {result.notes_created} created, "
            f"{result.notes_skipped} skipped, {result.notes_failed} failed"
        )
        return result

    async def convert_workout(self, workout_id: str) -> Optional[NoteWriteResult]:
        """
        Fetch one workout and write its note.

        A new note gets the full content. An existing note at the same path
        only has its synced front matter keys refreshed; the body is kept.

        Returns:
            NoteWriteResult, or None if the workout could not be fetched.
        """
        workout = await self.client.get_workout(workout_id)
        if workout is None:
            return None

        folder = self.settings.base_folder
        await self.store.ensure_folder(folder)

        note = encode_workout_note(workout, self.settings.weight_unit, folder)

        if await self.store.exists(note.path):
            await self.store.process_metadata(
                note.path,
                lambda front_matter: merge_metadata(front_matter, note.metadata),
            )
            logger.info(f"Updated metadata of {note.path}")
            return NoteWriteResult(path=note.path, created=False)

        await self.store.create(note.path, render_note(note))
        logger.info(f"Created {note.path}")
        return NoteWriteResult(path=note.path, created=True)
