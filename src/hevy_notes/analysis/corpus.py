"""Discovery of synced workout notes in the vault."""

from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional

from ..config import Settings
from ..store.base import NoteStore
from ..utils.periods import parse_note_date


@dataclass
class NoteRef:
    """A workout note located by its file name."""
    path: str
    day: date

    @property
    def name(self) -> str:
        """File name without folder or extension; used for [[wiki links]]."""
        return self.path.rsplit("/", 1)[-1].removesuffix(".md")

    @property
    def link(self) -> str:
        return f"[[{self.name}]]"


def metric_value(value: Any) -> Optional[float]:
    """Numeric value of a front matter metric; written as a string, hand edits may leave numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


async def list_workout_notes(store: NoteStore, settings: Settings) -> List[NoteRef]:
    """
    Workout notes directly inside the base folder, sorted by name.

    Only files whose name starts with a YYYY-MM-DD date count; report and
    stats subfolders are never scanned.
    """
    refs = []
    for path in await store.list_notes(settings.base_folder):
        day = parse_note_date(path.rsplit("/", 1)[-1])
        if day is not None:
            refs.append(NoteRef(path=path, day=day))
    return refs
