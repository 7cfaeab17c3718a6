"""Note metadata and note content models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


ONE_REP_MAX_PREFIX = "1rm-"


@dataclass
class NoteMetadata:
    """
    Structured metadata kept in a workout note's front matter.

    ``one_rep_max`` maps exercise slugs to the formatted estimate, stored in
    the front matter as ``1rm-<slug>`` keys.
    """
    hevy_id: str
    date: str
    exercises: List[str] = field(default_factory=list)
    one_rep_max: Dict[str, str] = field(default_factory=dict)

    def to_front_matter(self) -> Dict[str, Any]:
        """Front matter mapping in canonical key order."""
        data: Dict[str, Any] = {
            "hevy_id": self.hevy_id,
            "date": self.date,
            "exercises": list(self.exercises),
        }
        for slug, value in self.one_rep_max.items():
            data[f"{ONE_REP_MAX_PREFIX}{slug}"] = value
        return data

    def apply_to(self, front_matter: Dict[str, Any]) -> None:
        """Merge into an existing front matter mapping, leaving other keys untouched."""
        front_matter.update(self.to_front_matter())

    @classmethod
    def from_front_matter(cls, data: Dict[str, Any]) -> Optional["NoteMetadata"]:
        """Read metadata back from front matter; None when it is not a synced workout note."""
        if not data or "hevy_id" not in data:
            return None

        exercises = data.get("exercises") or []
        if not isinstance(exercises, list):
            exercises = [exercises]

        return cls(
            hevy_id=str(data["hevy_id"]),
            date=str(data.get("date") or ""),
            exercises=[str(e) for e in exercises],
            one_rep_max={
                key[len(ONE_REP_MAX_PREFIX):]: str(value)
                for key, value in data.items()
                if isinstance(key, str) and key.startswith(ONE_REP_MAX_PREFIX)
            },
        )


@dataclass
class WorkoutNote:
    """A rendered workout note ready to be written to the store."""
    path: str
    metadata: NoteMetadata
    body: str

    @property
    def name(self) -> str:
        """File name without folder or extension."""
        return self.path.rsplit("/", 1)[-1].removesuffix(".md")
