"""Data models for remote workouts and local notes."""

from .workouts import RemoteExercise, RemoteSet, RemoteWorkout, WorkoutPage
from .notes import ONE_REP_MAX_PREFIX, NoteMetadata, WorkoutNote

__all__ = [
    "RemoteExercise",
    "RemoteSet",
    "RemoteWorkout",
    "WorkoutPage",
    "ONE_REP_MAX_PREFIX",
    "NoteMetadata",
    "WorkoutNote",
]
