"""Hevy API workout records."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.periods import parse_timestamp


class RemoteSet(BaseModel):
    """A single set as reported by Hevy. Weight and reps are absent for bodyweight or incomplete sets."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    type: str = "normal"
    rpe: Optional[float] = None


class RemoteExercise(BaseModel):
    """An exercise and its sets within a workout."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    sets: List[RemoteSet] = Field(default_factory=list)


class RemoteWorkout(BaseModel):
    """A workout fetched from Hevy; ``id`` is the stable sync key."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    title: str
    description: Optional[str] = ""
    start_time: str
    end_time: Optional[str] = None
    exercises: List[RemoteExercise] = Field(default_factory=list)

    @field_validator("start_time")
    @classmethod
    def _check_start_time(cls, value: str) -> str:
        # Note paths are derived from the start date
        parse_timestamp(value)
        return value


class WorkoutPage(BaseModel):
    """One page of the workout listing endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    workouts: List[RemoteWorkout] = Field(default_factory=list)
    page: int = 1
    page_count: int = 1
