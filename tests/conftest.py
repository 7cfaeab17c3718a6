"""Pytest configuration and fixtures."""

import copy
from typing import Dict, List, Optional

import pytest

from hevy_notes.config import Settings
from hevy_notes.metrics.units import WeightUnit
from hevy_notes.models.workouts import RemoteWorkout, WorkoutPage
from hevy_notes.store.vault import VaultStore


PUSH_DAY = {
    "id": "w-push-1",
    "title": "Push Day",
    "description": "Heavy bench",
    "start_time": "2024-03-05T17:30:00Z",
    "end_time": "2024-03-05T18:30:00Z",
    "exercises": [
        {
            "title": "Bench Press",
            "sets": [
                {"weight_kg": 100, "reps": 5, "type": "normal", "rpe": 8},
                {"weight_kg": 90, "reps": 8, "type": "normal", "rpe": 9},
            ],
        },
        {
            "title": "Pull Up",
            "sets": [
                {"weight_kg": None, "reps": 10, "type": "normal", "rpe": None},
            ],
        },
    ],
}

LEG_DAY = {
    "id": "w-legs-1",
    "title": "Legs: Heavy",
    "description": "",
    "start_time": "2024-03-07T08:00:00Z",
    "end_time": "2024-03-07T09:10:00Z",
    "exercises": [
        {
            "title": "Squat (Barbell)",
            "sets": [
                {"weight_kg": 140, "reps": 3, "type": "normal", "rpe": 8.5},
            ],
        },
    ],
}


class FakeHevyClient:
    """In-memory stand-in for HevyClient."""

    def __init__(self, workouts: List[dict]):
        self.workouts: Dict[str, dict] = {w["id"]: copy.deepcopy(w) for w in workouts}
        self.list_fails = False
        self.failing_ids: set = set()
        self.detail_calls: List[str] = []
        self.list_calls: List[int] = []

    async def get_workouts(self, limit: int = 10, page: int = 1) -> Optional[WorkoutPage]:
        self.list_calls.append(limit)
        if self.list_fails:
            return None
        return WorkoutPage(workouts=list(self.workouts.values())[:limit])

    async def get_workout(self, workout_id: str) -> Optional[RemoteWorkout]:
        self.detail_calls.append(workout_id)
        if workout_id in self.failing_ids or workout_id not in self.workouts:
            return None
        return RemoteWorkout.model_validate(self.workouts[workout_id])


@pytest.fixture
def push_day_payload() -> dict:
    """API payload of a push workout."""
    return copy.deepcopy(PUSH_DAY)


@pytest.fixture
def leg_day_payload() -> dict:
    """API payload of a leg workout."""
    return copy.deepcopy(LEG_DAY)


@pytest.fixture
def push_day(push_day_payload) -> RemoteWorkout:
    return RemoteWorkout.model_validate(push_day_payload)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a temporary vault."""
    return Settings(
        _env_file=None,
        api_key="test-api-key",
        vault_path=tmp_path,
        folder_path="HevyWorkouts",
        weight_unit=WeightUnit.KG,
        default_limit=10,
    )


@pytest.fixture
def lbs_settings(settings) -> Settings:
    return settings.model_copy(update={"weight_unit": WeightUnit.LBS})


@pytest.fixture
def store(tmp_path) -> VaultStore:
    return VaultStore(tmp_path)


@pytest.fixture
def fake_client(push_day_payload, leg_day_payload) -> FakeHevyClient:
    return FakeHevyClient([push_day_payload, leg_day_payload])


@pytest.fixture
def write_note(tmp_path):
    """Write a raw note into the temporary vault."""

    def _write(path: str, content: str) -> str:
        file_path = tmp_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return path

    return _write
