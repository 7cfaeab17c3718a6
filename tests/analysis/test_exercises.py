"""Tests for per-exercise views."""

from datetime import date

import pytest

from hevy_notes.analysis.exercises import (
    exercise_trend,
    generate_exercise_stats_page,
    list_exercises,
    render_exercise_stats_page,
)


class TestListExercises:
    @pytest.mark.asyncio
    async def test_union_of_front_matter_lists(self, store, settings, write_note):
        write_note(
            "HevyWorkouts/2024-03-05 - Push.md",
            "---\nexercises: [Bench Press, Pull Up]\n---\n",
        )
        write_note(
            "HevyWorkouts/2024-03-07 - Legs.md",
            "---\nexercises: [Squat (Barbell), Bench Press]\n---\n",
        )
        write_note("HevyWorkouts/2024-03-08 - Broken.md", "---\n- x\n---\n")

        assert await list_exercises(store, settings) == ["Bench Press", "Pull Up", "Squat (Barbell)"]

    @pytest.mark.asyncio
    async def test_empty_vault(self, store, settings):
        assert await list_exercises(store, settings) == []


class TestExerciseTrend:
    """Tests for exercise_trend."""

    @pytest.mark.asyncio
    async def test_points_sorted_by_date(self, store, settings, write_note):
        write_note(
            "HevyWorkouts/2024-03-19 - Push.md",
            "---\ndate: '2024-03-19T17:00:00Z'\n1rm-bench-press: '105.5'\n---\n",
        )
        write_note(
            "HevyWorkouts/2024-03-05 - Push.md",
            "---\ndate: '2024-03-05T17:30:00Z'\n1rm-bench-press: '116.7'\n---\n",
        )
        write_note(
            "HevyWorkouts/2024-03-07 - Legs.md",
            "---\ndate: '2024-03-07T08:00:00Z'\n1rm-squat: '150.0'\n---\n",
        )

        trend = await exercise_trend(store, settings, "Bench Press")

        assert trend.key == "1rm-bench-press"
        assert [(p.day, p.value) for p in trend.points] == [
            (date(2024, 3, 5), 116.7),
            (date(2024, 3, 19), 105.5),
        ]
        assert trend.latest.value == 105.5

    @pytest.mark.asyncio
    async def test_date_fallbacks(self, store, settings, write_note):
        """Test hand-written YAML dates and notes without a date."""
        write_note("HevyWorkouts/2024-03-01 - A.md", "---\ndate: 2024-02-28\n1rm-squat: 140\n---\n")
        write_note("HevyWorkouts/2024-03-02 - B.md", "---\n1rm-squat: '142.5'\n---\n")
        write_note("HevyWorkouts/2024-03-03 - C.md", "---\ndate: someday\n1rm-squat: '150.0'\n---\n")

        trend = await exercise_trend(store, settings, "Squat")

        assert [(p.day, p.value) for p in trend.points] == [
            (date(2024, 2, 28), 140.0),
            (date(2024, 3, 2), 142.5),
        ]

    @pytest.mark.asyncio
    async def test_no_data(self, store, settings):
        trend = await exercise_trend(store, settings, "Bench Press")
        assert trend.points == []
        assert trend.latest is None


class TestExerciseStatsPage:
    """Tests for stats page generation."""

    def test_render(self):
        assert render_exercise_stats_page("Bench Press") == (
            "# Stats: Bench Press\n"
            "\n"
            "## 1RM trend\n"
            "```hevy-chart\n"
            "exercise: Bench Press\n"
            "```"
        )

    @pytest.mark.asyncio
    async def test_creates_page_once(self, store, settings):
        path = await generate_exercise_stats_page(store, settings, "Lat Pulldown: Cable")

        assert path == "HevyWorkouts/ExerciseStats/Lat Pulldown- Cable.md"
        assert (await store.read(path)).startswith("# Stats: Lat Pulldown: Cable\n")

    @pytest.mark.asyncio
    async def test_existing_page_kept(self, store, settings, write_note):
        write_note("HevyWorkouts/ExerciseStats/Bench Press.md", "my chart")

        path = await generate_exercise_stats_page(store, settings, "Bench Press")

        assert await store.read(path) == "my chart"
