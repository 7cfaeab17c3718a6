"""Aggregation over synced workout notes."""

from .corpus import NoteRef, list_workout_notes, metric_value
from .weekly import (
    WeeklyReport,
    extract_volume,
    generate_weekly_reports,
    group_by_week,
)
from .monthly import (
    MonthlyReview,
    collect_personal_records,
    generate_monthly_reviews,
    group_by_month,
)
from .exercises import (
    ExerciseTrend,
    TrendPoint,
    exercise_trend,
    generate_exercise_stats_page,
    list_exercises,
    render_exercise_stats_page,
)

__all__ = [
    "NoteRef",
    "list_workout_notes",
    "metric_value",
    "WeeklyReport",
    "extract_volume",
    "generate_weekly_reports",
    "group_by_week",
    "MonthlyReview",
    "collect_personal_records",
    "generate_monthly_reviews",
    "group_by_month",
    "ExerciseTrend",
    "TrendPoint",
    "exercise_trend",
    "generate_exercise_stats_page",
    "list_exercises",
    "render_exercise_stats_page",
]
