"""Naming, period and logging helpers."""

from .log_sanitizer import (
    LogSanitizationFilter,
    install_log_sanitizer,
    sanitize_string,
)
from .naming import exercise_slug, sanitize_file_name, workout_note_path
from .periods import (
    iso_week_label,
    month_label,
    note_date,
    parse_note_date,
    parse_timestamp,
    week_sort_key,
)

__all__ = [
    "LogSanitizationFilter",
    "install_log_sanitizer",
    "sanitize_string",
    "exercise_slug",
    "sanitize_file_name",
    "workout_note_path",
    "iso_week_label",
    "month_label",
    "note_date",
    "parse_note_date",
    "parse_timestamp",
    "week_sort_key",
]
