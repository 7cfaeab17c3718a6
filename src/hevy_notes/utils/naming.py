"""File and key naming helpers for workout notes."""

import re

from .periods import note_date


_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE = re.compile(r"\s+")


def sanitize_file_name(name: str) -> str:
    """
    Replace characters that are not allowed in vault file names with '-'.

    Names are not truncated and collisions after sanitization are not
    detected: 'A/B' and 'A:B' both become 'A-B'.
    """
    return _UNSAFE_FILENAME_CHARS.sub("-", name)


def exercise_slug(title: str) -> str:
    """Lowercase, hyphenated form of an exercise title used in metadata keys."""
    return _WHITESPACE.sub("-", sanitize_file_name(title).lower())


def workout_note_path(folder: str, title: str, start_time: str) -> str:
    """Vault path of a workout note: '<folder>/<YYYY-MM-DD> - <title>.md'."""
    day = note_date(start_time).isoformat()
    return f"{folder}/{day} - {sanitize_file_name(title)}.md"
