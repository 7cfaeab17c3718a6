"""Workout note encoding and front matter handling."""

from .codec import (
    build_metadata,
    encode_workout_note,
    merge_metadata,
    render_body,
    render_note,
)
from .front_matter import (
    FrontMatterError,
    dump_front_matter,
    join_front_matter,
    split_front_matter,
)

__all__ = [
    "build_metadata",
    "encode_workout_note",
    "merge_metadata",
    "render_body",
    "render_note",
    "FrontMatterError",
    "dump_front_matter",
    "join_front_matter",
    "split_front_matter",
]
