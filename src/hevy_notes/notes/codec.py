"""
Workout note encoding.

A workout becomes a Markdown note with YAML front matter:

    ---
    hevy_id: <workout id>
    date: '<start time>'
    exercises: [<titles>]
    1rm-<slug>: '<estimate>'
    ---

    # <title>

    ## <exercise>
    - Set 1: **100.0 kg** x 5

Front matter is the machine-readable side used by the aggregation passes;
the body is for people and may be edited freely once written.
"""

from typing import Any, Dict, List

from ..metrics.strength import best_one_rep_max
from ..metrics.units import WeightUnit, convert_weight, format_weight
from ..models.notes import NoteMetadata, WorkoutNote
from ..models.workouts import RemoteExercise, RemoteWorkout
from ..utils.naming import exercise_slug, workout_note_path
from .front_matter import join_front_matter


def build_metadata(workout: RemoteWorkout, unit: WeightUnit) -> NoteMetadata:
    """Front matter values for a workout, with 1RM estimates in the display unit."""
    one_rep_max: Dict[str, str] = {}
    for exercise in workout.exercises:
        best = best_one_rep_max(exercise.sets)
        one_rep_max[exercise_slug(exercise.title)] = f"{convert_weight(best, unit):.1f}"

    return NoteMetadata(
        hevy_id=workout.id,
        date=workout.start_time,
        exercises=[e.title for e in workout.exercises],
        one_rep_max=one_rep_max,
    )


def _render_exercise(exercise: RemoteExercise, unit: WeightUnit) -> List[str]:
    lines = [f"## {exercise.title}"]
    for number, s in enumerate(exercise.sets, start=1):
        reps = s.reps if s.reps is not None else "-"
        lines.append(f"- Set {number}: **{format_weight(s.weight_kg, unit)}** x {reps}")
    lines.append("")
    return lines


def render_body(workout: RemoteWorkout, unit: WeightUnit) -> str:
    """Markdown body: title heading, then one section per exercise."""
    lines = [f"# {workout.title}", ""]
    for exercise in workout.exercises:
        lines.extend(_render_exercise(exercise, unit))
    return "\n".join(lines) + "\n"


def encode_workout_note(
    workout: RemoteWorkout,
    unit: WeightUnit,
    folder: str,
) -> WorkoutNote:
    """Encode a remote workout as a note at its derived vault path."""
    return WorkoutNote(
        path=workout_note_path(folder, workout.title, workout.start_time),
        metadata=build_metadata(workout, unit),
        body=render_body(workout, unit),
    )


def render_note(note: WorkoutNote) -> str:
    """Full file content for a new note."""
    return join_front_matter(note.metadata.to_front_matter(), "\n" + note.body)


def merge_metadata(front_matter: Dict[str, Any], metadata: NoteMetadata) -> Dict[str, Any]:
    """Refresh synced keys in an existing note's front matter; other keys are kept."""
    metadata.apply_to(front_matter)
    return front_matter
