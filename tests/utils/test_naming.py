"""Tests for note and key naming."""

from hevy_notes.utils.naming import exercise_slug, sanitize_file_name, workout_note_path


class TestSanitizeFileName:
    """Tests for sanitize_file_name."""

    def test_replaces_unsafe_characters(self):
        assert sanitize_file_name("A/B:C") == "A-B-C"

    def test_every_unsafe_character(self):
        assert sanitize_file_name('\\/:*?"<>|') == "---------"

    def test_keeps_safe_characters(self):
        """Test that spaces, parentheses and unicode survive."""
        assert sanitize_file_name("Squat (Barbell) - Día 1") == "Squat (Barbell) - Día 1"

    def test_collisions_are_not_detected(self):
        assert sanitize_file_name("A/B") == sanitize_file_name("A:B")


class TestExerciseSlug:
    """Tests for exercise_slug."""

    def test_lowercase_hyphenated(self):
        assert exercise_slug("Bench Press") == "bench-press"

    def test_collapses_whitespace(self):
        assert exercise_slug("Bench   Press\t(Dumbbell)") == "bench-press-(dumbbell)"

    def test_sanitizes_first(self):
        assert exercise_slug("Lat Pulldown: Cable") == "lat-pulldown--cable"


class TestWorkoutNotePath:
    """Tests for workout_note_path."""

    def test_path_from_date_and_title(self):
        path = workout_note_path("HevyWorkouts", "Push Day", "2024-03-05T17:30:00Z")
        assert path == "HevyWorkouts/2024-03-05 - Push Day.md"

    def test_title_is_sanitized(self):
        path = workout_note_path("Gym", "Legs: Heavy", "2024-03-07T08:00:00Z")
        assert path == "Gym/2024-03-07 - Legs- Heavy.md"

    def test_date_is_utc(self):
        """Test that an evening workout west of UTC lands on the UTC date."""
        path = workout_note_path("Gym", "Late", "2024-03-07T23:30:00-05:00")
        assert path == "Gym/2024-03-08 - Late.md"
