"""
Strength metrics.

The one-rep max (1RM) figures produced here are estimates from the Epley
formula, not measured lifts. They are only comparable with other estimates
computed the same way.
"""

from typing import Iterable, Optional

from ..models.workouts import RemoteSet


def estimate_one_rep_max(weight_kg: Optional[float], reps: Optional[int]) -> float:
    """
    Estimate a one-rep max with the Epley formula.

    1RM = weight * (1 + reps / 30)

    Args:
        weight_kg: Weight lifted in kilograms
        reps: Repetitions completed

    Returns:
        Estimated 1RM in kilograms, or 0 when weight or reps is missing/zero
    """
    if not weight_kg or not reps:
        return 0.0
    return weight_kg * (1 + reps / 30)


def best_one_rep_max(sets: Iterable[RemoteSet]) -> float:
    """Highest 1RM estimate across sets that recorded both weight and reps."""
    estimates = [
        estimate_one_rep_max(s.weight_kg, s.reps)
        for s in sets
        if s.weight_kg is not None and s.reps is not None
    ]
    return max(estimates) if estimates else 0.0
