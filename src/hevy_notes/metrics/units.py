"""Weight unit conversion and formatting."""

from enum import Enum
from typing import Optional


KG_TO_LBS = 2.20462262


class WeightUnit(str, Enum):
    """Display units for weights."""
    KG = "kg"
    LBS = "lbs"


def convert_weight(weight_kg: Optional[float], unit: WeightUnit) -> float:
    """
    Convert a weight recorded in kilograms to the display unit.

    Args:
        weight_kg: Weight in kilograms, or None for bodyweight/incomplete sets
        unit: Target display unit

    Returns:
        Converted weight; 0 when no weight was recorded
    """
    if weight_kg is None:
        return 0.0
    if WeightUnit(unit) == WeightUnit.LBS:
        return weight_kg * KG_TO_LBS
    return float(weight_kg)


def convert_between(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Convert a weight between any two display units."""
    from_unit = WeightUnit(from_unit)
    to_unit = WeightUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == WeightUnit.KG:
        return value * KG_TO_LBS
    return value / KG_TO_LBS


def format_weight(weight_kg: Optional[float], unit: WeightUnit) -> str:
    """Format a kilogram weight as e.g. '102.3 kg' in the display unit."""
    unit = WeightUnit(unit)
    return f"{convert_weight(weight_kg, unit):.1f} {unit.value}"
