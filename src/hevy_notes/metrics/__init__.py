"""Weight units and strength metrics."""

from .units import (
    KG_TO_LBS,
    WeightUnit,
    convert_between,
    convert_weight,
    format_weight,
)
from .strength import best_one_rep_max, estimate_one_rep_max

__all__ = [
    "KG_TO_LBS",
    "WeightUnit",
    "convert_between",
    "convert_weight",
    "format_weight",
    "best_one_rep_max",
    "estimate_one_rep_max",
]
