"""Result models — calculation output contracts."""

from publishing_roi.models.results import (
    Achievability,
    CalculationResult,
    ModelComparison,
    ModelResult,
)

__all__ = [
    "Achievability",
    "CalculationResult",
    "ModelComparison",
    "ModelResult",
]
