"""Engine — deterministic projection and calculation logic."""

from publishing_roi.engine.projection import project_model, assess_achievability
from publishing_roi.engine.calculator import compute, compare_models, ROICalculator
from publishing_roi.engine.sweep import sweep_target_subscribers, SweepResult

__all__ = [
    "project_model",
    "assess_achievability",
    "compute",
    "compare_models",
    "ROICalculator",
    "sweep_target_subscribers",
    "SweepResult",
]
