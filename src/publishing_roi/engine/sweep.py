"""Target-subscriber sweep — ROI and traffic curves for charts.

Re-runs the projection across a grid of subscriber goals, holding price and
traffic fixed.  Because the projection is linear in the goal, the curves are
straight lines for ROI and fees and step functions for visitors needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from publishing_roi.config.calculator import CalculatorInput
from publishing_roi.config.rate_card import PublishingModel, RateCard
from publishing_roi.engine.projection import project_model


@dataclass
class ModelCurve:
    """One model's metrics along the subscriber grid."""

    net_roi: list[float] = field(default_factory=list)
    visitors_needed: list[int] = field(default_factory=list)
    monthly_fees: list[float] = field(default_factory=list)


@dataclass
class SweepResult:
    """Subscriber grid plus one curve per model."""

    target_subscribers: list[int]
    monthly_price: float
    curves: dict[PublishingModel, ModelCurve] = field(default_factory=dict)

    def break_even_subscribers(self, model: PublishingModel) -> int | None:
        """Smallest grid point where annual net ROI is non-negative."""
        for subs, roi in zip(self.target_subscribers, self.curves[model].net_roi):
            if roi >= 0:
                return subs
        return None


def subscriber_grid(start: int = 100, stop: int = 10_000, num: int = 100) -> list[int]:
    """Evenly spaced, strictly increasing positive integer subscriber goals."""
    if start < 1 or stop < start:
        raise ValueError(f"invalid subscriber range [{start}, {stop}]")
    points = np.rint(np.linspace(start, stop, max(num, 1))).astype(int)
    return [int(p) for p in np.unique(points)]


def sweep_target_subscribers(
    inputs: CalculatorInput,
    start: int = 100,
    stop: int = 10_000,
    num: int = 100,
    rate_card: RateCard | None = None,
) -> SweepResult:
    """Project every model at each subscriber goal in ``[start, stop]``."""
    card = rate_card if rate_card is not None else RateCard.default()
    grid = subscriber_grid(start, stop, num)

    curves: dict[PublishingModel, ModelCurve] = {key: ModelCurve() for key in card.keys()}
    for subs in grid:
        point = inputs.model_copy(update={"target_subscribers": subs})
        for key in card.keys():
            res = project_model(point, card.models[key])
            curve = curves[key]
            curve.net_roi.append(res.net_roi)
            curve.visitors_needed.append(res.visitors_needed)
            curve.monthly_fees.append(res.monthly_fees)

    return SweepResult(target_subscribers=grid, monthly_price=inputs.monthly_price, curves=curves)
