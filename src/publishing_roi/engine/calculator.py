"""Calculator — runs the projection over every model in the rate card.

``compute`` is the single logical operation the calculator exposes: one
CalculatorInput in, one CalculationResult out, with an optional observer
notified of every recalculation.  ``ROICalculator`` wraps it with the block's
construction-time defaults for hosts that hold slider state.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from publishing_roi.config.calculator import CalculatorBlockSettings, CalculatorInput
from publishing_roi.config.rate_card import PUBLISHING_MODELS, PublishingModel, RateCard
from publishing_roi.engine.projection import assess_achievability, project_model
from publishing_roi.models.results import CalculationResult, ModelComparison, ModelResult

logger = logging.getLogger(__name__)

CalculationObserver = Callable[[CalculationResult], Any]


def compare_models(results: dict[PublishingModel, ModelResult]) -> ModelComparison:
    """Pick headline winners across models.

    Ties go to whichever model comes first in canonical order.
    """
    order = {m: i for i, m in enumerate(PUBLISHING_MODELS)}
    keys = sorted(results, key=lambda m: order.get(m, len(order)))

    best_roi = max(keys, key=lambda m: (results[m].net_roi, -order.get(m, len(order))))
    fewest_visitors = min(keys, key=lambda m: (results[m].visitors_needed, order.get(m, len(order))))

    traffic_multiple = None
    if "trailguide" in results and "agency" in results:
        traffic_multiple = round(
            results["agency"].visitors_needed / results["trailguide"].visitors_needed, 1
        )

    return ModelComparison(
        best_roi_model=best_roi,
        fewest_visitors_model=fewest_visitors,
        traffic_multiple=traffic_multiple,
    )


def compute(
    inputs: CalculatorInput,
    rate_card: RateCard | None = None,
    observer: CalculationObserver | None = None,
) -> CalculationResult:
    """Project every publishing model for one set of inputs.

    Parameters
    ----------
    inputs : CalculatorInput
        Validated inputs.  Values outside the slider ranges are accepted.
    rate_card : RateCard | None
        Table to project over.  None = the published default table.
    observer : callable | None
        Called once with the finished result.

    Returns
    -------
    CalculationResult
        Per-model projections, achievability and comparison.
    """
    card = rate_card if rate_card is not None else RateCard.default()

    results: dict[PublishingModel, ModelResult] = {}
    for key in card.keys():
        results[key] = project_model(inputs, card.models[key])

    achievability = {
        key: assess_achievability(inputs.estimated_visitors, res)
        for key, res in results.items()
    }

    result = CalculationResult(
        target_subscribers=inputs.target_subscribers,
        monthly_price=inputs.monthly_price,
        estimated_visitors=inputs.estimated_visitors,
        selected_model=inputs.selected_model,
        target_monthly_revenue=inputs.target_subscribers * inputs.monthly_price,
        results=results,
        achievability=achievability,
        comparison=compare_models(results),
    )
    logger.debug(
        "Recalculated %d models for %d subscribers at $%.2f",
        len(results), inputs.target_subscribers, inputs.monthly_price,
    )

    if observer is not None:
        observer(result)
    return result


class ROICalculator:
    """Stateless calculator bound to a block's defaults, rate card and observer.

    The host owns the slider values; every ``calculate`` call is independent.
    """

    def __init__(
        self,
        settings: CalculatorBlockSettings | None = None,
        rate_card: RateCard | None = None,
        observer: CalculationObserver | None = None,
    ) -> None:
        self.settings = settings or CalculatorBlockSettings()
        self.rate_card = rate_card or RateCard.default()
        self.observer = observer

    @property
    def title(self) -> str:
        return self.settings.title

    @property
    def description(self) -> str:
        return self.settings.description

    def initial_input(self) -> CalculatorInput:
        return self.settings.initial_input()

    def calculate(self, inputs: CalculatorInput | None = None, **overrides: Any) -> CalculationResult:
        """Recalculate from ``inputs`` (or the block defaults) with field overrides applied."""
        base = inputs if inputs is not None else self.initial_input()
        if overrides:
            base = CalculatorInput(**{**base.model_dump(), **overrides})
        return compute(base, self.rate_card, self.observer)
