"""Result types — the contract between engine, narrative, API and dashboard.

Everything here is derived and recomputed on every input change.  Nothing is
persisted; the models exist so results serialize cleanly to JSON.
"""

from __future__ import annotations

from pydantic import BaseModel

from publishing_roi.config.rate_card import PublishingModel


# ═══════════════════════════════════════════════════════════════════════════
# Per-model projection
# ═══════════════════════════════════════════════════════════════════════════

class ModelResult(BaseModel):
    """Projection for one publishing model."""

    visitors_needed: int
    """ceil(target_subscribers / site_to_subscriber)."""

    email_list_needed: int
    """ceil(target_subscribers / email_to_subscriber)."""

    build_cost: float
    """One-time upfront cost, copied from the pricing structure."""

    monthly_fees: float
    """monthly_base + monthly_revenue × revenue_share."""

    revenue: float
    """Monthly subscriber revenue = target_subscribers × monthly_price."""

    net_roi: float
    """Annual net ROI = revenue × 12 − build_cost − monthly_fees × 12.
    A currency amount, not a percentage."""

    conversion_rate: float
    """site_to_subscriber as a percentage, for display."""

    email_conversion_rate: float
    """email_to_subscriber as a percentage, for display."""

    @property
    def annual_revenue(self) -> float:
        return self.revenue * 12

    @property
    def annual_fees(self) -> float:
        return self.monthly_fees * 12


class Achievability(BaseModel):
    """Can current traffic reach the goal under this model?"""

    achievable: bool
    """estimated_visitors >= visitors_needed."""

    visitor_gap: int
    """visitors_needed − estimated_visitors.  ≤ 0 when achievable."""

    traffic_coverage_pct: float
    """estimated_visitors / visitors_needed × 100 (uncapped)."""

    progress_pct: float
    """traffic_coverage_pct capped at 100, for progress bars."""


class ModelComparison(BaseModel):
    """Cross-model headline comparison."""

    best_roi_model: PublishingModel
    fewest_visitors_model: PublishingModel
    traffic_multiple: float | None = None
    """agency.visitors_needed / trailguide.visitors_needed, one decimal.
    None when either model is missing from the rate card."""


# ═══════════════════════════════════════════════════════════════════════════
# Full calculation
# ═══════════════════════════════════════════════════════════════════════════

class CalculationResult(BaseModel):
    """Everything one recalculation produces."""

    target_subscribers: int
    monthly_price: float
    estimated_visitors: int
    selected_model: PublishingModel
    target_monthly_revenue: float

    results: dict[PublishingModel, ModelResult]
    achievability: dict[PublishingModel, Achievability]
    comparison: ModelComparison

    def for_model(self, model: str) -> ModelResult:
        try:
            return self.results[model]  # type: ignore[index]
        except KeyError:
            raise KeyError(f"no result for publishing model '{model}'") from None

    @property
    def selected(self) -> ModelResult:
        return self.for_model(self.selected_model)
