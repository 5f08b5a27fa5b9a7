"""Projection engine — one publishing model at a time.

Pure arithmetic: CalculatorInput + (ConversionRates, PricingStructure) → ModelResult.
"""

from __future__ import annotations

import math

from publishing_roi.config.calculator import CalculatorInput
from publishing_roi.config.rate_card import PublishingModelSpec
from publishing_roi.models.results import Achievability, ModelResult

MONTHS_PER_YEAR = 12


def project_model(inputs: CalculatorInput, spec: PublishingModelSpec) -> ModelResult:
    """Project traffic, list size and annual net ROI for one model."""
    rates = spec.rates
    pricing = spec.pricing
    target = inputs.target_subscribers

    # ── Funnel sizing ──────────────────────────────────────────────────
    visitors_needed = math.ceil(target / rates.site_to_subscriber)
    email_list_needed = math.ceil(target / rates.email_to_subscriber)

    # ── Money ──────────────────────────────────────────────────────────
    monthly_revenue = target * inputs.monthly_price
    monthly_fees = pricing.monthly_base + monthly_revenue * pricing.revenue_share

    annual_revenue = monthly_revenue * MONTHS_PER_YEAR
    annual_fees = monthly_fees * MONTHS_PER_YEAR
    net_roi = annual_revenue - pricing.build_cost - annual_fees

    return ModelResult(
        visitors_needed=visitors_needed,
        email_list_needed=email_list_needed,
        build_cost=pricing.build_cost,
        monthly_fees=monthly_fees,
        revenue=monthly_revenue,
        net_roi=net_roi,
        conversion_rate=rates.site_to_subscriber * 100,
        email_conversion_rate=rates.email_to_subscriber * 100,
    )


def assess_achievability(estimated_visitors: int, result: ModelResult) -> Achievability:
    """Compare current traffic against what the model needs."""
    gap = result.visitors_needed - estimated_visitors
    coverage = estimated_visitors / result.visitors_needed * 100
    return Achievability(
        achievable=gap <= 0,
        visitor_gap=gap,
        traffic_coverage_pct=coverage,
        progress_pct=min(100.0, coverage),
    )
