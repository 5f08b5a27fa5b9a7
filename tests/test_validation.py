"""Pydantic validation tests — ensure invalid inputs are rejected.

Covers calculator inputs, block settings and the rate card, plus the
opt-in clamping to slider bounds.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from publishing_roi.config import (
    SLIDER_BOUNDS,
    CalculatorBlockSettings,
    CalculatorInput,
    ConversionRates,
    PricingStructure,
    PublishingModelSpec,
    RateCard,
)


# ═══════════════════════════════════════════════════════════════════════════
# CalculatorInput
# ═══════════════════════════════════════════════════════════════════════════

class TestCalculatorInputValidation:
    """CalculatorInput field constraints."""

    def test_defaults_are_valid(self):
        i = CalculatorInput()
        assert i.target_subscribers == 1_000
        assert i.within_slider_bounds()

    def test_zero_subscribers_rejected(self):
        with pytest.raises(ValidationError):
            CalculatorInput(target_subscribers=0)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            CalculatorInput(monthly_price=-5)

    def test_zero_visitors_rejected(self):
        with pytest.raises(ValidationError):
            CalculatorInput(estimated_visitors=0)

    def test_unknown_model_rejected(self):
        with pytest.raises(ValidationError):
            CalculatorInput(selected_model="newsletter")

    def test_out_of_slider_range_accepted(self):
        i = CalculatorInput(target_subscribers=50_000, monthly_price=99.0)
        assert not i.within_slider_bounds()

    def test_frozen(self):
        i = CalculatorInput()
        with pytest.raises(ValidationError):
            i.target_subscribers = 5


class TestClamping:
    """Opt-in snapping into slider ranges."""

    def test_below_range(self):
        i = CalculatorInput.clamped(10, 1, 500)
        assert i.target_subscribers == 100
        assert i.monthly_price == 5.0
        assert i.estimated_visitors == 10_000

    def test_above_range(self):
        i = CalculatorInput.clamped(50_000, 100, 1_000_000, "diy")
        assert i.target_subscribers == 10_000
        assert i.monthly_price == 50.0
        assert i.estimated_visitors == 200_000
        assert i.selected_model == "diy"

    def test_in_range_unchanged(self):
        i = CalculatorInput.clamped(2_500, 12.0, 75_000)
        assert (i.target_subscribers, i.monthly_price, i.estimated_visitors) == (2_500, 12.0, 75_000)
        assert i.within_slider_bounds()

    def test_bounds_table(self):
        assert SLIDER_BOUNDS["target_subscribers"] == (100, 10_000, 100)
        assert SLIDER_BOUNDS["monthly_price"].clamp(0) == 5


# ═══════════════════════════════════════════════════════════════════════════
# Block settings
# ═══════════════════════════════════════════════════════════════════════════

class TestBlockSettings:

    def test_defaults(self):
        s = CalculatorBlockSettings()
        assert s.title == "Publishing ROI Calculator"
        assert s.initial_input().estimated_visitors == 50_000

    def test_zero_default_rejected(self):
        with pytest.raises(ValidationError):
            CalculatorBlockSettings(default_monthly_price=0)

    def test_preview_text(self):
        s = CalculatorBlockSettings(title="ROI", description="Compare models")
        text = s.preview_text()
        assert text.startswith("ROI\nCompare models")
        assert "Click to interact in lesson" in text


# ═══════════════════════════════════════════════════════════════════════════
# Rate card
# ═══════════════════════════════════════════════════════════════════════════

class TestRateCardValidation:

    def test_default_table(self):
        card = RateCard.default()
        assert card.keys() == ["trailguide", "agency", "diy"]
        tg = card.get("trailguide")
        assert (tg.rates.site_to_subscriber, tg.rates.email_to_subscriber, tg.rates.visitor_to_email) == (0.025, 0.07, 0.09)
        assert (tg.pricing.build_cost, tg.pricing.monthly_base, tg.pricing.revenue_share) == (1_000, 0, 0.10)
        ag = card.get("agency")
        assert (ag.pricing.build_cost, ag.pricing.monthly_base, ag.pricing.revenue_share) == (75_000, 500, 0)
        diy = card.get("diy")
        assert (diy.pricing.build_cost, diy.pricing.monthly_base, diy.pricing.revenue_share) == (0, 350, 0)
        assert ag.rates == diy.rates

    def test_zero_rate_rejected(self):
        with pytest.raises(ValidationError):
            ConversionRates(site_to_subscriber=0)

    def test_rate_above_one_rejected(self):
        with pytest.raises(ValidationError):
            ConversionRates(email_to_subscriber=1.5)

    def test_negative_build_cost_rejected(self):
        with pytest.raises(ValidationError):
            PricingStructure(build_cost=-1)

    def test_revenue_share_above_one_rejected(self):
        with pytest.raises(ValidationError):
            PricingStructure(revenue_share=1.2)

    def test_mismatched_key_rejected(self):
        with pytest.raises(ValidationError):
            RateCard(models={"agency": PublishingModelSpec(key="diy")})

    def test_empty_card_rejected(self):
        with pytest.raises(ValidationError):
            RateCard(models={})

    def test_unknown_model_lookup(self):
        with pytest.raises(KeyError, match="newsletter"):
            RateCard.default().get("newsletter")


# ═══════════════════════════════════════════════════════════════════════════
# Non-finite values and unknown fields
# ═══════════════════════════════════════════════════════════════════════════

class TestNonFiniteRejected:
    """inf / nan never reach the engine."""

    @pytest.mark.parametrize("value", [float("inf"), float("nan"), "inf"])
    def test_price(self, value):
        with pytest.raises(ValidationError):
            CalculatorInput(monthly_price=value)

    def test_block_default_price(self):
        with pytest.raises(ValidationError):
            CalculatorBlockSettings(default_monthly_price=float("inf"))

    @pytest.mark.parametrize("field", ["build_cost", "monthly_base", "revenue_share"])
    def test_pricing(self, field):
        with pytest.raises(ValidationError):
            PricingStructure(**{field: float("nan")})

    @pytest.mark.parametrize("field", ["site_to_subscriber", "email_to_subscriber", "visitor_to_email"])
    def test_rates(self, field):
        with pytest.raises(ValidationError):
            ConversionRates(**{field: float("nan")})


def test_unknown_input_field_rejected():
    with pytest.raises(ValidationError):
        CalculatorInput(target_subscriber=2_000)
