"""Tests for engine/projection.py — hand-calculated expected values."""

from __future__ import annotations

import math

import pytest

from publishing_roi.config import CalculatorInput, RateCard
from publishing_roi.engine.projection import assess_achievability, project_model


def test_trailguide_example(default_input: CalculatorInput, rate_card: RateCard):
    r = project_model(default_input, rate_card.get("trailguide"))
    # ceil(1000 / 0.025) = 40,000
    assert r.visitors_needed == 40_000
    # ceil(1000 / 0.07) = ceil(14285.71…) = 14,286
    assert r.email_list_needed == 14_286
    assert r.revenue == pytest.approx(10_000)
    # 0 + 10,000 × 0.10
    assert r.monthly_fees == pytest.approx(1_000)
    assert r.build_cost == 1_000
    # 120,000 − 1,000 − 12,000
    assert r.net_roi == pytest.approx(107_000)


def test_agency_example(default_input: CalculatorInput, rate_card: RateCard):
    r = project_model(default_input, rate_card.get("agency"))
    assert r.visitors_needed == 100_000
    assert r.email_list_needed == 33_334
    assert r.monthly_fees == pytest.approx(500)
    # 120,000 − 75,000 − 6,000
    assert r.net_roi == pytest.approx(39_000)


def test_diy_example(default_input: CalculatorInput, rate_card: RateCard):
    r = project_model(default_input, rate_card.get("diy"))
    assert r.visitors_needed == 100_000
    assert r.monthly_fees == pytest.approx(350)
    assert r.build_cost == 0
    # 120,000 − 0 − 4,200
    assert r.net_roi == pytest.approx(115_800)


def test_conversion_rates_reported_as_percentages(default_input: CalculatorInput, rate_card: RateCard):
    r = project_model(default_input, rate_card.get("trailguide"))
    assert r.conversion_rate == pytest.approx(2.5)
    assert r.email_conversion_rate == pytest.approx(7.0)


def test_annual_properties(default_input: CalculatorInput, rate_card: RateCard):
    r = project_model(default_input, rate_card.get("trailguide"))
    assert r.annual_revenue == pytest.approx(120_000)
    assert r.annual_fees == pytest.approx(12_000)
    assert r.net_roi == pytest.approx(r.annual_revenue - r.build_cost - r.annual_fees)


@pytest.mark.parametrize("model", ["trailguide", "agency", "diy"])
@pytest.mark.parametrize("target", [100, 700, 1_300, 3_700, 10_000])
def test_funnel_sizing_is_ceiling_of_ratio(model: str, target: int, rate_card: RateCard):
    spec = rate_card.get(model)
    r = project_model(CalculatorInput(target_subscribers=target, monthly_price=7.0), spec)
    assert r.visitors_needed == math.ceil(target / spec.rates.site_to_subscriber)
    assert r.email_list_needed == math.ceil(target / spec.rates.email_to_subscriber)


@pytest.mark.parametrize("target", [100, 10_000])
def test_slider_boundaries_stay_positive(target: int, rate_card: RateCard):
    inputs = CalculatorInput(target_subscribers=target, monthly_price=50.0, estimated_visitors=200_000)
    for key in rate_card.keys():
        r = project_model(inputs, rate_card.get(key))
        assert r.visitors_needed > 0
        assert r.email_list_needed > 0
        assert math.isfinite(r.net_roi)


def test_values_beyond_slider_range_are_projected(rate_card: RateCard):
    """The projection is total over positive inputs; bounds are a UI concern."""
    inputs = CalculatorInput(target_subscribers=1, monthly_price=0.5, estimated_visitors=1)
    r = project_model(inputs, rate_card.get("agency"))
    assert r.visitors_needed == 100
    # 0.5 × 12 − 75,000 − 6,000
    assert r.net_roi == pytest.approx(6 - 81_000)


class TestAchievability:
    """Visitor gap and traffic coverage."""

    def test_achievable_when_traffic_exceeds_need(self, default_input, rate_card):
        r = project_model(default_input, rate_card.get("trailguide"))
        a = assess_achievability(50_000, r)
        assert a.achievable
        assert a.visitor_gap == -10_000
        assert a.traffic_coverage_pct == pytest.approx(125.0)
        assert a.progress_pct == 100.0

    def test_gap_when_traffic_short(self, default_input, rate_card):
        r = project_model(default_input, rate_card.get("agency"))
        a = assess_achievability(50_000, r)
        assert not a.achievable
        assert a.visitor_gap == 50_000
        assert a.traffic_coverage_pct == pytest.approx(50.0)
        assert a.progress_pct == pytest.approx(50.0)

    def test_exact_match_is_achievable(self, default_input, rate_card):
        r = project_model(default_input, rate_card.get("trailguide"))
        a = assess_achievability(r.visitors_needed, r)
        assert a.achievable
        assert a.visitor_gap == 0
