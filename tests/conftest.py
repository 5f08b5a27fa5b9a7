"""Shared test fixtures — sample inputs matching base_case.yaml."""

from __future__ import annotations

import pytest

from publishing_roi.config import CalculatorBlockSettings, CalculatorInput, RateCard
from publishing_roi.engine.calculator import compute
from publishing_roi.models.results import CalculationResult


@pytest.fixture
def rate_card() -> RateCard:
    return RateCard.default()


@pytest.fixture
def default_input() -> CalculatorInput:
    return CalculatorInput(
        target_subscribers=1_000,
        monthly_price=10.0,
        estimated_visitors=50_000,
    )


@pytest.fixture
def block_settings() -> CalculatorBlockSettings:
    return CalculatorBlockSettings(
        title="Publishing ROI Calculator",
        default_target_subscribers=1_000,
        default_monthly_price=10,
        default_estimated_visitors=50_000,
    )


@pytest.fixture
def calculation(default_input: CalculatorInput, rate_card: RateCard) -> CalculationResult:
    return compute(default_input, rate_card)
