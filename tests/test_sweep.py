"""Tests for engine/sweep.py — subscriber grid and ROI curves."""

from __future__ import annotations

import pytest

from publishing_roi.config import CalculatorInput
from publishing_roi.engine.sweep import subscriber_grid, sweep_target_subscribers


def test_default_grid_matches_slider_steps():
    grid = subscriber_grid()
    assert grid[0] == 100
    assert grid[-1] == 10_000
    assert len(grid) == 100
    assert all(b - a == 100 for a, b in zip(grid, grid[1:]))


def test_dense_grid_deduplicated():
    grid = subscriber_grid(1, 5, 50)
    assert grid == [1, 2, 3, 4, 5]


def test_invalid_range():
    with pytest.raises(ValueError):
        subscriber_grid(500, 100)
    with pytest.raises(ValueError):
        subscriber_grid(0, 100)


def test_curves_match_compute(default_input: CalculatorInput):
    sweep = sweep_target_subscribers(default_input)
    idx = sweep.target_subscribers.index(1_000)
    assert sweep.curves["trailguide"].net_roi[idx] == pytest.approx(107_000)
    assert sweep.curves["agency"].visitors_needed[idx] == 100_000
    assert sweep.curves["diy"].monthly_fees[idx] == pytest.approx(350)
    assert sweep.monthly_price == 10.0


def test_break_even_subscribers(default_input: CalculatorInput):
    sweep = sweep_target_subscribers(default_input)
    # agency: 120·t − 81,000 ≥ 0 → t ≥ 675 → first grid point 700
    assert sweep.break_even_subscribers("agency") == 700
    assert sweep.break_even_subscribers("trailguide") == 100
    assert sweep.break_even_subscribers("diy") == 100


def test_break_even_not_reached():
    inputs = CalculatorInput(monthly_price=5.0)
    sweep = sweep_target_subscribers(inputs, start=100, stop=1_000, num=10)
    # agency at $5: 60·t − 81,000 < 0 for t ≤ 1,000
    assert sweep.break_even_subscribers("agency") is None
