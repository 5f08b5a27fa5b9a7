"""Results serialize to JSON and back without loss."""

from __future__ import annotations

import json

from publishing_roi.models.results import CalculationResult


def test_calculation_result_json_round_trip(calculation):
    payload = calculation.model_dump_json()
    data = json.loads(payload)
    assert data["results"]["trailguide"]["visitors_needed"] == 40_000
    assert data["comparison"]["traffic_multiple"] == 2.5
    assert "annual_revenue" not in data["results"]["trailguide"]
    assert CalculationResult.model_validate_json(payload) == calculation
