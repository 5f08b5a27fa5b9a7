"""FastAPI server — HTTP and LLM-accessible API for the ROI calculator.

Run with:
    uvicorn publishing_roi.api.server:app --reload --port 8000

Or:
    python -m publishing_roi.api.server

Endpoints:
    GET  /context               — self-describing manifest (business model + schemas)
    GET  /schema                — JSON Schema for CalculatorInput
    GET  /defaults              — default block settings + default input
    GET  /models                — the active rate card
    POST /calculate             — project every publishing model (partial input)
    POST /calculate/narrative   — plain-English interpretation + headline metrics
    POST /calculate/sweep       — net ROI curves over a range of subscriber goals
    POST /calculate/sensitivity — one-at-a-time sweeps → tornado data
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from publishing_roi.api.context import build_context, get_default_input, get_input_schema
from publishing_roi.api.narrative import generate_narrative
from publishing_roi.api.tools import get_anthropic_tools, get_openai_tools, get_system_prompt
from publishing_roi.config.calculator import CalculatorBlockSettings, CalculatorInput
from publishing_roi.config.env import get_api_config
from publishing_roi.config.loader import load_block_settings, load_rate_card
from publishing_roi.config.rate_card import RateCard
from publishing_roi.engine.calculator import compute
from publishing_roi.engine.sweep import sweep_target_subscribers
from publishing_roi.finance.sensitivity import run_sensitivity

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Publishing ROI Calculator API",
    version="1.0",
    description=(
        "Compare publishing models by the traffic they need and the annual net ROI they "
        "return for a paid-subscriber goal. Start by calling GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_api_config().cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    input: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial CalculatorInput. Missing fields use the block defaults. "
                    "Example: {'target_subscribers': 5000, 'monthly_price': 15}",
    )


class SweepRequest(BaseModel):
    """Request body for /calculate/sweep."""
    input: dict[str, Any] = Field(default_factory=dict)
    start: int = Field(default=100, ge=1, description="Smallest subscriber goal")
    stop: int = Field(default=10_000, ge=1, description="Largest subscriber goal")
    num: int = Field(default=100, ge=1, le=1_000, description="Number of grid points")


class SweepParam(BaseModel):
    """One one-at-a-time sweep for /calculate/sensitivity."""
    name: str | None = Field(default=None, description="Label for the tornado bar; defaults to the path")
    path: str = Field(description="Dot-path to sweep, e.g. 'input.monthly_price' or 'pricing.build_cost'")
    low_pct: float = Field(default=-0.2, allow_inf_nan=False, description="Low-side change as a fraction")
    high_pct: float = Field(default=0.2, allow_inf_nan=False, description="High-side change as a fraction")


class SensitivityRequest(BaseModel):
    """Request body for /calculate/sensitivity."""
    input: dict[str, Any] = Field(default_factory=dict)
    model: str = Field(default="trailguide", description="Publishing model to analyse")
    sweep_params: list[SweepParam] | None = Field(
        default=None,
        description="Optional override of sweep parameters. "
                    "Format: [{'name': 'Price', 'path': 'input.monthly_price', 'low_pct': -0.2, 'high_pct': 0.2}]",
    )


class CalculateResponse(BaseModel):
    """Response from /calculate."""
    result: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache(maxsize=1)
def _rate_card() -> RateCard:
    """Active rate card: the YAML file named by the environment, else the default."""
    path = get_api_config().rate_card_path
    if path:
        return load_rate_card(path)
    return RateCard.default()


@lru_cache(maxsize=1)
def _block_settings() -> CalculatorBlockSettings:
    """Active block settings: the ``block`` section of the same YAML file, else the default."""
    path = get_api_config().rate_card_path
    if path:
        return load_block_settings(path)
    return CalculatorBlockSettings()


def _build_input(overrides: dict[str, Any]) -> CalculatorInput:
    """Build a CalculatorInput from partial overrides merged onto the block defaults."""
    data = {**get_default_input(_block_settings()), **overrides}
    try:
        return CalculatorInput(**data)
    except ValidationError as exc:
        logger.info("Rejected calculator input: %s", exc.error_count())
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc


def _check_model(model: str) -> None:
    try:
        _rate_card().get(model)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Publishing ROI Calculator API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
        "description": "Traffic, email list and annual net ROI projections for three publishing models.",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' for business model + formulas + guide",
    ),
):
    """Self-describing context manifest for LLM consumption."""
    return build_context(detail_level, _rate_card())


@app.get("/schema")
def get_schema():
    """JSON Schema for CalculatorInput — types, defaults, constraints."""
    return get_input_schema()


@app.get("/defaults")
def get_defaults():
    """Default block settings and the input they produce."""
    return {
        "block": _block_settings().model_dump(),
        "input": get_default_input(_block_settings()),
    }


@app.get("/models")
def get_models():
    """The active rate card, keyed by model id."""
    return _rate_card().model_dump()


@app.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    """Project every publishing model for one set of inputs.

    Example minimal request:
    ```json
    {"input": {"target_subscribers": 5000, "monthly_price": 15}}
    ```
    """
    inputs = _build_input(req.input)
    _check_model(inputs.selected_model)
    result = compute(inputs, _rate_card())
    return CalculateResponse(
        result=result.model_dump(),
        narrative=generate_narrative(result, _rate_card()),
    )


@app.post("/calculate/narrative")
def calculate_narrative(req: CalculateRequest):
    """Same as /calculate but returns just the narrative and headline numbers."""
    inputs = _build_input(req.input)
    _check_model(inputs.selected_model)
    result = compute(inputs, _rate_card())
    return {
        "narrative": generate_narrative(result, _rate_card()),
        "headline_metrics": {
            "target_monthly_revenue": result.target_monthly_revenue,
            "best_roi_model": result.comparison.best_roi_model,
            "traffic_multiple": result.comparison.traffic_multiple,
            "net_roi": {k: round(r.net_roi, 2) for k, r in result.results.items()},
            "achievable": {k: a.achievable for k, a in result.achievability.items()},
        },
    }


@app.post("/calculate/sweep")
def calculate_sweep(req: SweepRequest):
    """Net ROI, visitors needed and fees across a range of subscriber goals."""
    inputs = _build_input(req.input)
    if req.stop < req.start:
        raise HTTPException(status_code=422, detail="stop must be >= start")
    sweep = sweep_target_subscribers(inputs, req.start, req.stop, req.num, _rate_card())
    return {
        "target_subscribers": sweep.target_subscribers,
        "monthly_price": sweep.monthly_price,
        "curves": {
            key: {
                "net_roi": curve.net_roi,
                "visitors_needed": curve.visitors_needed,
                "monthly_fees": curve.monthly_fees,
            }
            for key, curve in sweep.curves.items()
        },
        "break_even_subscribers": {
            key: sweep.break_even_subscribers(key) for key in sweep.curves
        },
    }


@app.post("/calculate/sensitivity")
def calculate_sensitivity(req: SensitivityRequest):
    """Run one-at-a-time sweeps and return the net ROI impact ranking."""
    inputs = _build_input(req.input)
    _check_model(req.model)

    sweep_config = None
    if req.sweep_params:
        sweep_config = [
            (sp.name or sp.path, sp.path, sp.low_pct, sp.high_pct)
            for sp in req.sweep_params
        ]

    try:
        result = run_sensitivity(inputs, req.model, sweep_config, _rate_card())
    except (ValueError, KeyError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {
        "model": result.model,
        "base_net_roi": result.base_net_roi,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "net_roi_at_low": bar.net_roi_at_low,
                "net_roi_at_high": bar.net_roi_at_high,
                "delta_net_roi": bar.delta_net_roi,
            }
            for bar in result.bars
        ],
        "interpretation": (
            "Sorted by absolute net ROI impact (largest first). "
            "Parameters at the top of the list are the ones that matter most."
        ),
    }


@app.get("/tools/openai")
def get_openai_tool_definitions():
    """Tool/function definitions in OpenAI function-calling format."""
    return {"tools": get_openai_tools(), "system_prompt": get_system_prompt()}


@app.get("/tools/anthropic")
def get_anthropic_tool_definitions():
    """Tool definitions in Anthropic tool-use format."""
    return {"tools": get_anthropic_tools(), "system_prompt": get_system_prompt()}


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "publishing_roi.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
