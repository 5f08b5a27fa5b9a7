"""Context manifest generator — makes the calculator self-describing for LLMs.

Produces structured context at two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    business model + formulas + interpretation guide

An LLM reads ``GET /context?detail_level=full`` once, then knows what it can
configure, what to call, and how to read the outputs.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from publishing_roi.config import (
    CalculatorBlockSettings,
    CalculatorInput,
    ConversionRates,
    PricingStructure,
    RateCard,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one configuration section (e.g. input, pricing)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class OutputFieldInfo(BaseModel):
    """One output field, machine-readable."""
    name: str
    type: str
    description: str
    unit: str = ""


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str
    request_body: str = ""
    response: str = ""


class CalculatorContext(BaseModel):
    """Full self-describing context for LLM consumption."""
    calculator_name: str
    version: str
    description: str
    business_model: str
    key_formulas: list[dict[str, str]]
    publishing_models: dict[str, Any]
    input_sections: list[SectionSchema]
    key_outputs: list[OutputFieldInfo]
    endpoints: list[EndpointInfo]
    interpretation_guide: str
    example_queries: list[dict[str, str]]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        default = field_info.default
        if default is not None and not callable(default):
            default_val = default
        else:
            default_val = None

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    if hasattr(field_info, "metadata"):
        for m in field_info.metadata:
            if hasattr(m, attr):
                return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_BUSINESS_MODEL = """
Publishing ROI Calculator

WHAT IT DOES:
Projects what it takes for a creator to reach a paid-subscriber goal under three
publishing-platform cost structures, and what each returns over a year:
  - trailguide: optimized publishing stack — $1,000 build, no base fee, 10% revenue share,
    2.5% site→subscriber and 7% email→subscriber conversion
  - agency: custom agency build — $75,000 build, $500/month, no revenue share,
    1% / 3% conversion
  - diy: self-service SaaS — no build cost, $350/month, no revenue share, 1% / 3% conversion

THE FUNNEL:
  - Visitors needed   = ceil(target_subscribers / site_to_subscriber)
  - Email list needed = ceil(target_subscribers / email_to_subscriber)
  - A model is "achievable" when current monthly visitors ≥ visitors needed

THE MONEY:
  - Monthly revenue = target_subscribers × monthly_price
  - Monthly fees    = monthly_base + monthly_revenue × revenue_share
  - Annual net ROI  = monthly_revenue × 12 − build_cost − monthly_fees × 12
    (a dollar amount, not a percentage)

KEY DECISIONS THE CALCULATOR HELPS MAKE:
  1. Which publishing model returns the most in year one at my price point?
  2. How much traffic do I need, and how far am I from it today?
  3. At what subscriber count does a high upfront build cost pay for itself?
"""

_INTERPRETATION_GUIDE = """
HOW TO INTERPRET RESULTS:

1. VISITORS NEEDED:
   Monthly website visitors required to convert the target directly.
   Compare with estimated_visitors: the visitor gap is what traffic growth must close.

2. EMAIL LIST NEEDED:
   List size required if subscribers are converted from email instead.

3. ANNUAL NET ROI:
   Year-one revenue minus build cost minus twelve months of fees.
   Revenue-share models cost more as revenue grows; flat-fee models cost the same at any scale.
   A negative value means the model does not pay for itself in year one.

4. COMPARISON:
   best_roi_model has the highest net ROI; fewest_visitors_model the lowest traffic need.
   traffic_multiple = agency visitors needed / trailguide visitors needed.

COMMON ANALYSIS PATTERNS:
  - "What if I charge $20?" → POST /calculate with monthly_price=20
  - "When does the agency build pay off?" → POST /calculate/sweep, look at agency break-even
  - "Which input matters most?" → POST /calculate/sensitivity for the model in question
"""

_KEY_FORMULAS = [
    {
        "name": "Visitors needed",
        "formula": "ceil(target_subscribers / site_to_subscriber)",
        "meaning": "Monthly traffic required to reach the subscriber goal directly from the site",
    },
    {
        "name": "Email list needed",
        "formula": "ceil(target_subscribers / email_to_subscriber)",
        "meaning": "Email list size required to reach the subscriber goal from email",
    },
    {
        "name": "Monthly revenue",
        "formula": "target_subscribers × monthly_price",
        "meaning": "Monthly recurring revenue at the goal",
    },
    {
        "name": "Monthly fees",
        "formula": "monthly_base + monthly_revenue × revenue_share",
        "meaning": "What the platform costs each month at the goal",
    },
    {
        "name": "Annual net ROI",
        "formula": "monthly_revenue × 12 − build_cost − monthly_fees × 12",
        "meaning": "Year-one return after the build and twelve months of fees",
    },
]

_EXAMPLE_QUERIES = [
    {
        "query": "Compare all three models at the default goal",
        "action": "POST /calculate with empty body (uses all defaults)",
    },
    {
        "query": "I want 5,000 subscribers at $15 with 80k visitors",
        "action": "POST /calculate with target_subscribers=5000, monthly_price=15, estimated_visitors=80000",
    },
    {
        "query": "How many subscribers before the agency build is worth it?",
        "action": "POST /calculate/sweep and read break_even_subscribers.agency",
    },
    {
        "query": "What drives TrailGuide's ROI most?",
        "action": "POST /calculate/sensitivity with model='trailguide'",
    },
    {
        "query": "Explain the result in plain English",
        "action": "POST /calculate/narrative",
    },
]

_KEY_OUTPUTS = [
    OutputFieldInfo(name="results.<model>.visitors_needed", type="int", description="Monthly visitors needed", unit="visitors"),
    OutputFieldInfo(name="results.<model>.email_list_needed", type="int", description="Email list size needed", unit="contacts"),
    OutputFieldInfo(name="results.<model>.build_cost", type="float", description="One-time build cost", unit="$"),
    OutputFieldInfo(name="results.<model>.monthly_fees", type="float", description="Monthly platform fees at the goal", unit="$/month"),
    OutputFieldInfo(name="results.<model>.revenue", type="float", description="Monthly revenue at the goal", unit="$/month"),
    OutputFieldInfo(name="results.<model>.net_roi", type="float", description="Annual net ROI", unit="$"),
    OutputFieldInfo(name="results.<model>.conversion_rate", type="float", description="Site-to-subscriber conversion", unit="%"),
    OutputFieldInfo(name="results.<model>.email_conversion_rate", type="float", description="Email-to-subscriber conversion", unit="%"),
    OutputFieldInfo(name="achievability.<model>.achievable", type="bool", description="Current traffic covers visitors needed", unit=""),
    OutputFieldInfo(name="achievability.<model>.visitor_gap", type="int", description="Visitors still missing (≤ 0 when achievable)", unit="visitors"),
    OutputFieldInfo(name="comparison.best_roi_model", type="str", description="Model with the highest annual net ROI", unit=""),
    OutputFieldInfo(name="comparison.traffic_multiple", type="float|None", description="Agency visitors needed / TrailGuide visitors needed", unit="x"),
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This self-describing context.", response="CalculatorContext"),
    EndpointInfo(method="GET", path="/schema", description="JSON schema for CalculatorInput.", response="JSON Schema object"),
    EndpointInfo(method="GET", path="/defaults", description="Default block settings and default input.", response="JSON object"),
    EndpointInfo(method="GET", path="/models", description="The active rate card.", response="RateCard JSON"),
    EndpointInfo(
        method="POST", path="/calculate",
        description="Project all models. Missing input fields use the block defaults.",
        request_body="{'input': partial CalculatorInput}",
        response="CalculationResult + narrative",
    ),
    EndpointInfo(
        method="POST", path="/calculate/narrative",
        description="Plain-English interpretation plus headline metrics.",
        request_body="{'input': partial CalculatorInput}",
        response="narrative + headline_metrics",
    ),
    EndpointInfo(
        method="POST", path="/calculate/sweep",
        description="Net ROI and visitors needed across a range of subscriber goals.",
        request_body="{'input': ..., 'start': 100, 'stop': 10000, 'num': 100}",
        response="Grid + per-model curves + break-even subscribers",
    ),
    EndpointInfo(
        method="POST", path="/calculate/sensitivity",
        description="One-at-a-time input sweeps ranked by net ROI impact (tornado data).",
        request_body="{'input': ..., 'model': 'trailguide', 'sweep_params': [...]}",
        response="List of tornado bars sorted by impact",
    ),
]

_INPUT_SECTIONS = [
    ("input", CalculatorInput, "Calculator inputs — goal, price, current traffic"),
    ("block", CalculatorBlockSettings, "Calculator block settings — title, description, initial slider values"),
    ("rates", ConversionRates, "Per-model funnel conversion rates"),
    ("pricing", PricingStructure, "Per-model cost structure"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(
    detail_level: Literal["compact", "full"] = "full",
    rate_card: RateCard | None = None,
) -> CalculatorContext:
    """Build the self-describing context manifest."""
    card = rate_card if rate_card is not None else RateCard.default()
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(cls))
        for name, cls, desc in _INPUT_SECTIONS
    ]
    full = detail_level == "full"

    return CalculatorContext(
        calculator_name="Publishing ROI Calculator",
        version="1.0",
        description=(
            "Projects the traffic and email list a creator needs to reach a paid-subscriber goal "
            "under three publishing models, and the annual net ROI of each."
        ),
        business_model=_BUSINESS_MODEL.strip() if full else "",
        key_formulas=_KEY_FORMULAS if full else [],
        publishing_models=card.model_dump()["models"],
        input_sections=sections,
        key_outputs=_KEY_OUTPUTS,
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if full else "",
        example_queries=_EXAMPLE_QUERIES if full else [],
    )


def get_input_schema() -> dict:
    """Return the JSON Schema for CalculatorInput."""
    return CalculatorInput.model_json_schema()


def get_default_input(settings: CalculatorBlockSettings | None = None) -> dict:
    """Return the block's starting CalculatorInput as a JSON-serializable dict."""
    block = settings if settings is not None else CalculatorBlockSettings()
    return block.initial_input().model_dump()
