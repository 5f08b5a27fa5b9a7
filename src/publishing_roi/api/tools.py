"""Pre-built tool/function definitions for LLM integration frameworks.

Generates tool schemas in OpenAI and Anthropic formats so an LLM can call
the calculator API.

Usage:
    from publishing_roi.api.tools import get_openai_tools, get_anthropic_tools
"""

from __future__ import annotations

from typing import Any

_INPUT_PROPERTIES: dict[str, Any] = {
    "target_subscribers": {"type": "integer", "description": "Paid-subscriber goal (typically 100–10,000)"},
    "monthly_price": {"type": "number", "description": "Monthly price per subscriber in USD (typically 5–50)"},
    "estimated_visitors": {"type": "integer", "description": "Current monthly website visitors (typically 10,000–200,000)"},
    "selected_model": {"type": "string", "enum": ["trailguide", "agency", "diy"], "description": "Model to tell the story for"},
}


def _input_param(description: str) -> dict[str, Any]:
    return {"type": "object", "properties": _INPUT_PROPERTIES, "description": description}


def get_openai_tools() -> list[dict[str, Any]]:
    """Return tool definitions in OpenAI function-calling format."""
    return [
        {
            "type": "function",
            "function": {
                "name": "get_calculator_context",
                "description": (
                    "Get the full context of the Publishing ROI Calculator. "
                    "Call this FIRST to understand the publishing models, formulas, and outputs."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "detail_level": {
                            "type": "string",
                            "enum": ["compact", "full"],
                            "description": "compact = schemas only, full = business model + formulas + interpretation guide",
                        },
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "calculate_roi",
                "description": (
                    "Project visitors needed, email list needed, fees, and annual net ROI for every "
                    "publishing model. Send only the inputs you want to change."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {"input": _input_param("Partial calculator input")},
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "sweep_subscribers",
                "description": (
                    "Net ROI and visitors needed across a range of subscriber goals, "
                    "with the break-even subscriber count per model."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "input": _input_param("Base calculator input"),
                        "start": {"type": "integer", "description": "Smallest subscriber goal. Default 100"},
                        "stop": {"type": "integer", "description": "Largest subscriber goal. Default 10000"},
                        "num": {"type": "integer", "description": "Number of grid points. Default 100"},
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "run_sensitivity",
                "description": (
                    "Vary one input at a time and rank parameters by their impact on one model's net ROI."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "input": _input_param("Base calculator input"),
                        "model": {"type": "string", "enum": ["trailguide", "agency", "diy"]},
                        "sweep_params": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "path": {"type": "string", "description": "e.g. 'input.monthly_price' or 'pricing.build_cost'"},
                                    "low_pct": {"type": "number", "description": "e.g. -0.2 for -20%"},
                                    "high_pct": {"type": "number", "description": "e.g. 0.2 for +20%"},
                                },
                            },
                            "description": "Optional custom sweeps. If omitted, uses the default set.",
                        },
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_narrative_only",
                "description": "Plain-English interpretation of a calculation, without raw data.",
                "parameters": {
                    "type": "object",
                    "properties": {"input": _input_param("Partial calculator input")},
                    "required": [],
                },
            },
        },
    ]


def get_anthropic_tools() -> list[dict[str, Any]]:
    """Return tool definitions in Anthropic tool-use format."""
    return [
        {
            "name": tool["function"]["name"],
            "description": tool["function"]["description"],
            "input_schema": tool["function"]["parameters"],
        }
        for tool in get_openai_tools()
    ]


def get_system_prompt(base_url: str = "http://localhost:8000") -> str:
    """Generate a system prompt for an LLM that has access to the calculator."""
    return f"""You are an assistant with access to the Publishing ROI Calculator.

WHAT THE CALCULATOR DOES:
It compares three ways for a writer or creator to publish paid content (TrailGuide,
a custom agency build, and a DIY SaaS platform). For a paid-subscriber goal and price it
projects the website traffic and email list each model needs, and the annual net ROI.

YOUR CAPABILITIES:
1. get_calculator_context — read the calculator documentation
2. calculate_roi — compare all models for a goal
3. sweep_subscribers — see how ROI changes with the subscriber goal
4. run_sensitivity — find which inputs matter most
5. get_narrative_only — get a plain-English interpretation

API BASE URL: {base_url}

KEY METRICS TO WATCH:
- Visitors needed vs current visitors (the visitor gap)
- Annual net ROI (year-one dollars, not a percentage)
- Monthly fees (revenue share grows with revenue; flat fees do not)

Always explain results in terms the creator can act on.
"""
