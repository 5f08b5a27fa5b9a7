"""Sensitivity / tornado analysis on annual net ROI.

Vary one input at a time, measure the net ROI swing for one publishing model.

Default sweep set:
  - input.target_subscribers ± 25%
  - input.monthly_price ± 20%
  - pricing.monthly_base ± 20%
  - pricing.revenue_share ± 20%
  - pricing.build_cost ± 20%

Paths starting with ``input.`` address CalculatorInput; ``rates.`` and
``pricing.`` address the model's entry in the rate card.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from publishing_roi.config.calculator import CalculatorInput
from publishing_roi.config.rate_card import PublishingModel, PublishingModelSpec, RateCard
from publishing_roi.engine.projection import project_model


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path, e.g. 'input.monthly_price' or 'pricing.build_cost'."""

    base_value: float
    low_value: float
    high_value: float

    net_roi_at_low: float
    """Annual net ROI when param = low_value."""

    net_roi_at_high: float
    """Annual net ROI when param = high_value."""

    delta_net_roi: float
    """abs(net_roi_at_high − net_roi_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output for one model."""

    model: PublishingModel
    base_net_roi: float
    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_net_roi (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Target subscribers", "input.target_subscribers", -0.25, 0.25),
    ("Monthly price", "input.monthly_price", -0.20, 0.20),
    ("Monthly base fee", "pricing.monthly_base", -0.20, 0.20),
    ("Revenue share", "pricing.revenue_share", -0.20, 0.20),
    ("Build cost", "pricing.build_cost", -0.20, 0.20),
]

_ROOTS = ("input", "rates", "pricing")


def _split_path(path: str) -> tuple[str, str]:
    root, _, attr = path.partition(".")
    if root not in _ROOTS or not attr or "." in attr:
        raise ValueError(f"unsupported sweep path '{path}' (expected one of {', '.join(r + '.<field>' for r in _ROOTS)})")
    return root, attr


def _get_value(inputs: CalculatorInput, spec: PublishingModelSpec, path: str) -> float:
    root, attr = _split_path(path)
    holder = inputs if root == "input" else getattr(spec, root)
    return float(getattr(holder, attr))


def _coerce(model: BaseModel, attr: str, value: float) -> float:
    """Round for int fields; keep values that must be positive strictly positive."""
    field_info = type(model).model_fields[attr]
    if field_info.annotation is int:
        value = round(value)
    for meta in field_info.metadata:
        if getattr(meta, "gt", None) is not None and value <= meta.gt:
            value = 1 if field_info.annotation is int else meta.gt + 1e-9
        if getattr(meta, "le", None) is not None and value > meta.le:
            value = meta.le
        if getattr(meta, "ge", None) is not None and value < meta.ge:
            value = meta.ge
    return value


def _with_value(
    inputs: CalculatorInput, spec: PublishingModelSpec, path: str, value: float,
) -> tuple[CalculatorInput, PublishingModelSpec]:
    root, attr = _split_path(path)
    if root == "input":
        value = _coerce(inputs, attr, value)
        return CalculatorInput(**{**inputs.model_dump(), attr: value}), spec
    holder = getattr(spec, root)
    value = _coerce(holder, attr, value)
    new_holder = type(holder)(**{**holder.model_dump(), attr: value})
    return inputs, spec.model_copy(update={root: new_holder})


def run_sensitivity(
    inputs: CalculatorInput,
    model: PublishingModel = "trailguide",
    sweeps: list[tuple[str, str, float, float]] | None = None,
    rate_card: RateCard | None = None,
) -> SensitivityResult:
    """Run sensitivity analysis for one publishing model.

    Parameters
    ----------
    inputs : CalculatorInput
        Base inputs.
    model : PublishingModel
        Model whose net ROI is measured.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.
    rate_card : RateCard | None
        None = the published default table.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by net ROI impact.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    card = rate_card if rate_card is not None else RateCard.default()
    spec = card.get(model)
    base_net_roi = project_model(inputs, spec).net_roi

    bars: list[TornadoBar] = []
    for name, path, low_pct, high_pct in sweeps:
        base_val = _get_value(inputs, spec, path)

        low_inputs, low_spec = _with_value(inputs, spec, path, base_val * (1 + low_pct))
        high_inputs, high_spec = _with_value(inputs, spec, path, base_val * (1 + high_pct))
        low_val = _get_value(low_inputs, low_spec, path)
        high_val = _get_value(high_inputs, high_spec, path)

        roi_low = project_model(low_inputs, low_spec).net_roi
        roi_high = project_model(high_inputs, high_spec).net_roi

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            net_roi_at_low=round(roi_low, 2),
            net_roi_at_high=round(roi_high, 2),
            delta_net_roi=round(abs(roi_high - roi_low), 2),
        ))

    bars.sort(key=lambda b: b.delta_net_roi, reverse=True)

    return SensitivityResult(model=model, base_net_roi=round(base_net_roi, 2), bars=bars)
