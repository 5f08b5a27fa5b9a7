"""Calculator inputs and the embeddable calculator block's settings.

``CalculatorInput`` is validated at construction (all three scalars must be
positive) and is then trusted by the engine.  The slider ranges below are a
presentation contract, not a validation rule: the projection is defined for
any positive input.  Use ``CalculatorInput.clamped`` to opt into snapping a
value into the slider range.
"""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from publishing_roi.config.rate_card import PublishingModel


class SliderBounds(NamedTuple):
    """Inclusive range and step of one input slider."""

    min: float
    max: float
    step: float

    def clamp(self, value: float) -> float:
        return min(self.max, max(self.min, value))


SLIDER_BOUNDS: dict[str, SliderBounds] = {
    "target_subscribers": SliderBounds(100, 10_000, 100),
    "monthly_price": SliderBounds(5, 50, 1),
    "estimated_visitors": SliderBounds(10_000, 200_000, 5_000),
}


class CalculatorInput(BaseModel):
    """One immutable set of calculator inputs."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    target_subscribers: int = Field(
        default=1_000, gt=0,
        description="Paid-subscriber goal. UI range 100–10,000 (step 100).",
    )
    monthly_price: float = Field(
        default=10.0, gt=0, allow_inf_nan=False,
        description="Monthly price per subscriber ($). UI range $5–$50 (step $1).",
    )
    estimated_visitors: int = Field(
        default=50_000, gt=0,
        description="Current monthly website visitors. UI range 10,000–200,000 (step 5,000).",
    )
    selected_model: PublishingModel = Field(
        default="trailguide",
        description="Model the viewer is focused on. Display only; never changes a number.",
    )

    @classmethod
    def clamped(
        cls,
        target_subscribers: float,
        monthly_price: float,
        estimated_visitors: float,
        selected_model: PublishingModel = "trailguide",
    ) -> "CalculatorInput":
        """Build an input with every value snapped into its slider range."""
        return cls(
            target_subscribers=int(round(SLIDER_BOUNDS["target_subscribers"].clamp(target_subscribers))),
            monthly_price=float(SLIDER_BOUNDS["monthly_price"].clamp(monthly_price)),
            estimated_visitors=int(round(SLIDER_BOUNDS["estimated_visitors"].clamp(estimated_visitors))),
            selected_model=selected_model,
        )

    def within_slider_bounds(self) -> bool:
        """True when every value lies inside its documented slider range."""
        return all(
            SLIDER_BOUNDS[name].min <= getattr(self, name) <= SLIDER_BOUNDS[name].max
            for name in SLIDER_BOUNDS
        )


class CalculatorBlockSettings(BaseModel):
    """Props of the ROI calculator block as placed in a lesson or page."""

    title: str = Field(default="Publishing ROI Calculator", description="Heading shown above the calculator")
    description: str = Field(
        default="See how different publishing models compare in reaching your subscriber goals",
        description="Sub-heading shown under the title",
    )
    default_target_subscribers: int = Field(default=1_000, gt=0, description="Initial subscriber goal")
    default_monthly_price: float = Field(default=10.0, gt=0, allow_inf_nan=False, description="Initial monthly price ($)")
    default_estimated_visitors: int = Field(default=50_000, gt=0, description="Initial monthly visitors")

    def initial_input(self) -> CalculatorInput:
        """Calculator input the block starts from before any slider moves."""
        return CalculatorInput(
            target_subscribers=self.default_target_subscribers,
            monthly_price=self.default_monthly_price,
            estimated_visitors=self.default_estimated_visitors,
        )

    def preview_text(self) -> str:
        """Placeholder text shown when the block is rendered in editor preview."""
        return (
            f"{self.title}\n{self.description}\n"
            "Interactive ROI Calculator - Click to interact in lesson"
        )
