"""Rate card — the fixed conversion/pricing table behind every projection.

Each publishing model is a (ConversionRates, PricingStructure) pair.  The
projection engine runs one algorithm over every entry, so adding a model is
a table change, not a code change.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from publishing_roi.config.pricing import PricingStructure
from publishing_roi.config.rates import ConversionRates


PublishingModel = Literal["trailguide", "agency", "diy"]

PUBLISHING_MODELS: tuple[PublishingModel, ...] = ("trailguide", "agency", "diy")
"""Canonical display and iteration order."""


class PublishingModelSpec(BaseModel):
    """One publishing model: its funnel rates and its cost structure."""

    key: PublishingModel
    rates: ConversionRates = Field(default_factory=ConversionRates)
    pricing: PricingStructure = Field(default_factory=PricingStructure)


class RateCard(BaseModel):
    """Ordered table of publishing models, keyed by model id."""

    models: dict[PublishingModel, PublishingModelSpec] = Field(
        default_factory=lambda: dict(_default_models()),
        description="Publishing model specs keyed by model id.",
    )

    @model_validator(mode="after")
    def _keys_match_specs(self) -> "RateCard":
        for key, spec in self.models.items():
            if spec.key != key:
                raise ValueError(f"rate card entry '{key}' holds spec for '{spec.key}'")
        if not self.models:
            raise ValueError("rate card must define at least one publishing model")
        return self

    @classmethod
    def default(cls) -> "RateCard":
        return cls()

    def get(self, model: str) -> PublishingModelSpec:
        """Return the spec for ``model``; raises ``KeyError`` for unknown ids."""
        try:
            return self.models[model]  # type: ignore[index]
        except KeyError:
            known = ", ".join(self.models)
            raise KeyError(f"unknown publishing model '{model}' (known: {known})") from None

    def keys(self) -> list[PublishingModel]:
        """Model ids in canonical order, then any extras in insertion order."""
        ordered = [m for m in PUBLISHING_MODELS if m in self.models]
        ordered += [m for m in self.models if m not in ordered]
        return ordered


def _default_models() -> dict[PublishingModel, PublishingModelSpec]:
    return {
        "trailguide": PublishingModelSpec(
            key="trailguide",
            rates=ConversionRates(
                site_to_subscriber=0.025,  # 2.5%
                email_to_subscriber=0.07,  # 7%
                visitor_to_email=0.09,     # 9%
            ),
            pricing=PricingStructure(
                name="TrailGuide",
                description="Our optimized publishing stack",
                build_cost=1_000.0,
                monthly_base=0.0,
                revenue_share=0.10,
            ),
        ),
        "agency": PublishingModelSpec(
            key="agency",
            rates=ConversionRates(
                site_to_subscriber=0.01,
                email_to_subscriber=0.03,
                visitor_to_email=0.03,
            ),
            pricing=PricingStructure(
                name="Custom Agency",
                description="Traditional agency development",
                build_cost=75_000.0,   # midpoint of $50k–$100k quotes
                monthly_base=500.0,    # hosting + maintenance retainer
                revenue_share=0.0,
            ),
        ),
        "diy": PublishingModelSpec(
            key="diy",
            rates=ConversionRates(
                site_to_subscriber=0.01,
                email_to_subscriber=0.03,
                visitor_to_email=0.03,
            ),
            pricing=PricingStructure(
                name="DIY SaaS",
                description="Self-service platform",
                build_cost=0.0,
                monthly_base=350.0,    # midpoint of $200–$500 plans
                revenue_share=0.0,
            ),
        ),
    }
