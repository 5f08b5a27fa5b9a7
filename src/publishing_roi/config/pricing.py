"""Pricing structure — what each publishing model costs the creator."""

from pydantic import BaseModel, Field


class PricingStructure(BaseModel):
    """Upfront, recurring and revenue-linked costs of one publishing model."""

    name: str = Field(default="DIY SaaS", description="Display name")
    description: str = Field(default="Self-service platform", description="Display blurb")
    build_cost: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="One-time upfront build cost ($)")
    monthly_base: float = Field(
        default=350.0, ge=0, allow_inf_nan=False,
        description="Fixed recurring monthly fee ($), independent of revenue "
                    "(hosting, maintenance, SaaS subscription).",
    )
    revenue_share: float = Field(
        default=0.0, ge=0, le=1.0, allow_inf_nan=False,
        description="Fraction of monthly subscriber revenue taken as an additional fee. "
                    "0 for flat-fee models, 0.10 = 10% of MRR.",
    )
