"""Funnel conversion rates — one set per publishing model."""

from pydantic import BaseModel, Field


class ConversionRates(BaseModel):
    """Fractions of an upstream audience that reach the next funnel stage."""

    site_to_subscriber: float = Field(
        default=0.01, gt=0, le=1.0, allow_inf_nan=False,
        description="Fraction of website visitors who become paid subscribers directly.",
    )
    email_to_subscriber: float = Field(
        default=0.03, gt=0, le=1.0, allow_inf_nan=False,
        description="Fraction of email-list members who convert to paid subscribers.",
    )
    visitor_to_email: float = Field(
        default=0.03, gt=0, le=1.0, allow_inf_nan=False,
        description="Fraction of website visitors who join the email list. "
                    "Shown alongside results; not used by the projection.",
    )
