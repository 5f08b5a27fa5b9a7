"""Configuration models — rate card, calculator inputs, block settings."""

from publishing_roi.config.rates import ConversionRates
from publishing_roi.config.pricing import PricingStructure
from publishing_roi.config.rate_card import (
    PUBLISHING_MODELS,
    PublishingModel,
    PublishingModelSpec,
    RateCard,
)
from publishing_roi.config.calculator import (
    SLIDER_BOUNDS,
    CalculatorBlockSettings,
    CalculatorInput,
    SliderBounds,
)

__all__ = [
    "ConversionRates",
    "PricingStructure",
    "PublishingModel",
    "PUBLISHING_MODELS",
    "PublishingModelSpec",
    "RateCard",
    "SliderBounds",
    "SLIDER_BOUNDS",
    "CalculatorInput",
    "CalculatorBlockSettings",
]
