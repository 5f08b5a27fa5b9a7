"""Environment-driven settings for the HTTP service."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class APIConfig:
    rate_card_path: str | None = None
    cors_origins: tuple[str, ...] = ("*",)


def get_api_config() -> APIConfig:
    origins = os.getenv("PUBLISHING_ROI_CORS_ORIGINS", "*")
    return APIConfig(
        rate_card_path=os.getenv("PUBLISHING_ROI_RATE_CARD") or None,
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
    )
