"""YAML scenario files → validated config models.

A scenario file may carry a ``rate_card`` section (same shape as
``RateCard.model_dump()``) and a ``block`` section (``CalculatorBlockSettings``).
Either may be omitted; missing sections fall back to defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from publishing_roi.config.calculator import CalculatorBlockSettings
from publishing_roi.config.rate_card import RateCard

logger = logging.getLogger(__name__)

BASE_CASE_PATH = Path(__file__).resolve().parents[3] / "scenarios" / "base_case.yaml"


def _read_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return data


def _with_keys(models: dict[str, Any]) -> dict[str, Any]:
    """Fill each spec's ``key`` from its mapping key so files need not repeat it."""
    filled: dict[str, Any] = {}
    for key, spec in models.items():
        spec = dict(spec or {})
        spec.setdefault("key", key)
        filled[key] = spec
    return filled


def load_rate_card(path: str | Path) -> RateCard:
    """Load and validate the ``rate_card`` section of a scenario file."""
    data = _read_yaml(path)
    section = data.get("rate_card")
    if not section:
        logger.info("No rate_card section in %s, using defaults", path)
        return RateCard.default()
    card = RateCard(models=_with_keys(section.get("models", {})))
    logger.info("Loaded rate card with %d models from %s", len(card.models), path)
    return card


def load_block_settings(path: str | Path) -> CalculatorBlockSettings:
    """Load and validate the ``block`` section of a scenario file."""
    data = _read_yaml(path)
    return CalculatorBlockSettings(**(data.get("block") or {}))
