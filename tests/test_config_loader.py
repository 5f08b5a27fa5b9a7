"""Tests for config/loader.py and config/env.py — YAML scenarios and environment."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from publishing_roi.config import CalculatorBlockSettings, RateCard
from publishing_roi.config.env import get_api_config
from publishing_roi.config.loader import BASE_CASE_PATH, load_block_settings, load_rate_card


def test_base_case_matches_default_rate_card():
    assert load_rate_card(BASE_CASE_PATH) == RateCard.default()


def test_base_case_block_settings():
    assert load_block_settings(BASE_CASE_PATH) == CalculatorBlockSettings()


def test_missing_sections_use_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("# nothing here\n")
    assert load_rate_card(path) == RateCard.default()
    assert load_block_settings(path) == CalculatorBlockSettings()


def test_partial_rate_card(tmp_path):
    path = tmp_path / "two_models.yaml"
    path.write_text(
        "rate_card:\n"
        "  models:\n"
        "    diy:\n"
        "      pricing:\n"
        "        monthly_base: 200\n"
        "    trailguide:\n"
        "      rates:\n"
        "        site_to_subscriber: 0.03\n"
    )
    card = load_rate_card(path)
    assert card.keys() == ["trailguide", "diy"]
    assert card.get("diy").pricing.monthly_base == 200
    assert card.get("trailguide").rates.site_to_subscriber == 0.03


def test_invalid_rate_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "rate_card:\n"
        "  models:\n"
        "    agency:\n"
        "      rates:\n"
        "        site_to_subscriber: 0\n"
    )
    with pytest.raises(ValidationError):
        load_rate_card(path)


def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="mapping"):
        load_rate_card(path)


class TestEnv:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PUBLISHING_ROI_RATE_CARD", raising=False)
        monkeypatch.delenv("PUBLISHING_ROI_CORS_ORIGINS", raising=False)
        cfg = get_api_config()
        assert cfg.rate_card_path is None
        assert cfg.cors_origins == ("*",)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PUBLISHING_ROI_RATE_CARD", "/etc/roi/card.yaml")
        monkeypatch.setenv("PUBLISHING_ROI_CORS_ORIGINS", "https://a.example, https://b.example")
        cfg = get_api_config()
        assert cfg.rate_card_path == "/etc/roi/card.yaml"
        assert cfg.cors_origins == ("https://a.example", "https://b.example")
