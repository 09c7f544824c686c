"""Tests for infrastructure settings."""

import pytest

from src.infrastructure.settings import VersionSelectionSettings


def test_from_env_uses_defaults(monkeypatch) -> None:
    for name in (
        "TB_MIN_SELECTION_SCORE",
        "TB_RECENCY_PENALTY_MODE",
        "TB_DEFAULT_FISCAL_YEAR",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = VersionSelectionSettings.from_env()

    assert settings == VersionSelectionSettings(
        min_selection_score=50.0,
        recency_mode="stacked",
        default_fiscal_year=2024,
    )


def test_from_env_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TB_MIN_SELECTION_SCORE", "75.5")
    monkeypatch.setenv("TB_RECENCY_PENALTY_MODE", " Tiered ")
    monkeypatch.setenv("TB_DEFAULT_FISCAL_YEAR", "2025")

    settings = VersionSelectionSettings.from_env()

    assert settings.min_selection_score == 75.5
    assert settings.recency_mode == "tiered"
    assert settings.default_fiscal_year == 2025


def test_from_env_rejects_unknown_mode(monkeypatch) -> None:
    monkeypatch.setenv("TB_RECENCY_PENALTY_MODE", "linear")

    with pytest.raises(ValueError, match="TB_RECENCY_PENALTY_MODE"):
        VersionSelectionSettings.from_env()


def test_from_env_rejects_invalid_numbers(monkeypatch) -> None:
    monkeypatch.delenv("TB_RECENCY_PENALTY_MODE", raising=False)
    monkeypatch.setenv("TB_DEFAULT_FISCAL_YEAR", "next year")

    with pytest.raises(ValueError, match="TB_DEFAULT_FISCAL_YEAR"):
        VersionSelectionSettings.from_env()
