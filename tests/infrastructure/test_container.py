"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.settings import VersionSelectionSettings
from src.infrastructure.trial_balance_repository import (
    SqlAlchemyTrialBalanceRepository,
)


def test_build_trial_balance_repository_uses_db_port() -> None:
    repository = container.build_trial_balance_repository(db_port=MagicMock())

    assert isinstance(repository, SqlAlchemyTrialBalanceRepository)


def test_use_cases_receive_settings(monkeypatch) -> None:
    """Settings values should flow into the wired use cases."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()
    settings = VersionSelectionSettings(
        min_selection_score=80.0,
        recency_mode="tiered",
        default_fiscal_year=2023,
    )

    use_case = container.build_trial_balance_with_mappings_use_case(
        repository,
        settings,
    )

    assert use_case._default_fiscal_year == 2023
    selector = use_case._version_selector
    assert selector._min_score == 80.0
    assert selector._list_versions._recency_mode == "tiered"
    assert selector._list_versions._repository is repository


def test_list_use_case_reads_environment(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setenv("TB_RECENCY_PENALTY_MODE", "tiered")

    use_case = container.build_list_versions_use_case(MagicMock())

    assert use_case._recency_mode == "tiered"
