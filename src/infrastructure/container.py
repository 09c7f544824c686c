"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.trial_balance_repository import (
    TrialBalanceRepositoryPort,
)
from src.application.use_cases.get_trial_balance_with_mappings import (
    GetTrialBalanceWithMappingsUseCase,
)
from src.application.use_cases.list_trial_balance_versions import (
    ListTrialBalanceVersionsUseCase,
)
from src.application.use_cases.select_best_trial_balance_version import (
    SelectBestTrialBalanceVersionUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import VersionSelectionSettings
from src.infrastructure.trial_balance_repository import (
    SqlAlchemyTrialBalanceRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_trial_balance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TrialBalanceRepositoryPort:
    """Return the trial balance repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTrialBalanceRepository(resolved_db)


def build_list_versions_use_case(
    repository: TrialBalanceRepositoryPort | None = None,
    settings: VersionSelectionSettings | None = None,
) -> ListTrialBalanceVersionsUseCase:
    """Return the version ranking use case configured from the environment."""
    resolved_settings = settings or VersionSelectionSettings.from_env()
    return ListTrialBalanceVersionsUseCase(
        repository or build_trial_balance_repository(),
        logger=get_app_logger(),
        recency_mode=resolved_settings.recency_mode,
    )


def build_select_best_version_use_case(
    repository: TrialBalanceRepositoryPort | None = None,
    settings: VersionSelectionSettings | None = None,
) -> SelectBestTrialBalanceVersionUseCase:
    """Return the best-version use case configured from the environment."""
    resolved_settings = settings or VersionSelectionSettings.from_env()
    return SelectBestTrialBalanceVersionUseCase(
        repository or build_trial_balance_repository(),
        logger=get_app_logger(),
        min_score=resolved_settings.min_selection_score,
        recency_mode=resolved_settings.recency_mode,
    )


def build_trial_balance_with_mappings_use_case(
    repository: TrialBalanceRepositoryPort | None = None,
    settings: VersionSelectionSettings | None = None,
) -> GetTrialBalanceWithMappingsUseCase:
    """Return the mapped trial balance use case."""
    resolved_settings = settings or VersionSelectionSettings.from_env()
    resolved_repository = repository or build_trial_balance_repository()
    return GetTrialBalanceWithMappingsUseCase(
        resolved_repository,
        version_selector=build_select_best_version_use_case(
            resolved_repository,
            resolved_settings,
        ),
        logger=get_app_logger(),
        default_fiscal_year=resolved_settings.default_fiscal_year,
    )


__all__ = [
    "build_database_adapter",
    "build_trial_balance_repository",
    "build_list_versions_use_case",
    "build_select_best_version_use_case",
    "build_trial_balance_with_mappings_use_case",
]
