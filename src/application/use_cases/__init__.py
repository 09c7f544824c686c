"""Application use cases package."""

from .get_trial_balance_with_mappings import (
    GetTrialBalanceWithMappingsUseCase,
    TrialBalanceWithMappings,
)
from .list_trial_balance_versions import (
    ListTrialBalanceVersionsUseCase,
    VersionSummary,
)
from .select_best_trial_balance_version import (
    BestVersion,
    SelectBestTrialBalanceVersionUseCase,
)

__all__ = [
    "ListTrialBalanceVersionsUseCase",
    "VersionSummary",
    "SelectBestTrialBalanceVersionUseCase",
    "BestVersion",
    "GetTrialBalanceWithMappingsUseCase",
    "TrialBalanceWithMappings",
]
