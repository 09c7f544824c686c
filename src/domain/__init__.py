"""Domain package for trial balance version rules and models."""

from .constants import DEFAULT_FISCAL_YEAR, DEFAULT_MIN_SELECTION_SCORE
from .models import (
    BestVersion,
    RawBalanceRow,
    StandardAccountBalance,
    TrialBalanceEntry,
    TrialBalanceWithMappings,
    VersionSummary,
)
from .services import (
    aggregate_versions,
    build_trial_balance_with_mappings,
    rank_versions,
    score_version,
    select_best_version,
)

__all__ = [
    "BestVersion",
    "RawBalanceRow",
    "StandardAccountBalance",
    "TrialBalanceEntry",
    "TrialBalanceWithMappings",
    "VersionSummary",
    "DEFAULT_FISCAL_YEAR",
    "DEFAULT_MIN_SELECTION_SCORE",
    "aggregate_versions",
    "build_trial_balance_with_mappings",
    "rank_versions",
    "score_version",
    "select_best_version",
]
