"""Domain services package."""

from .standard_mapping import (
    build_trial_balance_with_mappings,
    get_standard_account_balance,
    group_by_standard_accounts,
)
from .version_aggregation import aggregate_versions, row_has_data
from .version_scoring import days_since, recency_penalty, score_version
from .version_selection import rank_versions, select_best_version

__all__ = [
    "aggregate_versions",
    "row_has_data",
    "days_since",
    "recency_penalty",
    "score_version",
    "rank_versions",
    "select_best_version",
    "build_trial_balance_with_mappings",
    "group_by_standard_accounts",
    "get_standard_account_balance",
]
