"""Domain models package."""

from .mappings import (
    AccountClassificationRow,
    AccountMappingRow,
    MappingStats,
    PreviousYearBalanceRow,
    StandardAccount,
    StandardAccountBalance,
    TrialBalanceEntry,
    TrialBalanceEntryRow,
    TrialBalanceWithMappings,
)
from .trial_balance import BestVersion, RawBalanceRow, VersionSummary

__all__ = [
    "RawBalanceRow",
    "VersionSummary",
    "BestVersion",
    "TrialBalanceEntryRow",
    "StandardAccount",
    "AccountMappingRow",
    "AccountClassificationRow",
    "PreviousYearBalanceRow",
    "TrialBalanceEntry",
    "StandardAccountBalance",
    "MappingStats",
    "TrialBalanceWithMappings",
]
