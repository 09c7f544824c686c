"""Domain models for trial balance versions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class RawBalanceRow:
    """Row of a stored trial balance snapshot used for version scoring."""

    version: str | None
    period_year: int
    created_at: datetime
    opening_balance: Decimal | None = None
    debit_turnover: Decimal | None = None
    credit_turnover: Decimal | None = None
    closing_balance: Decimal | None = None


@dataclass
class VersionSummary:
    """Aggregated view of one trial balance version.

    Attributes:
        version: Version identifier of the upload.
        period_year: Fiscal year covered by the version.
        created_at: Timestamp of the first row seen for the version.
        account_count: Number of rows in the version.
        accounts_with_data: Rows with at least one non-zero amount.
        total_balance_abs: Sum of absolute closing balances over rows
            with data.
        is_empty: Whether the version holds no row with data.
        score: Quality score, filled once aggregation is complete.
    """

    version: str | None
    period_year: int
    created_at: datetime
    account_count: int = 0
    accounts_with_data: int = 0
    total_balance_abs: Decimal = Decimal("0")
    is_empty: bool = True
    score: float = 0.0


@dataclass(frozen=True)
class BestVersion:
    """Auto-selected trial balance version."""

    version: str | None
    period_year: int
    created_at: datetime
    quality_score: float
    accounts_with_data: int
    total_accounts: int


__all__ = ["RawBalanceRow", "VersionSummary", "BestVersion"]
