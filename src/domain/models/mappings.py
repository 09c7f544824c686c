"""Domain models for trial balance entries mapped to standard accounts."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class TrialBalanceEntryRow:
    """Stored trial balance row joined with the client chart of accounts."""

    id: str
    account_number: str | None
    account_name: str | None
    opening_balance: Decimal | None
    debit_turnover: Decimal | None
    credit_turnover: Decimal | None
    closing_balance: Decimal | None
    period_end_date: date | None
    period_year: int
    version: str | None = None


@dataclass(frozen=True)
class StandardAccount:
    """Line of the firm's standard chart of accounts."""

    id: str
    standard_number: str
    standard_name: str
    category: str | None = None
    account_type: str | None = None
    analysis_group: str | None = None


@dataclass(frozen=True)
class AccountMappingRow:
    """Explicit mapping from a client account to a statement line."""

    account_number: str
    statement_line_number: str


@dataclass(frozen=True)
class AccountClassificationRow:
    """Active classification of a client account by category name."""

    account_number: str
    new_category: str


@dataclass(frozen=True)
class PreviousYearBalanceRow:
    """Closing balance of an account in the previous fiscal year."""

    account_number: str | None
    closing_balance: Decimal | None


@dataclass(frozen=True)
class TrialBalanceEntry:
    """Trial balance entry enriched with its standard account mapping."""

    id: str
    account_number: str
    account_name: str
    opening_balance: Decimal
    debit_turnover: Decimal
    credit_turnover: Decimal
    closing_balance: Decimal
    period_end_date: date | None
    period_year: int
    previous_year_balance: Decimal = Decimal("0")
    standard_account_id: str | None = None
    standard_number: str | None = None
    standard_name: str | None = None
    standard_category: str | None = None
    standard_account_type: str | None = None
    standard_analysis_group: str | None = None

    @property
    def is_mapped(self) -> bool:
        """Return True when the entry resolved to a standard account."""
        return self.standard_account_id is not None


@dataclass(frozen=True)
class StandardAccountBalance:
    """Closing balance total for one standard account."""

    standard_account_id: str
    standard_number: str
    standard_name: str
    total_balance: Decimal
    mapped_accounts: list[TrialBalanceEntry] = field(default_factory=list)


@dataclass(frozen=True)
class MappingStats:
    """Counts of mapped and unmapped trial balance entries."""

    total_accounts: int
    mapped_accounts: int
    unmapped_accounts: int


@dataclass(frozen=True)
class TrialBalanceWithMappings:
    """Trial balance of one version grouped by standard account."""

    period_year: int
    version: str | None
    entries: list[TrialBalanceEntry]
    standard_account_balances: list[StandardAccountBalance]
    stats: MappingStats


__all__ = [
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
