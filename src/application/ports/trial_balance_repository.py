"""Port for trial balance reads."""

from typing import Protocol

from src.domain.models import (
    AccountClassificationRow,
    AccountMappingRow,
    PreviousYearBalanceRow,
    RawBalanceRow,
    StandardAccount,
    TrialBalanceEntryRow,
)


class TrialBalanceRepositoryPort(Protocol):
    """Port exposing stored trial balances and their mapping tables."""

    def fetch_version_rows(self, client_id: str) -> list[RawBalanceRow]:
        """Return the rows used to score the versions of a client."""

    def fetch_trial_balance_rows(
        self,
        client_id: str,
        period_year: int,
        version: str | None,
    ) -> list[TrialBalanceEntryRow]:
        """Return the rows of a year, restricted to a version when given."""

    def fetch_account_mappings(
        self,
        client_id: str,
    ) -> list[AccountMappingRow]:
        """Return explicit account mappings of the client."""

    def fetch_account_classifications(
        self,
        client_id: str,
    ) -> list[AccountClassificationRow]:
        """Return active account classifications of the client."""

    def fetch_standard_accounts(self) -> list[StandardAccount]:
        """Return the standard chart of accounts."""

    def fetch_latest_version(
        self,
        client_id: str,
        period_year: int,
    ) -> str | None:
        """Return the most recently uploaded version of a year."""

    def fetch_previous_year_balances(
        self,
        client_id: str,
        period_year: int,
        version: str | None,
    ) -> list[PreviousYearBalanceRow]:
        """Return closing balances per account for a year."""


__all__ = ["TrialBalanceRepositoryPort"]
