"""Contract-style tests for use cases using TrialBalanceRepositoryPort."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.trial_balance_repository import (
    TrialBalanceRepositoryPort,
)
from src.application.use_cases.get_trial_balance_with_mappings import (
    GetTrialBalanceWithMappingsUseCase,
)
from src.application.use_cases.select_best_trial_balance_version import (
    SelectBestTrialBalanceVersionUseCase,
)
from src.domain.models import (
    AccountClassificationRow,
    AccountMappingRow,
    PreviousYearBalanceRow,
    RawBalanceRow,
    StandardAccount,
    TrialBalanceEntryRow,
)

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class FakeTrialBalanceRepository(TrialBalanceRepositoryPort):
    """In-memory repository keyed by (year, version)."""

    def __init__(
        self,
        uploads: dict[tuple[int, str], tuple[datetime, list[TrialBalanceEntryRow]]],
        standard_accounts: list[StandardAccount],
        mappings: list[AccountMappingRow],
    ) -> None:
        self._uploads = uploads
        self._standard_accounts = standard_accounts
        self._mappings = mappings

    def fetch_version_rows(self, client_id: str) -> list[RawBalanceRow]:
        return [
            RawBalanceRow(
                version=version,
                period_year=year,
                created_at=created_at,
                opening_balance=row.opening_balance,
                debit_turnover=row.debit_turnover,
                credit_turnover=row.credit_turnover,
                closing_balance=row.closing_balance,
            )
            for (year, version), (created_at, rows) in self._uploads.items()
            for row in rows
        ]

    def fetch_trial_balance_rows(
        self,
        client_id: str,
        period_year: int,
        version: str | None,
    ) -> list[TrialBalanceEntryRow]:
        return [
            row
            for (year, upload_version), (_, rows) in self._uploads.items()
            if year == period_year and version in (None, upload_version)
            for row in rows
        ]

    def fetch_account_mappings(
        self,
        client_id: str,
    ) -> list[AccountMappingRow]:
        return list(self._mappings)

    def fetch_account_classifications(
        self,
        client_id: str,
    ) -> list[AccountClassificationRow]:
        return []

    def fetch_standard_accounts(self) -> list[StandardAccount]:
        return list(self._standard_accounts)

    def fetch_latest_version(
        self,
        client_id: str,
        period_year: int,
    ) -> str | None:
        candidates = [
            (created_at, version)
            for (year, version), (created_at, _) in self._uploads.items()
            if year == period_year
        ]
        if not candidates:
            return None
        return max(candidates)[1]

    def fetch_previous_year_balances(
        self,
        client_id: str,
        period_year: int,
        version: str | None,
    ) -> list[PreviousYearBalanceRow]:
        return [
            PreviousYearBalanceRow(
                account_number=row.account_number,
                closing_balance=row.closing_balance,
            )
            for row in self.fetch_trial_balance_rows(
                client_id,
                period_year,
                version,
            )
        ]


def _entry(year: int, version: str, account: str, closing: str | None):
    return TrialBalanceEntryRow(
        id=f"{year}-{version}-{account}",
        account_number=account,
        account_name=f"Konto {account}",
        opening_balance=None,
        debit_turnover=None,
        credit_turnover=None,
        closing_balance=Decimal(closing) if closing else None,
        period_end_date=None,
        period_year=year,
        version=version,
    )


def _build_repository() -> FakeTrialBalanceRepository:
    uploads = {
        (2024, "duplicate"): (
            NOW - timedelta(days=1),
            [_entry(2024, "duplicate", "3000", None)],
        ),
        (2024, "final"): (
            NOW - timedelta(days=3),
            [
                _entry(2024, "final", "3000", "-2500"),
                _entry(2024, "final", "1920", "2500"),
            ],
        ),
        (2023, "first"): (
            NOW - timedelta(days=200),
            [_entry(2023, "first", "1920", "800")],
        ),
        (2023, "second"): (
            NOW - timedelta(days=190),
            [_entry(2023, "second", "1920", "900")],
        ),
    }
    return FakeTrialBalanceRepository(
        uploads,
        standard_accounts=[
            StandardAccount("sa-10", "10", "Salg"),
            StandardAccount("sa-19", "19", "Bankinnskudd"),
        ],
        mappings=[
            AccountMappingRow("3000", "10"),
            AccountMappingRow("1920", "19"),
        ],
    )


def test_best_version_skips_newer_empty_duplicate() -> None:
    use_case = SelectBestTrialBalanceVersionUseCase(
        _build_repository(),
        logger=MagicMock(),
    )

    best = use_case.execute("client-1", now=NOW)

    assert best.version == "final"
    assert best.period_year == 2024


def test_mapped_trial_balance_uses_latest_previous_year_version() -> None:
    repository = _build_repository()
    use_case = GetTrialBalanceWithMappingsUseCase(
        repository,
        version_selector=SelectBestTrialBalanceVersionUseCase(
            repository,
            logger=MagicMock(),
        ),
        logger=MagicMock(),
    )

    result = use_case.execute("client-1", now=NOW)

    assert result.version == "final"
    entries = {entry.account_number: entry for entry in result.entries}
    assert entries["1920"].previous_year_balance == Decimal("900")
    assert entries["3000"].previous_year_balance == Decimal("0")
    assert [
        balance.total_balance for balance in result.standard_account_balances
    ] == [Decimal("-2500"), Decimal("2500")]
