"""Use case to load a trial balance version mapped to standard accounts."""

from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.trial_balance_repository import (
    TrialBalanceRepositoryPort,
)
from src.application.use_cases.select_best_trial_balance_version import (
    SelectBestTrialBalanceVersionUseCase,
)
from src.domain.constants import DEFAULT_FISCAL_YEAR
from src.domain.models import (
    AccountClassificationRow,
    MappingStats,
    PreviousYearBalanceRow,
    StandardAccount,
    TrialBalanceWithMappings,
)
from src.domain.services.standard_mapping import (
    build_trial_balance_with_mappings,
)
from src.infrastructure.logging.logger import get_app_logger


class GetTrialBalanceWithMappingsUseCase:
    """Load a trial balance and group it by standard account."""

    def __init__(
        self,
        trial_balance_repository: TrialBalanceRepositoryPort,
        version_selector: SelectBestTrialBalanceVersionUseCase | None = None,
        logger=None,
        default_fiscal_year: int = DEFAULT_FISCAL_YEAR,
    ) -> None:
        """Initialize the use case.

        Args:
            trial_balance_repository: Port providing stored trial balances.
            version_selector: Optional use case picking the default version.
            logger: Optional logger compatible with logging.Logger-like API.
            default_fiscal_year: Year used when nothing else resolves one.
        """
        self._repository = trial_balance_repository
        self._logger = logger or get_app_logger()
        self._version_selector = version_selector or (
            SelectBestTrialBalanceVersionUseCase(
                trial_balance_repository,
                logger=self._logger,
            )
        )
        self._default_fiscal_year = default_fiscal_year

    def execute(
        self,
        client_id: str,
        fiscal_year: int | None = None,
        version: str | None = None,
        now: datetime | None = None,
    ) -> TrialBalanceWithMappings:
        """Return the mapped trial balance of a client.

        Missing year or version are filled from the auto-selected best
        version. When nothing qualifies, the default fiscal year is used
        with every version of that year.

        Args:
            client_id: Client whose trial balance is loaded.
            fiscal_year: Optional fiscal year.
            version: Optional version identifier.
            now: Reference time for version scoring.

        Returns:
            TrialBalanceWithMappings: Mapped entries, totals and stats.
        """
        period_year, version = self._resolve_version(
            client_id,
            fiscal_year,
            version,
            now,
        )
        rows = self._repository.fetch_trial_balance_rows(
            client_id,
            period_year,
            version,
        )
        if not rows:
            self._logger.info(
                f"No trial balance rows for client {client_id}, "
                f"year={period_year}, version={version}"
            )
            return TrialBalanceWithMappings(
                period_year=period_year,
                version=version,
                entries=[],
                standard_account_balances=[],
                stats=MappingStats(
                    total_accounts=0,
                    mapped_accounts=0,
                    unmapped_accounts=0,
                ),
            )

        mappings = self._repository.fetch_account_mappings(client_id)
        classifications = self._fetch_classifications(client_id)
        standard_accounts = self._fetch_standard_accounts()
        previous = self._fetch_previous_year(client_id, period_year - 1)

        result = build_trial_balance_with_mappings(
            rows,
            mappings,
            classifications,
            standard_accounts,
            previous,
            period_year=period_year,
            version=version,
            logger=self._logger,
        )
        self._logger.info(
            f"Mapped {result.stats.mapped_accounts}/"
            f"{result.stats.total_accounts} accounts for client {client_id}, "
            f"year={period_year}, version={version}"
        )
        return result

    def _resolve_version(
        self,
        client_id: str,
        fiscal_year: int | None,
        version: str | None,
        now: datetime | None,
    ) -> tuple[int, str | None]:
        if fiscal_year is not None and version is not None:
            return fiscal_year, version
        best = self._version_selector.execute(
            client_id,
            now=now,
            period_year=fiscal_year,
        )
        if best is None:
            return fiscal_year or self._default_fiscal_year, version
        return fiscal_year or best.period_year, version or best.version

    def _fetch_classifications(
        self,
        client_id: str,
    ) -> list[AccountClassificationRow]:
        try:
            return self._repository.fetch_account_classifications(client_id)
        except SQLAlchemyError as exc:
            self._logger.warning(
                f"Continuing without account classifications: {exc}"
            )
            return []

    def _fetch_standard_accounts(self) -> list[StandardAccount]:
        try:
            return self._repository.fetch_standard_accounts()
        except SQLAlchemyError as exc:
            self._logger.warning(
                f"Continuing without standard accounts: {exc}"
            )
            return []

    def _fetch_previous_year(
        self,
        client_id: str,
        period_year: int,
    ) -> list[PreviousYearBalanceRow]:
        try:
            previous_version = self._repository.fetch_latest_version(
                client_id,
                period_year,
            )
            return self._repository.fetch_previous_year_balances(
                client_id,
                period_year,
                previous_version,
            )
        except SQLAlchemyError as exc:
            self._logger.warning(
                f"Previous year balances unavailable for {period_year}: {exc}"
            )
            return []


__all__ = ["GetTrialBalanceWithMappingsUseCase", "TrialBalanceWithMappings"]
