"""Use case to list the trial balance versions of a client, best first."""

from datetime import datetime, timezone

from src.application.ports.trial_balance_repository import (
    TrialBalanceRepositoryPort,
)
from src.domain.constants import RECENCY_MODE_STACKED
from src.domain.models import VersionSummary
from src.domain.services.version_aggregation import aggregate_versions
from src.domain.services.version_selection import rank_versions
from src.infrastructure.logging.logger import get_app_logger


class ListTrialBalanceVersionsUseCase:
    """Score and rank every stored trial balance version of a client."""

    def __init__(
        self,
        trial_balance_repository: TrialBalanceRepositoryPort,
        logger=None,
        recency_mode: str = RECENCY_MODE_STACKED,
    ) -> None:
        """Initialize the use case.

        Args:
            trial_balance_repository: Port providing stored trial balances.
            logger: Optional logger compatible with logging.Logger-like API.
            recency_mode: Recency penalty mode used for scoring.
        """
        self._repository = trial_balance_repository
        self._logger = logger or get_app_logger()
        self._recency_mode = recency_mode

    def execute(
        self,
        client_id: str,
        now: datetime | None = None,
    ) -> list[VersionSummary]:
        """Return the scored versions ordered best first.

        Args:
            client_id: Client whose versions are ranked.
            now: Reference time for the recency penalty, defaults to the
                current UTC time.

        Returns:
            list[VersionSummary]: Every version, empty ones included.
        """
        reference = now or datetime.now(timezone.utc)
        rows = self._repository.fetch_version_rows(client_id)
        summaries = aggregate_versions(rows)
        ranked = rank_versions(summaries, reference, self._recency_mode)
        self._logger.info(
            f"Ranked {len(ranked)} trial balance versions from "
            f"{len(rows)} rows for client {client_id}"
        )
        return ranked


__all__ = ["ListTrialBalanceVersionsUseCase", "VersionSummary"]
