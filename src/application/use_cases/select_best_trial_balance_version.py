"""Use case to auto-select the best trial balance version of a client."""

from datetime import datetime

from src.application.ports.trial_balance_repository import (
    TrialBalanceRepositoryPort,
)
from src.application.use_cases.list_trial_balance_versions import (
    ListTrialBalanceVersionsUseCase,
)
from src.domain.constants import (
    DEFAULT_MIN_SELECTION_SCORE,
    RECENCY_MODE_STACKED,
)
from src.domain.models import BestVersion
from src.domain.services.version_selection import select_best_version
from src.infrastructure.logging.logger import get_app_logger


class SelectBestTrialBalanceVersionUseCase:
    """Pick the default trial balance version for statement computation."""

    def __init__(
        self,
        trial_balance_repository: TrialBalanceRepositoryPort,
        logger=None,
        min_score: float = DEFAULT_MIN_SELECTION_SCORE,
        recency_mode: str = RECENCY_MODE_STACKED,
    ) -> None:
        """Initialize the use case.

        Args:
            trial_balance_repository: Port providing stored trial balances.
            logger: Optional logger compatible with logging.Logger-like API.
            min_score: Score a version must exceed to be selected.
            recency_mode: Recency penalty mode used for scoring.
        """
        self._logger = logger or get_app_logger()
        self._min_score = min_score
        self._list_versions = ListTrialBalanceVersionsUseCase(
            trial_balance_repository,
            logger=self._logger,
            recency_mode=recency_mode,
        )

    def execute(
        self,
        client_id: str,
        now: datetime | None = None,
        period_year: int | None = None,
    ) -> BestVersion | None:
        """Return the best version, or None when none is suitable.

        Args:
            client_id: Client whose versions are considered.
            now: Reference time for the recency penalty.
            period_year: Optional fiscal year restricting the candidates.

        Returns:
            BestVersion | None: Selected version projection.
        """
        ranked = self._list_versions.execute(client_id, now=now)
        if period_year is not None:
            ranked = [
                summary for summary in ranked
                if summary.period_year == period_year
            ]
        best = select_best_version(ranked, min_score=self._min_score)
        if best is None:
            self._logger.info(
                f"No trial balance version above {self._min_score} "
                f"for client {client_id}"
            )
            return None
        self._logger.info(
            f"Selected version {best.version} ({best.period_year}) "
            f"with score {best.quality_score:.2f} for client {client_id}"
        )
        return best


__all__ = ["SelectBestTrialBalanceVersionUseCase", "BestVersion"]
