"""Ranking and auto-selection of trial balance versions."""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime

from src.domain.constants import (
    DEFAULT_MIN_SELECTION_SCORE,
    RECENCY_MODE_STACKED,
)
from src.domain.models import BestVersion, VersionSummary
from src.domain.services.version_aggregation import VersionKey
from src.domain.services.version_scoring import as_utc, score_version


def _ranking_key(summary: VersionSummary) -> tuple[float, datetime]:
    return (summary.score, as_utc(summary.created_at))


def rank_versions(
    summaries: Mapping[VersionKey, VersionSummary] | Iterable[VersionSummary],
    now: datetime,
    recency_mode: str = RECENCY_MODE_STACKED,
) -> list[VersionSummary]:
    """Score every summary and order them best first.

    Ordering is score descending, then ``created_at`` descending. Nothing
    is filtered out.

    Args:
        summaries: Summaries from ``aggregate_versions`` (mapping or
            plain iterable).
        now: Reference time for the recency penalty.
        recency_mode: Recency penalty mode.

    Returns:
        list[VersionSummary]: Scored copies of the summaries.
    """
    if isinstance(summaries, Mapping):
        summaries = summaries.values()
    scored = [
        replace(summary, score=score_version(summary, now, recency_mode))
        for summary in summaries
    ]
    return sorted(scored, key=_ranking_key, reverse=True)


def select_best_version(
    scored: Iterable[VersionSummary],
    min_score: float = DEFAULT_MIN_SELECTION_SCORE,
) -> BestVersion | None:
    """Pick the best scored version above the minimum score.

    Only non-empty versions with a score strictly above ``min_score``
    qualify. Equal scores resolve to the most recent ``created_at``.

    Args:
        scored: Summaries with their score already computed.
        min_score: Exclusive lower bound for an acceptable score.

    Returns:
        BestVersion | None: Projection of the winner, or None when no
        version qualifies.
    """
    candidates = [
        summary
        for summary in scored
        if not summary.is_empty and summary.score > min_score
    ]
    if not candidates:
        return None
    winner = max(candidates, key=_ranking_key)
    return BestVersion(
        version=winner.version,
        period_year=winner.period_year,
        created_at=winner.created_at,
        quality_score=winner.score,
        accounts_with_data=winner.accounts_with_data,
        total_accounts=winner.account_count,
    )


__all__ = ["rank_versions", "select_best_version"]
