"""Quality heuristic for trial balance versions."""

from datetime import datetime, timezone

from src.domain.constants import (
    ACCOUNT_COUNT_RANGE,
    ACCOUNT_COUNT_REWARD,
    BALANCE_THRESHOLDS,
    DENSITY_WEIGHT,
    PRESENCE_REWARD,
    RECENCY_MODE_STACKED,
    RECENCY_MODE_TIERED,
    RECENCY_PENALTIES,
)
from src.domain.models import VersionSummary


def as_utc(value: datetime) -> datetime:
    """Return ``value`` with naive timestamps read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_since(created_at: datetime, now: datetime) -> int:
    """Return the number of whole days elapsed between two timestamps.

    Naive timestamps are read as UTC when compared with aware ones.

    Args:
        created_at: Upload timestamp of the version.
        now: Reference time.

    Returns:
        int: Floor of the elapsed time in days.
    """
    return (as_utc(now) - as_utc(created_at)).days


def recency_penalty(days: int, mode: str = RECENCY_MODE_STACKED) -> float:
    """Return the penalty for a version uploaded ``days`` ago.

    In ``stacked`` mode every exceeded threshold applies, so versions older
    than a year lose both penalties. In ``tiered`` mode only the largest
    exceeded threshold applies.

    Args:
        days: Whole days since upload.
        mode: Either ``stacked`` or ``tiered``.

    Returns:
        float: Non-negative penalty to subtract from the score.

    Raises:
        ValueError: If the mode is unknown.
    """
    if mode not in (RECENCY_MODE_STACKED, RECENCY_MODE_TIERED):
        raise ValueError(f"Unsupported recency penalty mode: {mode}")
    penalty = 0.0
    for threshold, amount in RECENCY_PENALTIES:
        if days > threshold:
            penalty += amount
            if mode == RECENCY_MODE_TIERED:
                break
    return penalty


def _check_counts(summary: VersionSummary) -> None:
    if summary.account_count < 0 or summary.accounts_with_data < 0:
        raise ValueError(
            f"Negative account counts for version {summary.version!r}"
        )
    if summary.accounts_with_data > summary.account_count:
        raise ValueError(
            f"accounts_with_data exceeds account_count for version "
            f"{summary.version!r}"
        )
    if not summary.is_empty and summary.account_count == 0:
        raise ValueError(
            f"Non-empty version {summary.version!r} has no accounts"
        )


def score_version(
    summary: VersionSummary,
    now: datetime,
    recency_mode: str = RECENCY_MODE_STACKED,
) -> float:
    """Compute the quality score of a version summary.

    Empty versions are never rewarded; they can only receive the recency
    penalty.

    Args:
        summary: Aggregated version summary.
        now: Reference time for the recency penalty.
        recency_mode: Recency penalty mode (``stacked`` or ``tiered``).

    Returns:
        float: Score, higher is better. May be negative.

    Raises:
        ValueError: If the summary counts are inconsistent.
    """
    _check_counts(summary)
    score = 0.0
    if not summary.is_empty:
        score += PRESENCE_REWARD
        score += summary.accounts_with_data / summary.account_count * DENSITY_WEIGHT
        for threshold, reward in BALANCE_THRESHOLDS:
            if summary.total_balance_abs > threshold:
                score += reward
        lower, upper = ACCOUNT_COUNT_RANGE
        if lower < summary.account_count < upper:
            score += ACCOUNT_COUNT_REWARD

    score -= recency_penalty(days_since(summary.created_at, now), recency_mode)
    return score


__all__ = ["as_utc", "days_since", "recency_penalty", "score_version"]
