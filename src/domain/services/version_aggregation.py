"""Domain service grouping raw trial balance rows into version summaries."""

from collections.abc import Iterable

from src.domain.constants import DATA_THRESHOLD
from src.domain.models import RawBalanceRow, VersionSummary
from src.utils.decimal_utils import coerce_decimal, exceeds_threshold

VersionKey = tuple[str | None, int]


def version_key(row: RawBalanceRow) -> VersionKey:
    """Return the grouping key of a row (version and fiscal year)."""
    return (row.version, row.period_year)


def row_has_data(row: RawBalanceRow) -> bool:
    """Return True when any amount of the row is above the data threshold.

    Args:
        row: Raw trial balance row.

    Returns:
        bool: Whether the row carries data.
    """
    return any(
        exceeds_threshold(amount, DATA_THRESHOLD)
        for amount in (
            row.opening_balance,
            row.debit_turnover,
            row.credit_turnover,
            row.closing_balance,
        )
    )


def aggregate_versions(
    rows: Iterable[RawBalanceRow],
) -> dict[VersionKey, VersionSummary]:
    """Group rows by version and fiscal year.

    The first row seen for a key provides the summary metadata
    (version, period_year, created_at). Versions without any data row are
    kept with ``is_empty`` set.

    Args:
        rows: Raw rows for a single client, across all years.

    Returns:
        dict[VersionKey, VersionSummary]: Summaries keyed by
        (version, period_year), in first-seen order.
    """
    summaries: dict[VersionKey, VersionSummary] = {}
    for row in rows:
        key = version_key(row)
        summary = summaries.get(key)
        if summary is None:
            summary = VersionSummary(
                version=row.version,
                period_year=row.period_year,
                created_at=row.created_at,
            )
            summaries[key] = summary

        summary.account_count += 1
        if not row_has_data(row):
            continue
        summary.accounts_with_data += 1
        summary.is_empty = False
        summary.total_balance_abs += abs(coerce_decimal(row.closing_balance))
    return summaries


__all__ = ["VersionKey", "version_key", "row_has_data", "aggregate_versions"]
