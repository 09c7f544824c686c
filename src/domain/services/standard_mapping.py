"""Domain services mapping trial balance entries onto standard accounts."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import UNKNOWN_ACCOUNT_NAME, UNKNOWN_ACCOUNT_NUMBER
from src.domain.models import (
    AccountClassificationRow,
    AccountMappingRow,
    MappingStats,
    PreviousYearBalanceRow,
    StandardAccount,
    StandardAccountBalance,
    TrialBalanceEntry,
    TrialBalanceEntryRow,
    TrialBalanceWithMappings,
)
from src.utils.decimal_utils import coerce_decimal


def build_mapping_lookup(
    mappings: Iterable[AccountMappingRow],
    standard_accounts: Iterable[StandardAccount],
    logger: Logger,
) -> dict[str, StandardAccount]:
    """Resolve explicit mappings by statement line number.

    Args:
        mappings: Client account to statement line mappings.
        standard_accounts: Standard chart of accounts.
        logger: Logger used for warnings.

    Returns:
        dict[str, StandardAccount]: Standard account per client account.
    """
    by_number: dict[str, StandardAccount] = {}
    for account in standard_accounts:
        by_number.setdefault(account.standard_number, account)
    lookup: dict[str, StandardAccount] = {}
    for mapping in mappings:
        standard = by_number.get(mapping.statement_line_number)
        if standard is None:
            logger.warning(
                f"Unknown statement line {mapping.statement_line_number} "
                f"for account {mapping.account_number}"
            )
            continue
        lookup[mapping.account_number] = standard
    return lookup


def build_classification_lookup(
    classifications: Iterable[AccountClassificationRow],
    standard_accounts: Iterable[StandardAccount],
    mapped_accounts: Iterable[str] = (),
) -> dict[str, StandardAccount]:
    """Resolve classifications by standard account name.

    Accounts already resolved by an explicit mapping are skipped.
    """
    by_name: dict[str, StandardAccount] = {}
    for account in standard_accounts:
        by_name.setdefault(account.standard_name, account)
    skipped = set(mapped_accounts)
    lookup: dict[str, StandardAccount] = {}
    for classification in classifications:
        if classification.account_number in skipped:
            continue
        standard = by_name.get(classification.new_category)
        if standard is not None:
            lookup[classification.account_number] = standard
    return lookup


def build_previous_year_lookup(
    rows: Iterable[PreviousYearBalanceRow],
) -> dict[str, Decimal]:
    """Return previous-year closing balances keyed by account number."""
    return {
        row.account_number: coerce_decimal(row.closing_balance)
        for row in rows
        if row.account_number
    }


def build_entry(
    row: TrialBalanceEntryRow,
    standard: StandardAccount | None,
    previous_year_balance: Decimal,
) -> TrialBalanceEntry:
    """Convert a stored row into a mapped trial balance entry."""
    return TrialBalanceEntry(
        id=row.id,
        account_number=row.account_number or UNKNOWN_ACCOUNT_NUMBER,
        account_name=row.account_name or UNKNOWN_ACCOUNT_NAME,
        opening_balance=coerce_decimal(row.opening_balance),
        debit_turnover=coerce_decimal(row.debit_turnover),
        credit_turnover=coerce_decimal(row.credit_turnover),
        closing_balance=coerce_decimal(row.closing_balance),
        period_end_date=row.period_end_date,
        period_year=row.period_year,
        previous_year_balance=previous_year_balance,
        standard_account_id=standard.id if standard else None,
        standard_number=standard.standard_number if standard else None,
        standard_name=standard.standard_name if standard else None,
        standard_category=standard.category if standard else None,
        standard_account_type=standard.account_type if standard else None,
        standard_analysis_group=(
            standard.analysis_group if standard else None
        ),
    )


def group_by_standard_accounts(
    entries: Iterable[TrialBalanceEntry],
) -> list[StandardAccountBalance]:
    """Sum closing balances of mapped entries per standard account.

    Args:
        entries: Mapped and unmapped trial balance entries.

    Returns:
        list[StandardAccountBalance]: Totals ordered by standard number.
    """
    totals: dict[str, Decimal] = {}
    members: dict[str, list[TrialBalanceEntry]] = {}
    metadata: dict[str, tuple[str, str]] = {}
    for entry in entries:
        if not entry.is_mapped:
            continue
        key = entry.standard_account_id
        if key not in metadata:
            metadata[key] = (
                entry.standard_number or "",
                entry.standard_name or "",
            )
            totals[key] = Decimal("0")
            members[key] = []
        totals[key] += entry.closing_balance
        members[key].append(entry)

    balances = [
        StandardAccountBalance(
            standard_account_id=key,
            standard_number=number,
            standard_name=name,
            total_balance=totals[key],
            mapped_accounts=members[key],
        )
        for key, (number, name) in metadata.items()
    ]
    return sorted(balances, key=lambda item: item.standard_number)


def compute_mapping_stats(entries: list[TrialBalanceEntry]) -> MappingStats:
    mapped = sum(1 for entry in entries if entry.is_mapped)
    return MappingStats(
        total_accounts=len(entries),
        mapped_accounts=mapped,
        unmapped_accounts=len(entries) - mapped,
    )


def build_trial_balance_with_mappings(
    rows: list[TrialBalanceEntryRow],
    mappings: list[AccountMappingRow],
    classifications: list[AccountClassificationRow],
    standard_accounts: list[StandardAccount],
    previous_year_balances: list[PreviousYearBalanceRow],
    *,
    period_year: int,
    version: str | None,
    logger: Logger,
) -> TrialBalanceWithMappings:
    """Map trial balance rows onto standard accounts.

    Explicit mappings take precedence over classifications.

    Args:
        rows: Trial balance rows of the selected version and year.
        mappings: Explicit account mappings of the client.
        classifications: Active account classifications of the client.
        standard_accounts: Standard chart of accounts.
        previous_year_balances: Closing balances of the previous year.
        period_year: Fiscal year of the rows.
        version: Version of the rows, None when unfiltered.
        logger: Logger used for warnings.

    Returns:
        TrialBalanceWithMappings: Entries, standard totals and stats.
    """
    mapping_lookup = build_mapping_lookup(mappings, standard_accounts, logger)
    classification_lookup = build_classification_lookup(
        classifications,
        standard_accounts,
        mapped_accounts=mapping_lookup.keys(),
    )
    previous = build_previous_year_lookup(previous_year_balances)

    entries = []
    for row in rows:
        account_number = row.account_number
        standard = mapping_lookup.get(account_number) or (
            classification_lookup.get(account_number)
        )
        entries.append(
            build_entry(
                row,
                standard,
                previous.get(account_number, Decimal("0")),
            )
        )

    return TrialBalanceWithMappings(
        period_year=period_year,
        version=version,
        entries=entries,
        standard_account_balances=group_by_standard_accounts(entries),
        stats=compute_mapping_stats(entries),
    )


def get_standard_account_balance(
    balances: Iterable[StandardAccountBalance],
    standard_number: str,
) -> Decimal:
    """Return the total for a standard number, zero when absent."""
    for balance in balances:
        if balance.standard_number == standard_number:
            return balance.total_balance
    return Decimal("0")


__all__ = [
    "build_mapping_lookup",
    "build_classification_lookup",
    "build_previous_year_lookup",
    "build_entry",
    "group_by_standard_accounts",
    "compute_mapping_stats",
    "build_trial_balance_with_mappings",
    "get_standard_account_balance",
]
