"""CLI adapter printing a trial balance grouped by standard account."""

import os

from src.infrastructure.container import (
    build_trial_balance_with_mappings_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_year(value: str | None, logger) -> int | None:
    """Parse a fiscal year.

    Args:
        value: Year string such as 2024.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed year or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid fiscal year '{value}'. Expected YYYY.")
        return None


def main() -> None:
    """Run the mapped trial balance use case and print totals."""
    logger = get_app_logger()
    client_id = os.getenv("TB_CLIENT_ID")
    if not client_id:
        logger.warning("TB_CLIENT_ID is required to load a trial balance.")
        return

    fiscal_year = _parse_year(os.getenv("TB_FISCAL_YEAR"), logger)
    version = os.getenv("TB_VERSION") or None
    get_usage_logger().info(f"Loading mapped trial balance for {client_id}")

    use_case = build_trial_balance_with_mappings_use_case()
    result = use_case.execute(
        client_id,
        fiscal_year=fiscal_year,
        version=version,
    )

    print(
        f"Trial balance for client {client_id} "
        f"(year={result.period_year}, version={result.version})"
    )
    for balance in result.standard_account_balances:
        print(
            f"{balance.standard_number} {balance.standard_name}: "
            f"{balance.total_balance} "
            f"({len(balance.mapped_accounts)} accounts)"
        )
    print(
        f"Accounts: total={result.stats.total_accounts}, "
        f"mapped={result.stats.mapped_accounts}, "
        f"unmapped={result.stats.unmapped_accounts}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
