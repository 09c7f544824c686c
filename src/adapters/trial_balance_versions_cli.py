"""CLI adapter listing the trial balance versions of a client."""

import os

from src.domain.services.version_selection import select_best_version
from src.infrastructure.container import (
    build_list_versions_use_case,
    build_trial_balance_repository,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import VersionSelectionSettings


def main() -> None:
    """Print ranked versions and the auto-selected best one."""
    logger = get_app_logger()
    client_id = os.getenv("TB_CLIENT_ID")
    if not client_id:
        logger.warning("TB_CLIENT_ID is required to list versions.")
        return

    settings = VersionSelectionSettings.from_env()
    repository = build_trial_balance_repository()
    use_case = build_list_versions_use_case(repository, settings)
    get_usage_logger().info(f"Listing trial balance versions for {client_id}")

    ranked = use_case.execute(client_id)
    if not ranked:
        print(f"No trial balance versions for client {client_id}.")
        return

    print(f"Trial balance versions for client {client_id} (best first)")
    for summary in ranked:
        status = "empty" if summary.is_empty else "data"
        print(
            f"{summary.version} ({summary.period_year}): "
            f"score={summary.score:.2f}, "
            f"accounts={summary.accounts_with_data}/{summary.account_count}, "
            f"total_abs={summary.total_balance_abs}, "
            f"uploaded={summary.created_at:%Y-%m-%d}, {status}"
        )

    best = select_best_version(
        ranked,
        min_score=settings.min_selection_score,
    )
    if best is None:
        print("No suitable version for auto-selection.")
        return
    print(
        f"Auto-selected: {best.version} ({best.period_year}), "
        f"score={best.quality_score:.2f}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
