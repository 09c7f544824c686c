"""Settings helpers for trial balance version selection."""

from dataclasses import dataclass
import os

from src.domain.constants import (
    DEFAULT_FISCAL_YEAR,
    DEFAULT_MIN_SELECTION_SCORE,
    RECENCY_MODE_STACKED,
    RECENCY_MODES,
)


@dataclass(frozen=True)
class VersionSelectionSettings:
    """Settings for scoring and auto-selecting trial balance versions.

    Attributes:
        min_selection_score: Exclusive score a version must exceed to be
            auto-selected.
        recency_mode: Recency penalty mode (stacked or tiered).
        default_fiscal_year: Year used when no version qualifies and the
            caller gave none.
    """

    min_selection_score: float = DEFAULT_MIN_SELECTION_SCORE
    recency_mode: str = RECENCY_MODE_STACKED
    default_fiscal_year: int = DEFAULT_FISCAL_YEAR

    @classmethod
    def from_env(cls) -> "VersionSelectionSettings":
        """Build settings from environment variables.

        Returns:
            VersionSelectionSettings: Settings sourced from the environment.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        recency_mode = (
            os.getenv("TB_RECENCY_PENALTY_MODE", RECENCY_MODE_STACKED)
            .strip()
            .lower()
        )
        if recency_mode not in RECENCY_MODES:
            raise ValueError(
                f"Unsupported TB_RECENCY_PENALTY_MODE: {recency_mode}. "
                f"Expected one of {', '.join(RECENCY_MODES)}."
            )
        return cls(
            min_selection_score=cls._read_number(
                "TB_MIN_SELECTION_SCORE",
                DEFAULT_MIN_SELECTION_SCORE,
                float,
            ),
            recency_mode=recency_mode,
            default_fiscal_year=cls._read_number(
                "TB_DEFAULT_FISCAL_YEAR",
                DEFAULT_FISCAL_YEAR,
                int,
            ),
        )

    @staticmethod
    def _read_number(name: str, default, cast):
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return cast(raw.strip())
        except ValueError as exc:
            raise ValueError(f"Invalid value for {name}: {raw}") from exc


__all__ = ["VersionSelectionSettings"]
