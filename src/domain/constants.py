"""Domain constants for trial balance version scoring."""

from decimal import Decimal

DATA_THRESHOLD = Decimal("0.01")

PRESENCE_REWARD = 100.0
DENSITY_WEIGHT = 50.0

BALANCE_THRESHOLDS = (
    (Decimal("1000"), 30.0),
    (Decimal("100000"), 20.0),
)

ACCOUNT_COUNT_RANGE = (50, 1000)
ACCOUNT_COUNT_REWARD = 10.0

RECENCY_PENALTIES = (
    (365, 20.0),
    (180, 10.0),
)

RECENCY_MODE_STACKED = "stacked"
RECENCY_MODE_TIERED = "tiered"
RECENCY_MODES = (RECENCY_MODE_STACKED, RECENCY_MODE_TIERED)

DEFAULT_MIN_SELECTION_SCORE = 50.0
DEFAULT_FISCAL_YEAR = 2024

UNKNOWN_ACCOUNT_NUMBER = "Ukjent"
UNKNOWN_ACCOUNT_NAME = "Ukjent konto"


__all__ = [
    "DATA_THRESHOLD",
    "PRESENCE_REWARD",
    "DENSITY_WEIGHT",
    "BALANCE_THRESHOLDS",
    "ACCOUNT_COUNT_RANGE",
    "ACCOUNT_COUNT_REWARD",
    "RECENCY_PENALTIES",
    "RECENCY_MODE_STACKED",
    "RECENCY_MODE_TIERED",
    "RECENCY_MODES",
    "DEFAULT_MIN_SELECTION_SCORE",
    "DEFAULT_FISCAL_YEAR",
    "UNKNOWN_ACCOUNT_NUMBER",
    "UNKNOWN_ACCOUNT_NAME",
]
