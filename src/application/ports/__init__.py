"""Application ports package."""

from .database import DatabaseEnginePort
from .trial_balance_repository import TrialBalanceRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "TrialBalanceRepositoryPort",
]
