"""Database infrastructure for trial balance storage.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the PostgreSQL database holding uploaded trial balances.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    The ``.env`` file is loaded first so local runs pick it up.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a pooled SQLAlchemy engine with health checks.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with a small connection pool.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_trial_balance_engine: Optional[Engine] = None


def get_trial_balance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the trial balance database.

    Returns:
        Engine: Lazily initialized engine read from TRIAL_BALANCE_DB_URL.
    """
    global _trial_balance_engine
    if _trial_balance_engine is None:
        db_url = _get_env_var("TRIAL_BALANCE_DB_URL")
        _trial_balance_engine = _create_engine(db_url)
    return _trial_balance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine."""

    def get_trial_balance_engine(self) -> Engine:
        return get_trial_balance_engine()


__all__ = [
    "get_trial_balance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
