"""Database ports for trial balance storage.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the trial balance database."""

    def get_trial_balance_engine(self) -> Engine:
        """Get the engine for the trial balance database.

        Returns:
            Engine: SQLAlchemy engine connected to the trial balance store.
        """


__all__ = ["DatabaseEnginePort"]
