"""SQLAlchemy-backed repository for stored trial balances."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.trial_balance_repository import (
    TrialBalanceRepositoryPort,
)
from src.domain.models import (
    AccountClassificationRow,
    AccountMappingRow,
    PreviousYearBalanceRow,
    RawBalanceRow,
    StandardAccount,
    TrialBalanceEntryRow,
)


class SqlAlchemyTrialBalanceRepository(TrialBalanceRepositoryPort):
    """Repository reading trial balances and mapping tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the trial balance engine.
        """
        self._db_port = db_port

    def fetch_version_rows(self, client_id: str) -> list[RawBalanceRow]:
        query = text(
            """
            SELECT version,
                   period_year,
                   created_at,
                   opening_balance,
                   debit_turnover,
                   credit_turnover,
                   closing_balance
            FROM trial_balances
            WHERE client_id = :client_id
            """
        )
        rows = self._fetch_all(query, {"client_id": client_id})
        return [
            RawBalanceRow(
                version=row.version,
                period_year=row.period_year,
                created_at=row.created_at,
                opening_balance=row.opening_balance,
                debit_turnover=row.debit_turnover,
                credit_turnover=row.credit_turnover,
                closing_balance=row.closing_balance,
            )
            for row in rows
        ]

    def fetch_trial_balance_rows(
        self,
        client_id: str,
        period_year: int,
        version: str | None,
    ) -> list[TrialBalanceEntryRow]:
        sql = """
            SELECT tb.id,
                   coa.account_number,
                   coa.account_name,
                   tb.opening_balance,
                   tb.debit_turnover,
                   tb.credit_turnover,
                   tb.closing_balance,
                   tb.period_end_date,
                   tb.period_year,
                   tb.version
            FROM trial_balances tb
            JOIN client_chart_of_accounts coa
              ON coa.id = tb.client_account_id
            WHERE tb.client_id = :client_id
              AND tb.period_year = :period_year
            """
        params: dict[str, object] = {
            "client_id": client_id,
            "period_year": period_year,
        }
        if version:
            sql += " AND tb.version = :version"
            params["version"] = version
        rows = self._fetch_all(text(sql), params)
        return [
            TrialBalanceEntryRow(
                id=str(row.id),
                account_number=row.account_number,
                account_name=row.account_name,
                opening_balance=row.opening_balance,
                debit_turnover=row.debit_turnover,
                credit_turnover=row.credit_turnover,
                closing_balance=row.closing_balance,
                period_end_date=row.period_end_date,
                period_year=row.period_year,
                version=row.version,
            )
            for row in rows
        ]

    def fetch_account_mappings(
        self,
        client_id: str,
    ) -> list[AccountMappingRow]:
        query = text(
            """
            SELECT account_number, statement_line_number
            FROM trial_balance_mappings
            WHERE client_id = :client_id
            """
        )
        rows = self._fetch_all(query, {"client_id": client_id})
        return [
            AccountMappingRow(
                account_number=row.account_number,
                statement_line_number=row.statement_line_number,
            )
            for row in rows
        ]

    def fetch_account_classifications(
        self,
        client_id: str,
    ) -> list[AccountClassificationRow]:
        query = text(
            """
            SELECT account_number, new_category
            FROM account_classifications
            WHERE client_id = :client_id AND is_active
            """
        )
        rows = self._fetch_all(query, {"client_id": client_id})
        return [
            AccountClassificationRow(
                account_number=row.account_number,
                new_category=row.new_category,
            )
            for row in rows
        ]

    def fetch_standard_accounts(self) -> list[StandardAccount]:
        query = text(
            """
            SELECT id,
                   standard_number,
                   standard_name,
                   category,
                   account_type,
                   analysis_group
            FROM standard_accounts
            ORDER BY standard_number
            """
        )
        rows = self._fetch_all(query, {})
        return [
            StandardAccount(
                id=str(row.id),
                standard_number=row.standard_number,
                standard_name=row.standard_name,
                category=row.category,
                account_type=row.account_type,
                analysis_group=row.analysis_group,
            )
            for row in rows
        ]

    def fetch_latest_version(
        self,
        client_id: str,
        period_year: int,
    ) -> str | None:
        query = text(
            """
            SELECT version
            FROM trial_balances
            WHERE client_id = :client_id AND period_year = :period_year
            ORDER BY created_at DESC
            LIMIT 1
            """
        )
        engine = self._db_port.get_trial_balance_engine()
        with engine.connect() as conn:
            result = conn.execute(
                query,
                {"client_id": client_id, "period_year": period_year},
            ).first()
        if not result:
            return None
        return result.version

    def fetch_previous_year_balances(
        self,
        client_id: str,
        period_year: int,
        version: str | None,
    ) -> list[PreviousYearBalanceRow]:
        sql = """
            SELECT coa.account_number, tb.closing_balance
            FROM trial_balances tb
            JOIN client_chart_of_accounts coa
              ON coa.id = tb.client_account_id
            WHERE tb.client_id = :client_id
              AND tb.period_year = :period_year
            """
        params: dict[str, object] = {
            "client_id": client_id,
            "period_year": period_year,
        }
        if version:
            sql += " AND tb.version = :version"
            params["version"] = version
        rows = self._fetch_all(text(sql), params)
        return [
            PreviousYearBalanceRow(
                account_number=row.account_number,
                closing_balance=row.closing_balance,
            )
            for row in rows
        ]

    def _fetch_all(self, query, params: dict[str, object]) -> list:
        engine = self._db_port.get_trial_balance_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()


__all__ = ["SqlAlchemyTrialBalanceRepository"]
