"""PostgreSQL store with transactional read-modify-write."""

import logging
from typing import Any, Iterable

import psycopg
from psycopg import errors as pg_errors

from ro_track.billing.payments import as_utc
from ro_track.config import PostgresConfig
from ro_track.exceptions import StorageError, WriteConflictError
from ro_track.models import AppSettings, Customer, Payment, PaymentStatus
from ro_track.store.base import CustomerMutator, CustomerStore

logger = logging.getLogger(__name__)

SCHEMA_SQL = [
    """
    CREATE TABLE IF NOT EXISTS customers (
        id TEXT PRIMARY KEY,
        position INTEGER NOT NULL,
        serial_number INTEGER NOT NULL UNIQUE CHECK (serial_number > 0),
        name TEXT NOT NULL,
        address TEXT NOT NULL,
        mobile TEXT NOT NULL,
        ro_model TEXT NOT NULL,
        installation_date DATE NOT NULL,
        monthly_rent INTEGER NOT NULL CHECK (monthly_rent >= 0),
        enable_monthly_reminder BOOLEAN NOT NULL DEFAULT FALSE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS payments (
        customer_id TEXT NOT NULL REFERENCES customers (id) ON DELETE CASCADE,
        year INTEGER NOT NULL,
        month INTEGER NOT NULL CHECK (month BETWEEN 0 AND 11),
        status TEXT NOT NULL CHECK (status IN ('Pending', 'Paid')),
        payment_date TIMESTAMPTZ,
        amount INTEGER,
        notes TEXT,
        PRIMARY KEY (customer_id, year, month)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS app_settings (
        id INTEGER PRIMARY KEY CHECK (id = 1),
        payment_link TEXT
    )
    """,
]

CUSTOMER_COLUMNS = (
    "id",
    "position",
    "serial_number",
    "name",
    "address",
    "mobile",
    "ro_model",
    "installation_date",
    "monthly_rent",
    "enable_monthly_reminder",
)

PAYMENT_COLUMNS = ("customer_id", "year", "month", "status", "payment_date", "amount", "notes")


def _insert_sql(table: str, columns: tuple[str, ...]) -> str:
    placeholders = ", ".join(["%s"] * len(columns))
    return f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})"  # noqa: S608


def customer_rows(customers: Iterable[Customer]) -> tuple[list[tuple], list[tuple]]:
    """Flatten customers into ``customers`` and ``payments`` table rows."""
    c_rows: list[tuple] = []
    p_rows: list[tuple] = []
    for position, c in enumerate(customers):
        c_rows.append(
            (
                c.id,
                position,
                c.serial_number,
                c.name,
                c.address,
                c.mobile,
                c.ro_model,
                c.installation_date,
                c.monthly_rent,
                c.enable_monthly_reminder,
            )
        )
        for p in c.payments:
            p_rows.append(
                (c.id, p.year, p.month, p.status.value, p.payment_date, p.amount, p.notes)
            )
    return c_rows, p_rows


def rows_to_customers(c_rows: Iterable[tuple], p_rows: Iterable[tuple]) -> list[Customer]:
    """Rebuild customers from table rows (customer rows in position order)."""
    payments: dict[str, list[Payment]] = {}
    for customer_id, year, month, status, payment_date, amount, notes in p_rows:
        payments.setdefault(customer_id, []).append(
            Payment(
                year=year,
                month=month,
                status=PaymentStatus(status),
                payment_date=as_utc(payment_date) if payment_date is not None else None,
                amount=amount,
                notes=notes,
            )
        )

    customers = []
    for row in c_rows:
        data: dict[str, Any] = dict(zip(CUSTOMER_COLUMNS, row))
        customer_payments = sorted(payments.get(data["id"], []), key=lambda p: p.key)
        customers.append(
            Customer(
                id=data["id"],
                serial_number=data["serial_number"],
                name=data["name"],
                address=data["address"],
                mobile=data["mobile"],
                ro_model=data["ro_model"],
                installation_date=data["installation_date"],
                monthly_rent=data["monthly_rent"],
                payments=customer_payments,
                enable_monthly_reminder=data["enable_monthly_reminder"],
            )
        )
    return customers


class PostgresStore(CustomerStore):
    """Customer list in PostgreSQL, replaced inside SERIALIZABLE transactions.

    Concurrent ``update_customers`` calls from other sessions surface as
    serialization failures; the update is retried from a fresh read.
    """

    def __init__(self, config: PostgresConfig | str, max_retries: int | None = None) -> None:
        """Initialize PostgreSQL store.

        Parameters
        ----------
        config : PostgresConfig | str
            Connection configuration or a connection string.
        max_retries : int | None
            Retries after a write conflict. Defaults to the config value.
        """
        if isinstance(config, str):
            conninfo = config
            retries = 3
        else:
            conninfo = config.connection_string
            retries = config.max_retries
        self.max_retries = retries if max_retries is None else max_retries

        try:
            self.conn = psycopg.connect(conninfo, autocommit=True)
        except psycopg.Error as e:
            raise StorageError(f"Cannot connect to PostgreSQL: {e}") from e
        self.conn.isolation_level = psycopg.IsolationLevel.SERIALIZABLE

    def create_schema(self) -> None:
        """Create tables if they do not exist."""
        with self.conn.transaction():
            with self.conn.cursor() as cur:
                for statement in SCHEMA_SQL:
                    cur.execute(statement)
        logger.info("PostgreSQL schema ready")

    def _read_customers(self, cur: Any) -> list[Customer]:
        cur.execute(f"SELECT {', '.join(CUSTOMER_COLUMNS)} FROM customers ORDER BY position")  # noqa: S608
        c_rows = cur.fetchall()
        cur.execute(f"SELECT {', '.join(PAYMENT_COLUMNS)} FROM payments ORDER BY customer_id, year, month")  # noqa: S608
        p_rows = cur.fetchall()
        return rows_to_customers(c_rows, p_rows)

    def _replace_customers(self, cur: Any, customers: list[Customer]) -> None:
        c_rows, p_rows = customer_rows(customers)
        # Cascade removes payments of deleted customers
        cur.execute("DELETE FROM customers")
        if c_rows:
            cur.executemany(_insert_sql("customers", CUSTOMER_COLUMNS), c_rows)
        if p_rows:
            cur.executemany(_insert_sql("payments", PAYMENT_COLUMNS), p_rows)

    def load_customers(self) -> list[Customer]:
        try:
            with self.conn.transaction():
                with self.conn.cursor() as cur:
                    return self._read_customers(cur)
        except psycopg.Error as e:
            raise StorageError(f"Failed to load customers: {e}") from e

    def save_customers(self, customers: list[Customer]) -> None:
        try:
            with self.conn.transaction():
                with self.conn.cursor() as cur:
                    self._replace_customers(cur, customers)
        except pg_errors.SerializationFailure as e:
            raise WriteConflictError(f"Customer list changed during save: {e}") from e
        except psycopg.Error as e:
            raise StorageError(f"Failed to save customers: {e}") from e
        logger.info("Saved %d customers to PostgreSQL", len(customers))

    def _update_once(self, mutator: CustomerMutator) -> list[Customer]:
        with self.conn.transaction():
            with self.conn.cursor() as cur:
                current = self._read_customers(cur)
                updated = mutator(current)
                self._replace_customers(cur, updated)
        return updated

    def update_customers(self, mutator: CustomerMutator) -> list[Customer]:
        for attempt in range(self.max_retries + 1):
            try:
                return self._update_once(mutator)
            except pg_errors.SerializationFailure:
                logger.warning(
                    "Write conflict updating customers (attempt %d/%d)",
                    attempt + 1,
                    self.max_retries + 1,
                )
            except psycopg.Error as e:
                raise StorageError(f"Failed to update customers: {e}") from e
        raise WriteConflictError(
            f"Customer update kept conflicting after {self.max_retries + 1} attempts"
        )

    def load_settings(self) -> AppSettings:
        try:
            with self.conn.transaction():
                with self.conn.cursor() as cur:
                    cur.execute("SELECT payment_link FROM app_settings WHERE id = 1")
                    row = cur.fetchone()
        except psycopg.Error as e:
            raise StorageError(f"Failed to load settings: {e}") from e
        if row is None:
            return AppSettings()
        return AppSettings(payment_link=row[0] or None)

    def save_settings(self, settings: AppSettings) -> None:
        try:
            with self.conn.transaction():
                with self.conn.cursor() as cur:
                    cur.execute(
                        "INSERT INTO app_settings (id, payment_link) VALUES (1, %s) "
                        "ON CONFLICT (id) DO UPDATE SET payment_link = EXCLUDED.payment_link",
                        (settings.payment_link,),
                    )
        except psycopg.Error as e:
            raise StorageError(f"Failed to save settings: {e}") from e

    def close(self) -> None:
        self.conn.close()
