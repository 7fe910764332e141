"""
PostgreSQL repository adapter - Implements UserStore protocol.

This module provides the PostgreSQL implementation of the domain's
user store port using psycopg3 with raw SQL.

Uniqueness Design:
-----------------
The users table carries a UNIQUE constraint on email. insert() relies on
it rather than on any prior existence check: when two signups for the
same email race past exists(), exactly one INSERT commits and the other
raises UniqueViolation, which is converted to EmailAlreadyExists.

Timeouts:
--------
Every call checks a connection out of the pool with a bounded timeout.
Statement duration is bounded server-side by the statement_timeout the
pool sets on each connection (see src.api.main). PoolTimeout and any
other psycopg error are converted to StoreUnavailable.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import ConnectionPool, PoolTimeout

from src.domain.exceptions import EmailAlreadyExists, StoreUnavailable
from src.domain.models import User

logger = logging.getLogger(__name__)


class PostgresUserStore:
    """
    Implements UserStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool, timeout: float = 5.0) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            timeout: Seconds to wait for a pooled connection
        """
        self._pool = pool
        self._timeout = timeout

    def exists(self, email: str) -> bool:
        """
        Check for a user with exactly this email (case-sensitive).

        Raises:
            StoreUnavailable: On connection failure or timeout
        """
        sql = "SELECT 1 FROM users WHERE email = %s LIMIT 1"

        try:
            with self._pool.connection(timeout=self._timeout) as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                return cursor.fetchone() is not None
        except (PoolTimeout, psycopg.Error) as e:
            logger.error("User existence check failed for %s: %s", email, e)
            raise StoreUnavailable("User store unavailable") from e

    def insert(self, email: str, password_hash: str) -> User:
        """
        Insert a new user row; id and created_at are assigned by the database.

        Args:
            email: Email exactly as submitted
            password_hash: bcrypt hash from the password hasher

        Returns:
            The persisted User

        Raises:
            EmailAlreadyExists: UNIQUE(email) violated by a concurrent signup
            StoreUnavailable: On connection failure, timeout or other DB error
        """
        sql = """
            INSERT INTO users (email, password_hash, created_at)
            VALUES (%s, %s, NOW())
            RETURNING id, email, password_hash, created_at
        """

        try:
            with self._pool.connection(timeout=self._timeout) as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email, password_hash))
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation:
            raise EmailAlreadyExists(email) from None
        except (PoolTimeout, psycopg.Error) as e:
            logger.error("User insert failed for %s: %s", email, e)
            raise StoreUnavailable("User store unavailable") from e

        return User(id=row[0], email=row[1], password_hash=row[2], created_at=row[3])

    def get_by_email(self, email: str) -> User | None:
        """Fetch the user with exactly this email, if any."""
        sql = """
            SELECT id, email, password_hash, created_at
            FROM users
            WHERE email = %s
        """

        try:
            with self._pool.connection(timeout=self._timeout) as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except (PoolTimeout, psycopg.Error) as e:
            logger.error("User lookup failed for %s: %s", email, e)
            raise StoreUnavailable("User store unavailable") from e

        if row is None:
            return None
        return User(id=row[0], email=row[1], password_hash=row[2], created_at=row[3])

    def ping(self) -> None:
        """Round-trip to the database; raises StoreUnavailable if it fails."""
        try:
            with self._pool.connection(timeout=self._timeout) as conn:
                conn.execute("SELECT 1")
        except (PoolTimeout, psycopg.Error) as e:
            raise StoreUnavailable("User store unavailable") from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
