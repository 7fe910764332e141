"""Repository adapters - User store implementations."""

from .memory import InMemoryUserStore
from .postgres import PostgresUserStore, run_migrations

__all__ = ["InMemoryUserStore", "PostgresUserStore", "run_migrations"]
