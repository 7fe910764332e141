"""
In-memory user store adapter - Implements UserStore protocol.

Process-local store for development and tests. A single lock guards
the check-and-insert so uniqueness holds under concurrent inserts, the
same guarantee the PostgreSQL UNIQUE constraint gives.
"""

import itertools
import threading
from datetime import datetime, timezone

from src.domain.exceptions import EmailAlreadyExists
from src.domain.models import User


class InMemoryUserStore:
    """
    Implements UserStore protocol with a dict keyed by exact email.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._ids = itertools.count(1)

    def exists(self, email: str) -> bool:
        with self._lock:
            return email in self._users

    def insert(self, email: str, password_hash: str) -> User:
        with self._lock:
            if email in self._users:
                raise EmailAlreadyExists(email)
            user = User(
                id=next(self._ids),
                email=email,
                password_hash=password_hash,
                created_at=datetime.now(timezone.utc),
            )
            self._users[email] = user
            return user

    def get_by_email(self, email: str) -> User | None:
        with self._lock:
            return self._users.get(email)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def ping(self) -> None:
        return None
