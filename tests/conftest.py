"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory user store
- Low-cost bcrypt hasher (keeps unit tests fast)
- Registration service wired to both
"""

import pytest

from src.adapters.hashing.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.repository.memory import InMemoryUserStore
from src.domain.registration import RegistrationService

# bcrypt's minimum cost factor; production uses settings.bcrypt_cost
FAST_ROUNDS = 4


@pytest.fixture
def store() -> InMemoryUserStore:
    """Fresh in-memory store for each test."""
    return InMemoryUserStore()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at minimum cost."""
    return BcryptPasswordHasher(rounds=FAST_ROUNDS)


@pytest.fixture
def service(store: InMemoryUserStore, hasher: BcryptPasswordHasher) -> RegistrationService:
    """Registration service over the in-memory store."""
    return RegistrationService(store=store, hasher=hasher)
