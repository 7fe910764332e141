"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.hashing.bcrypt_hasher import BcryptPasswordHasher
from src.config.settings import get_settings
from src.domain.ports import PasswordHasher, UserStore
from src.domain.registration import RegistrationService


def get_user_store(request: Request) -> UserStore:
    """
    Get user store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.user_store


def get_password_hasher() -> PasswordHasher:
    """Create bcrypt hasher at the configured cost factor."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_cost)


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the user store and password hasher for the domain service.
    """
    store = get_user_store(request)
    hasher = get_password_hasher()
    return RegistrationService(store=store, hasher=hasher)
