"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To swap a provider
(e.g., Supabase → another Postgres host), change the adapter instantiation
here. Nothing else in the codebase changes  (Open/Closed Principle).
"""

import logging
from functools import lru_cache

from fastapi import Depends
from supabase import create_client

from app.adapters.supabase_adapter import SupabaseAdapter
from app.adapters.supabase_auth_adapter import SupabaseAuthAdapter
from app.config import settings
from app.ports.auth_port import AuthPort
from app.ports.user_port import UserPort


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_supabase_client():
    # Use service role key — bypasses RLS for server-side operations
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


@lru_cache(maxsize=1)
def _get_supabase_adapter() -> SupabaseAdapter:
    return SupabaseAdapter(client=_get_supabase_client(), table=settings.users_table)


@lru_cache(maxsize=1)
def _get_auth_adapter() -> SupabaseAuthAdapter:
    return SupabaseAuthAdapter(jwt_secret=settings.supabase_jwt_secret)


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_user_store() -> UserPort:
    """Inject the user store adapter."""
    return _get_supabase_adapter()


def get_auth_provider() -> AuthPort:
    """Inject the session subject resolver."""
    return _get_auth_adapter()


def get_logger() -> logging.Logger:
    """Inject the logger used for sync diagnostics."""
    return logging.getLogger("app.services.user_service")


# ── Domain Services ───────────────────────────────────────────

from app.services.user_service import UserService  # noqa: E402


def get_user_service(
    store: UserPort = Depends(get_user_store),
    logger: logging.Logger = Depends(get_logger),
) -> UserService:
    """Injects the user store and logger into the user domain service."""
    return UserService(store=store, logger=logger)
