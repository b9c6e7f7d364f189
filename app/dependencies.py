# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# Tests swap them via app.dependency_overrides.
#
# The Supabase client is synchronous, so handlers that touch the database
# (and get_identity, which may fetch JWKS) are plain `def` and run in
# FastAPI's threadpool instead of on the event loop.
# =============================================================================

from typing import Annotated, Optional

from fastapi import Depends

from app.auth.dependencies import get_identity
from core.models.actor import AuthIdentity
from core.services.config_store import ConfigStore
from lib.supabase_client import SupabaseClient


def get_database() -> type[SupabaseClient]:
    """
    Get the database handle.

    Returns the singleton client wrapper.
    """
    return SupabaseClient


def get_config_store(db=Depends(get_database)) -> ConfigStore:
    """Settings store bound to the request's database handle."""
    return ConfigStore(db)


# Type aliases for dependency injection
ConfigStoreDep = Annotated[ConfigStore, Depends(get_config_store)]
IdentityDep = Annotated[Optional[AuthIdentity], Depends(get_identity)]
