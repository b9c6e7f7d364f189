# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT-based caller identification using Supabase Auth.
#
# Usage:
#   from app.auth import get_identity, AuthIdentity
#
#   @router.get("/admin-only")
#   def admin_only(identity: AuthIdentity | None = Depends(get_identity)):
#       ...
# =============================================================================

from app.auth.dependencies import decode_identity, get_identity
from app.auth.models import ActorIdentity, ActorResponse, AuthIdentity, UserRole

__all__ = [
    "decode_identity",
    "get_identity",
    "ActorIdentity",
    "ActorResponse",
    "AuthIdentity",
    "UserRole",
]
