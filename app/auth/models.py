# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Re-exports the identity models used by the auth layer. They live in
# core/models/actor.py so the settings store can use them without
# importing FastAPI.
# =============================================================================

from core.models.actor import ActorIdentity, ActorResponse, AuthIdentity, UserRole

__all__ = [
    "ActorIdentity",
    "ActorResponse",
    "AuthIdentity",
    "UserRole",
]
