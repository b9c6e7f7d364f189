# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: Signup/login is handled by Supabase Auth client-side.
# These routes report how this service sees the caller.
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_identity
from app.auth.models import ActorResponse, AuthIdentity
from app.dependencies import get_database
from app.exceptions import NotFoundError
from core.services.authorization import resolve_actor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=ActorResponse)
def get_current_actor(
    identity: Optional[AuthIdentity] = Depends(get_identity),
    db=Depends(get_database),
) -> ActorResponse:
    """
    Get the caller's role as used for settings authorization.

    Raises:
        401: If not authenticated
        404: If the token has no user row yet
    """
    actor = resolve_actor(identity, db)
    if actor is None:
        raise NotFoundError(details={"token_identifier": identity.token_identifier})

    return ActorResponse(
        id=actor.id,
        role=actor.role,
        is_super_admin=actor.is_super_admin,
        is_admin=actor.is_admin,
    )
