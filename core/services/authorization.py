# =============================================================================
# core/services/authorization.py - Admin Capability Check
# =============================================================================
# Every mutating settings operation (and the admin pricing read) starts with
# require_admin(). Keeping the predicate here means all categories agree on
# who counts as an admin: role == "admin" or is_super_admin.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient
from core.models.actor import ActorIdentity, AuthIdentity
from app.exceptions import ForbiddenError, NotFoundError, UnauthenticatedError

logger = logging.getLogger(__name__)


def resolve_actor(
    identity: AuthIdentity | None,
    db=SupabaseClient,
) -> ActorIdentity | None:
    """
    Map an authenticated identity to its user row.

    Args:
        identity: Identity from the access token, or None for anonymous calls
        db: Database handle exposing fetch_user_by_token()

    Returns:
        ActorIdentity, or None if no user row matches the token

    Raises:
        UnauthenticatedError: If identity is None (no database access happens)
    """
    if identity is None:
        raise UnauthenticatedError()

    row = db.fetch_user_by_token(identity.token_identifier)
    if row is None:
        return None

    return ActorIdentity(**row)


def require_admin(
    identity: AuthIdentity | None,
    db=SupabaseClient,
    *,
    missing_user_error: bool = False,
) -> ActorIdentity:
    """
    Resolve the caller and check that it may manage settings.

    Args:
        identity: Identity from the access token
        db: Database handle exposing fetch_user_by_token()
        missing_user_error: Report an unknown user as NOT_FOUND instead of FORBIDDEN

    Returns:
        The admin ActorIdentity

    Raises:
        UnauthenticatedError: No identity
        NotFoundError: Unknown user and missing_user_error is set
        ForbiddenError: Unknown user, or user is neither admin nor super admin
    """
    actor = resolve_actor(identity, db)

    if actor is None:
        logger.warning(f"No user row for token {identity.token_identifier}")
        if missing_user_error:
            raise NotFoundError(details={"token_identifier": identity.token_identifier})
        raise ForbiddenError()

    if not actor.is_admin:
        logger.warning(f"User {actor.id} (role={actor.role}) attempted an admin settings operation")
        raise ForbiddenError()

    return actor
