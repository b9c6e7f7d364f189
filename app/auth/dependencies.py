# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Turns the Authorization header into an AuthIdentity (or None).
#
# Supports both:
# - ES256 (new Supabase JWT signing keys) via JWKS
# - HS256 (legacy Supabase JWT secret) as fallback
#
# A request without a token yields None; the settings store decides
# whether the operation needs an identity and raises UNAUTHENTICATED.
#
# Usage:
#   from app.auth import get_identity
#
#   @router.put("/settings/{key}")
#   def write(identity: AuthIdentity | None = Depends(get_identity)):
#       ...
# =============================================================================

import logging
import time
from typing import Any, Optional

import httpx
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.config import settings
from app.exceptions import UnauthenticatedError
from core.models.actor import AuthIdentity

logger = logging.getLogger(__name__)

# Bearer extractor that lets anonymous requests through
security_optional = HTTPBearer(auto_error=False)

# Cache for JWKS keys
_jwks_cache: dict = {}
_jwks_cache_time: float = 0


def _fetch_jwks() -> dict:
    """Fetch JWKS from Supabase with caching."""
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()

    if _jwks_cache and (current_time - _jwks_cache_time) < settings.JWKS_CACHE_TTL_SECONDS:
        return _jwks_cache

    try:
        response = httpx.get(settings.jwks_url, timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        _jwks_cache_time = current_time
        logger.debug(f"Fetched JWKS from {settings.jwks_url}")
        return _jwks_cache
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # Stale keys beat no keys
        if _jwks_cache:
            return _jwks_cache
        return {"keys": []}


def _get_signing_key(token: str) -> tuple[Any, str]:
    """
    Get the appropriate signing key for a token.

    Returns:
        Tuple of (key, algorithm) to use for verification
    """
    try:
        unverified_header = jwt.get_unverified_header(token)
    except JWTError:
        return settings.SUPABASE_JWT_SECRET, "HS256"

    alg = unverified_header.get("alg", "HS256")
    kid = unverified_header.get("kid")

    if alg == "HS256":
        return settings.SUPABASE_JWT_SECRET, "HS256"

    if kid:
        for key in _fetch_jwks().get("keys", []):
            if key.get("kid") == kid:
                return key, alg

    logger.warning(f"Could not find key for alg={alg}, kid={kid}, falling back to HS256")
    return settings.SUPABASE_JWT_SECRET, "HS256"


def decode_identity(token: str) -> AuthIdentity:
    """
    Verify a Supabase access token and extract the caller identity.

    Raises:
        UnauthenticatedError: If the token is invalid, expired, or has no subject
    """
    try:
        signing_key, algorithm = _get_signing_key(token)
        payload = jwt.decode(
            token,
            signing_key,
            algorithms=[algorithm],
            audience=settings.JWT_AUDIENCE,
        )
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise UnauthenticatedError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise UnauthenticatedError(f"Invalid token: {e}")

    subject = payload.get("sub")
    if not subject:
        logger.warning("JWT token missing 'sub' claim")
        raise UnauthenticatedError("Invalid token: missing subject")

    return AuthIdentity(token_identifier=subject, email=payload.get("email"))


def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional)
) -> Optional[AuthIdentity]:
    """
    Identity of the caller, or None for anonymous requests.

    A token that is present but invalid is rejected rather than treated
    as anonymous.

    Raises:
        UnauthenticatedError: 401 if a token is sent but fails verification
    """
    if credentials is None:
        return None

    identity = decode_identity(credentials.credentials)
    logger.debug(f"Authenticated caller: {identity.token_identifier}")
    return identity
