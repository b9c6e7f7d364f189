# =============================================================================
# app/routers/token_settings.py - Token Shop Settings Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ConfigStoreDep, IdentityDep
from core.models.settings import SettingsWriteResponse, TokenSettings, TokenSettingsUpdate

router = APIRouter()


@router.get("", response_model=TokenSettings)
def get_token_settings(store: ConfigStoreDep):
    """Get the token packages on sale. Public; defaults when never configured."""
    return store.get_token_settings()


@router.put("", response_model=SettingsWriteResponse)
def update_token_settings(
    request: TokenSettingsUpdate,
    store: ConfigStoreDep,
    identity: IdentityDep,
):
    """
    Replace the token packages and token value. Admin only.

    Counts, prices and bonuses must not be negative; tokenValue must be
    positive.
    """
    return SettingsWriteResponse(id=store.update_token_settings(request, identity))
