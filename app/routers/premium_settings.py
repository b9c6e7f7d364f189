# =============================================================================
# app/routers/premium_settings.py - Premium Subscription Settings Endpoints
# =============================================================================

from typing import Optional

from fastapi import APIRouter

from app.dependencies import ConfigStoreDep, IdentityDep
from core.models.settings import PremiumSettings, PremiumSettingsUpdate, SettingsWriteResponse

router = APIRouter()


@router.get("", response_model=Optional[PremiumSettings])
def get_premium_settings(store: ConfigStoreDep):
    """Get premium settings. Public; null until configured."""
    return store.get_premium_settings()


@router.put("", response_model=SettingsWriteResponse)
def update_premium_settings(
    request: PremiumSettingsUpdate,
    store: ConfigStoreDep,
    identity: IdentityDep,
):
    """Set the monthly price and fortune allowance. Admin only."""
    return SettingsWriteResponse(id=store.update_premium_settings(request, identity))
