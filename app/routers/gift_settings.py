# =============================================================================
# app/routers/gift_settings.py - Gift Revenue Split Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ConfigStoreDep, IdentityDep
from core.models.settings import GiftSettings, GiftSettingsUpdate, SettingsWriteResponse

router = APIRouter()


@router.get("", response_model=GiftSettings)
def get_gift_settings(store: ConfigStoreDep):
    """Get the platform/creator split. Public; defaults to 70/30."""
    return store.get_gift_settings()


@router.put("", response_model=SettingsWriteResponse)
def update_gift_settings(
    request: GiftSettingsUpdate,
    store: ConfigStoreDep,
    identity: IdentityDep,
):
    """Set the split. Admin only; both shares must add up to 100."""
    return SettingsWriteResponse(id=store.update_gift_settings(request, identity))
