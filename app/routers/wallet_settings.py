# =============================================================================
# app/routers/wallet_settings.py - Wallet Settings Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ConfigStoreDep, IdentityDep
from core.models.settings import SettingsWriteResponse, WalletSettings, WalletSettingsUpdate

router = APIRouter()


@router.get("", response_model=WalletSettings)
def get_wallet_settings(store: ConfigStoreDep):
    """
    Get wallet settings. Public.

    Defaults: minWithdrawalAmount 25000, levelThreshold 1000000,
    maxLevel 100, level50PlusDiscount 25, recipientSharePercent 50.
    """
    return store.get_wallet_settings()


@router.put("", response_model=SettingsWriteResponse)
def update_wallet_settings(
    request: WalletSettingsUpdate,
    store: ConfigStoreDep,
    identity: IdentityDep,
):
    """
    Update wallet settings. Admin only.

    Constraints (first violation is reported as 400):
    - minWithdrawalAmount >= 0
    - levelThreshold > 0
    - 1 <= maxLevel <= 1000
    - 0 <= level50PlusDiscount <= 100
    - 0 <= recipientSharePercent <= 100 (optional field)
    """
    return SettingsWriteResponse(id=store.update_wallet_settings(request, identity))
