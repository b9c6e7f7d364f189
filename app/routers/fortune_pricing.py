# =============================================================================
# app/routers/fortune_pricing.py - Fortune Pricing Endpoints
# =============================================================================
# Per-fortune prices and daily free allowances.
#
# Two reads on purpose:
# - GET /fortune-pricing         admin panel, admin only
# - GET /fortune-pricing/public  price display, no auth
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ConfigStoreDep, IdentityDep
from core.models.settings import (
    FortunePricing,
    FortunePricingUpdate,
    InitializeResponse,
    SettingsWriteResponse,
)

router = APIRouter()


@router.get("", response_model=FortunePricing)
def get_fortune_pricing(store: ConfigStoreDep, identity: IdentityDep):
    """
    Get fortune pricing for the admin panel. Admin only.

    Returns the defaults (with `id: null`) until pricing is saved.
    """
    return store.get_fortune_pricing(identity)


@router.get("/public", response_model=FortunePricing)
def get_public_fortune_pricing(store: ConfigStoreDep):
    """Get fortune pricing for display. Public."""
    return store.get_public_fortune_pricing()


@router.patch("", response_model=SettingsWriteResponse)
def update_fortune_pricing(
    request: FortunePricingUpdate,
    store: ConfigStoreDep,
    identity: IdentityDep,
):
    """
    Update fortune pricing. Admin only.

    Only the fields present in the body are changed. On first write the
    remaining fields take their defaults.
    """
    return SettingsWriteResponse(id=store.update_fortune_pricing(request, identity))


@router.post("/initialize", response_model=InitializeResponse)
def initialize_fortune_pricing(store: ConfigStoreDep, identity: IdentityDep):
    """
    Seed launch pricing if none exists. Admin only.

    Leaves existing pricing untouched; `created` tells which happened.
    """
    return store.initialize_fortune_pricing(identity)
