# =============================================================================
# app/routers/settings.py - Keyed Settings Endpoints
# =============================================================================
# key -> string value settings (e.g. verification_price).
# Reads are public; listing and writing require an admin.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import ConfigStoreDep, IdentityDep
from core.models.settings import (
    SettingRecord,
    SettingValueResponse,
    SettingValueUpdate,
    VerificationPriceResponse,
)

router = APIRouter()

SettingKey = Annotated[str, Path(min_length=1, max_length=255, description="Setting key")]


# Declared before /{key} so it isn't captured as a key
@router.get("/verification-price", response_model=VerificationPriceResponse)
def get_verification_price(store: ConfigStoreDep):
    """
    Get the profile verification price.

    Public. Returns "0" when no price has been configured.
    """
    return VerificationPriceResponse(price=store.get_verification_price())


@router.get("", response_model=list[SettingRecord])
def list_settings(store: ConfigStoreDep, identity: IdentityDep):
    """
    List every keyed setting. Admin only.

    Not paginated; order is unspecified.
    """
    return store.list_settings(identity)


@router.get("/{key}", response_model=SettingValueResponse)
def get_setting(key: SettingKey, store: ConfigStoreDep):
    """
    Get a keyed setting.

    Public. `value` is null when the key is unset.
    """
    return SettingValueResponse(key=key, value=store.get_setting(key))


@router.put("/{key}", status_code=204)
def upsert_setting(
    key: SettingKey,
    request: SettingValueUpdate,
    store: ConfigStoreDep,
    identity: IdentityDep,
):
    """
    Create a keyed setting or replace its value. Admin only.
    """
    store.upsert_setting(key, request.value, identity)
