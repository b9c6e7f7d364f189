# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - actor.py: Caller identity and resolved user role
# - settings.py: Keyed and singleton settings schemas, write payloads
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Actor Models - Who is calling
# -----------------------------------------------------------------------------
from .actor import (
    ActorIdentity,
    ActorResponse,
    AuthIdentity,
    UserRole,
)

# -----------------------------------------------------------------------------
# Settings Models - Keyed and singleton settings
# -----------------------------------------------------------------------------
from .settings import (
    FORTUNE_PRICING_DEFAULTS,
    FORTUNE_PRICING_SEED,
    GIFT_SETTINGS_DEFAULTS,
    TOKEN_SETTINGS_DEFAULTS,
    WALLET_SETTINGS_DEFAULTS,
    FortunePricing,
    FortunePricingUpdate,
    GiftSettings,
    GiftSettingsUpdate,
    InitializeResponse,
    PremiumSettings,
    PremiumSettingsUpdate,
    SettingRecord,
    SettingValueResponse,
    SettingValueUpdate,
    SettingsWriteResponse,
    SingletonRecord,
    TokenPackage,
    TokenSettings,
    TokenSettingsUpdate,
    VerificationPriceResponse,
    WalletSettings,
    WalletSettingsUpdate,
)

__all__ = [
    # Actor
    "ActorIdentity",
    "ActorResponse",
    "AuthIdentity",
    "UserRole",
    # Defaults
    "FORTUNE_PRICING_DEFAULTS",
    "FORTUNE_PRICING_SEED",
    "GIFT_SETTINGS_DEFAULTS",
    "TOKEN_SETTINGS_DEFAULTS",
    "WALLET_SETTINGS_DEFAULTS",
    # Settings
    "FortunePricing",
    "FortunePricingUpdate",
    "GiftSettings",
    "GiftSettingsUpdate",
    "InitializeResponse",
    "PremiumSettings",
    "PremiumSettingsUpdate",
    "SettingRecord",
    "SettingValueResponse",
    "SettingValueUpdate",
    "SettingsWriteResponse",
    "SingletonRecord",
    "TokenPackage",
    "TokenSettings",
    "TokenSettingsUpdate",
    "VerificationPriceResponse",
    "WalletSettings",
    "WalletSettingsUpdate",
]
