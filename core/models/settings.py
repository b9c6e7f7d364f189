# =============================================================================
# core/models/settings.py - Settings Schemas
# =============================================================================
# These models define the API contract for settings operations:
# - SettingRecord: one keyed setting (key -> string value)
# - FortunePricing / WalletSettings / GiftSettings / PremiumSettings /
#   TokenSettings: singleton records, at most one row per category
# - *Update: write payloads for each singleton category
#
# Python attributes and database columns are snake_case; JSON bodies use
# camelCase aliases (minWithdrawalAmount, dailyFreeCoffee, ...).
# Prices and amounts are integer minor units (kuruş).
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase while accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SingletonRecord(CamelModel):
    """Common shape of singleton settings: an optional row id plus fields."""

    # None when the values are defaults and no row exists yet
    id: str | None = Field(
        default=None,
        description="Row id, or null when defaults are being served"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value


# =============================================================================
# Keyed Settings
# =============================================================================

class SettingRecord(CamelModel):
    """
    A keyed setting row.

    Example:
        {"id": "b1f0...", "key": "verification_price", "value": "4999"}
    """

    id: str | None = None
    key: str = Field(..., min_length=1)
    value: str

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value


class SettingValueUpdate(CamelModel):
    """Body of PUT /settings/{key}."""
    value: str


class SettingValueResponse(CamelModel):
    """Body of GET /settings/{key}; value is null when unset."""
    key: str
    value: str | None = None


class VerificationPriceResponse(CamelModel):
    """Body of GET /settings/verification-price."""
    price: str


# =============================================================================
# Fortune Pricing
# =============================================================================

FORTUNE_PRICING_DEFAULTS: dict[str, int] = {
    "coffee_fortune_price_per_fortune": 1000,
    "tarot_fortune_price_per_fortune": 1500,
    "palm_fortune_price_per_fortune": 2000,
    "birthchart_fortune_price_per_fortune": 2500,
    "aura_fortune_price_per_fortune": 2000,
    "daily_free_coffee": 1,
    "daily_free_tarot": 1,
    "daily_free_palm": 0,
    "daily_free_birthchart": 0,
    "daily_free_aura": 0,
}

# Launch pricing seeded by POST /fortune-pricing/initialize
FORTUNE_PRICING_SEED: dict[str, int] = {
    **FORTUNE_PRICING_DEFAULTS,
    "daily_free_palm": 1,
    "daily_free_aura": 1,
}


class FortunePricing(SingletonRecord):
    """Per-fortune prices and daily free allowances."""

    coffee_fortune_price_per_fortune: int
    tarot_fortune_price_per_fortune: int
    palm_fortune_price_per_fortune: int
    birthchart_fortune_price_per_fortune: int
    aura_fortune_price_per_fortune: int
    daily_free_coffee: int
    daily_free_tarot: int
    daily_free_palm: int
    daily_free_birthchart: int
    daily_free_aura: int


class FortunePricingUpdate(CamelModel):
    """
    Partial update of fortune pricing.

    Only the fields present in the request are written.

    Example:
        {"dailyFreeCoffee": 2}
    """

    coffee_fortune_price_per_fortune: int | None = Field(default=None, ge=0)
    tarot_fortune_price_per_fortune: int | None = Field(default=None, ge=0)
    palm_fortune_price_per_fortune: int | None = Field(default=None, ge=0)
    birthchart_fortune_price_per_fortune: int | None = Field(default=None, ge=0)
    aura_fortune_price_per_fortune: int | None = Field(default=None, ge=0)
    daily_free_coffee: int | None = Field(default=None, ge=0)
    daily_free_tarot: int | None = Field(default=None, ge=0)
    daily_free_palm: int | None = Field(default=None, ge=0)
    daily_free_birthchart: int | None = Field(default=None, ge=0)
    daily_free_aura: int | None = Field(default=None, ge=0)


# =============================================================================
# Wallet Settings
# =============================================================================

WALLET_SETTINGS_DEFAULTS: dict[str, int | float] = {
    "min_withdrawal_amount": 25000,       # 250 TL
    "level_threshold": 1000000,           # 10,000 TL per level
    "max_level": 100,
    "level50_plus_discount": 25,
    "recipient_share_percent": 50,
}


class WalletSettings(SingletonRecord):
    """Withdrawal limits and gift level parameters."""

    min_withdrawal_amount: int
    level_threshold: int
    max_level: int
    level50_plus_discount: float
    recipient_share_percent: float


class WalletSettingsUpdate(CamelModel):
    """
    Wallet settings write.

    Range checks run in the service so that failures surface as
    BAD_REQUEST with the violated constraint, one at a time.
    """

    min_withdrawal_amount: int
    level_threshold: int
    max_level: int
    level50_plus_discount: float
    recipient_share_percent: float | None = None


# =============================================================================
# Gift Settings
# =============================================================================

GIFT_SETTINGS_DEFAULTS: dict[str, float] = {
    "platform_share_percentage": 70,
    "creator_share_percentage": 30,
}


class GiftSettings(SingletonRecord):
    """Revenue split of paid gifts between platform and creator."""

    platform_share_percentage: float
    creator_share_percentage: float


class GiftSettingsUpdate(CamelModel):
    """Both shares are required and must add up to 100."""

    platform_share_percentage: float
    creator_share_percentage: float


# =============================================================================
# Premium Settings
# =============================================================================

class PremiumSettings(SingletonRecord):
    """Premium subscription configuration. Has no defaults."""

    monthly_price: int
    unlimited_fortunes: bool


class PremiumSettingsUpdate(CamelModel):
    monthly_price: int
    unlimited_fortunes: bool


# =============================================================================
# Token Settings
# =============================================================================

# Packages offered in the token shop; prices in kuruş
TOKEN_SETTINGS_DEFAULTS: dict[str, Any] = {
    "packages": [
        {"tokens": 10, "price": 10000, "bonus": 0},
        {"tokens": 25, "price": 24000, "bonus": 1},
        {"tokens": 50, "price": 45000, "bonus": 5},
        {"tokens": 100, "price": 85000, "bonus": 15},
    ],
    "token_value": 1000,
}


class TokenPackage(CamelModel):
    """
    One purchasable token package.

    Example:
        {"tokens": 25, "price": 24000, "bonus": 1}
    """

    tokens: int = Field(..., description="Tokens in the package")
    price: int = Field(..., description="Package price in kuruş")
    bonus: int | None = Field(default=None, description="Extra tokens granted on purchase")


class TokenSettings(SingletonRecord):
    """Token shop packages and the display value of a single token."""

    packages: list[TokenPackage]
    token_value: int = Field(..., description="Worth of one token in kuruş")


class TokenSettingsUpdate(CamelModel):
    """Replaces the package list and token value together."""

    packages: list[TokenPackage]
    token_value: int


# =============================================================================
# Write Responses
# =============================================================================

class SettingsWriteResponse(CamelModel):
    """Returned by singleton writes: the id of the inserted or patched row."""
    id: str


class InitializeResponse(CamelModel):
    """Returned by POST /fortune-pricing/initialize."""
    id: str
    created: bool
    message: str
