# =============================================================================
# core/services/config_store.py - Settings Store
# =============================================================================
# Reads and admin-gated writes for two kinds of settings:
#
# - Keyed settings: key -> string value, at most one row per key.
# - Singleton settings: one structured row per category (fortune pricing,
#   wallet, gifts, premium, token shop). Reads fall back to the category defaults;
#   writes patch the existing row or insert defaults + patch.
#
# Each scope moves Absent -> Present on its first write and stays Present.
# Nothing here deletes settings.
#
# Usage:
#   store = ConfigStore()                 # backed by SupabaseClient
#   store.get_wallet_settings()
#   store.update_wallet_settings(update, identity)
# =============================================================================

import copy
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.config import settings
from app.exceptions import BadRequestError, NotFoundError
from core.models.actor import AuthIdentity
from core.models.settings import (
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
    SingletonRecord,
    TokenSettings,
    TokenSettingsUpdate,
    WalletSettings,
    WalletSettingsUpdate,
)
from core.services.authorization import require_admin

logger = logging.getLogger(__name__)


# =============================================================================
# Validators
# =============================================================================
# Checks run in order and stop at the first failure.

def validate_wallet_settings(values: dict[str, Any]) -> None:
    """Range checks for wallet settings. Absent fields are skipped."""
    min_withdrawal = values.get("min_withdrawal_amount")
    if min_withdrawal is not None and min_withdrawal < 0:
        raise BadRequestError(
            "Minimum withdrawal amount must not be negative",
            field="minWithdrawalAmount",
        )

    threshold = values.get("level_threshold")
    if threshold is not None and threshold <= 0:
        raise BadRequestError(
            "Level threshold must be positive",
            field="levelThreshold",
        )

    max_level = values.get("max_level")
    if max_level is not None and not 1 <= max_level <= 1000:
        raise BadRequestError(
            "Max level must be between 1 and 1000",
            field="maxLevel",
        )

    discount = values.get("level50_plus_discount")
    if discount is not None and not 0 <= discount <= 100:
        raise BadRequestError(
            "Discount percentage must be between 0 and 100",
            field="level50PlusDiscount",
        )

    share = values.get("recipient_share_percent")
    if share is not None and not 0 <= share <= 100:
        raise BadRequestError(
            "Recipient share must be between 0 and 100",
            field="recipientSharePercent",
        )


def validate_gift_settings(values: dict[str, Any]) -> None:
    """Platform and creator shares must split the whole amount."""
    platform = values.get("platform_share_percentage", 0)
    creator = values.get("creator_share_percentage", 0)
    if not math.isclose(platform + creator, 100):
        raise BadRequestError(
            "Percentages must add up to 100",
            field="platformSharePercentage",
        )


def validate_premium_settings(values: dict[str, Any]) -> None:
    price = values.get("monthly_price")
    if price is not None and price < 0:
        raise BadRequestError(
            "Monthly price must not be negative",
            field="monthlyPrice",
        )


def validate_token_settings(values: dict[str, Any]) -> None:
    """Package counts and prices must not be negative; a token must be worth something."""
    for index, package in enumerate(values.get("packages", [])):
        for name in ("tokens", "price", "bonus"):
            amount = package.get(name)
            if amount is not None and amount < 0:
                raise BadRequestError(
                    f"Package {name} must not be negative",
                    field=f"packages.{index}.{name}",
                )

    token_value = values.get("token_value")
    if token_value is not None and token_value <= 0:
        raise BadRequestError(
            "Token value must be positive",
            field="tokenValue",
        )


# =============================================================================
# Singleton Categories
# =============================================================================

@dataclass(frozen=True)
class SingletonCategory:
    """
    Describes one singleton settings table.

    Attributes:
        name: Human-readable name used in logs
        table: Database table holding at most one row
        model: Pydantic model returned by reads
        defaults: Values served when the row is absent and used to fill
            unsupplied fields on first insert; None if the category has none
        validator: Called with the write payload before any database write
    """
    name: str
    table: str
    model: type[SingletonRecord]
    defaults: dict[str, Any] | None = None
    validator: Callable[[dict[str, Any]], None] | None = None


FORTUNE_PRICING = SingletonCategory(
    name="fortune pricing",
    table="fortune_pricing",
    model=FortunePricing,
    defaults=FORTUNE_PRICING_DEFAULTS,
)

WALLET_SETTINGS = SingletonCategory(
    name="wallet settings",
    table="wallet_settings",
    model=WalletSettings,
    defaults=WALLET_SETTINGS_DEFAULTS,
    validator=validate_wallet_settings,
)

GIFT_SETTINGS = SingletonCategory(
    name="gift settings",
    table="gift_settings",
    model=GiftSettings,
    defaults=GIFT_SETTINGS_DEFAULTS,
    validator=validate_gift_settings,
)

PREMIUM_SETTINGS = SingletonCategory(
    name="premium settings",
    table="premium_settings",
    model=PremiumSettings,
    validator=validate_premium_settings,
)

TOKEN_SETTINGS = SingletonCategory(
    name="token settings",
    table="token_settings",
    model=TokenSettings,
    defaults=TOKEN_SETTINGS_DEFAULTS,
    validator=validate_token_settings,
)


# =============================================================================
# Store
# =============================================================================

class ConfigStore:
    """
    Settings repository with admin-gated writes and read-through defaults.

    The database handle is passed in explicitly. It must provide the
    SupabaseClient interface (fetch_user_by_token, fetch_setting,
    list_settings, upsert_setting, fetch_singleton, insert_row, update_row).
    """

    def __init__(self, db=SupabaseClient):
        self.db = db

    # -------------------------------------------------------------------------
    # Keyed Settings
    # -------------------------------------------------------------------------

    def get_setting(self, key: str) -> str | None:
        """
        Get a keyed setting value.

        Public. Returns None if the key is unset or its value is empty.
        """
        row = self.db.fetch_setting(key)
        return (row or {}).get("value") or None

    def get_verification_price(self) -> str:
        """Public verification price; "0" when not configured."""
        return self.get_setting(settings.VERIFICATION_PRICE_KEY) or "0"

    def upsert_setting(
        self,
        key: str,
        value: str,
        identity: AuthIdentity | None,
    ) -> None:
        """
        Create a keyed setting or replace its value.

        Raises:
            UnauthenticatedError: No identity
            ForbiddenError: Caller is not an admin
        """
        actor = require_admin(identity, self.db)
        self.db.upsert_setting(key, value)
        logger.info(f"Setting '{key}' written by {actor.id}")

    def list_settings(self, identity: AuthIdentity | None) -> list[SettingRecord]:
        """All keyed settings, unordered. Admin only."""
        require_admin(identity, self.db)
        return [SettingRecord(**row) for row in self.db.list_settings()]

    # -------------------------------------------------------------------------
    # Singleton Settings
    # -------------------------------------------------------------------------

    def get_singleton(self, category: SingletonCategory) -> SingletonRecord | None:
        """
        Read a singleton category.

        Stored values win over defaults; NULL columns fall back to the
        default. Returns the defaults alone when no row exists, or None
        when the category has no defaults either.
        """
        row = self.db.fetch_singleton(category.table)

        if row is None:
            if category.defaults is None:
                return None
            logger.debug(f"No {category.name} row, serving defaults")
            return category.model(**category.defaults)

        stored = {k: v for k, v in row.items() if v is not None}
        return category.model(**{**(category.defaults or {}), **stored})

    def upsert_singleton(
        self,
        category: SingletonCategory,
        patch: dict[str, Any],
        identity: AuthIdentity | None,
        *,
        missing_user_error: bool = False,
    ) -> str:
        """
        Insert or patch the single row of a category.

        Args:
            category: The category to write
            patch: Fields to write (snake_case); absent fields keep their value
            identity: Caller identity
            missing_user_error: Report an unknown caller as NOT_FOUND

        Returns:
            Id of the inserted or patched row

        Raises:
            UnauthenticatedError, ForbiddenError, NotFoundError: Authorization failed
            BadRequestError: The category validator rejected the patch
            NotFoundError: The existing row was deleted before it could be patched
        """
        actor = require_admin(identity, self.db, missing_user_error=missing_user_error)

        if category.validator:
            category.validator(patch)

        existing = self.db.fetch_singleton(category.table)
        if existing is not None:
            return self._patch_row(category, existing, patch, actor.id)

        row = {**copy.deepcopy(category.defaults or {}), **patch}
        try:
            inserted = self.db.insert_row(category.table, row)
        except SupabaseClientError as e:
            if e.code != "UNIQUE_VIOLATION":
                raise
            # Another writer created the row first; apply our fields on top
            logger.info(f"Concurrent insert of {category.name}, retrying as patch")
            existing = self.db.fetch_singleton(category.table)
            if existing is None:
                raise
            return self._patch_row(category, existing, patch, actor.id)

        logger.info(f"Created {category.name} ({inserted['id']}) by {actor.id}")
        return str(inserted["id"])

    def _patch_row(
        self,
        category: SingletonCategory,
        existing: dict[str, Any],
        patch: dict[str, Any],
        actor_id: str,
    ) -> str:
        row_id = str(existing["id"])
        changes = {k: v for k, v in patch.items() if existing.get(k) != v}

        if not changes:
            logger.debug(f"{category.name} unchanged")
            return row_id

        updated = self.db.update_row(category.table, row_id, changes)
        if updated is None:
            # Deleted out of band between the fetch and the update
            logger.error(f"{category.name} row {row_id} vanished before update by {actor_id}")
            raise NotFoundError(
                f"{category.name.capitalize()} row no longer exists",
                details={"id": row_id},
                suggestion="Resend the request to recreate the settings",
            )

        logger.info(f"Updated {category.name} fields {sorted(changes)} by {actor_id}")
        return row_id

    # -------------------------------------------------------------------------
    # Fortune Pricing
    # -------------------------------------------------------------------------

    def get_fortune_pricing(self, identity: AuthIdentity | None) -> FortunePricing:
        """Pricing admin panel read. Admin only."""
        require_admin(identity, self.db)
        return self.get_singleton(FORTUNE_PRICING)

    def get_public_fortune_pricing(self) -> FortunePricing:
        """Price lookup for display. Public."""
        return self.get_singleton(FORTUNE_PRICING)

    def update_fortune_pricing(
        self,
        update: FortunePricingUpdate,
        identity: AuthIdentity | None,
    ) -> str:
        """Patch only the prices/allowances present in the update."""
        return self.upsert_singleton(
            FORTUNE_PRICING,
            update.model_dump(exclude_none=True),
            identity,
        )

    def initialize_fortune_pricing(self, identity: AuthIdentity | None) -> InitializeResponse:
        """
        Seed launch pricing if no pricing row exists yet.

        Never overwrites an existing row.
        """
        actor = require_admin(identity, self.db)

        existing = self.db.fetch_singleton(FORTUNE_PRICING.table)
        if existing is None:
            try:
                inserted = self.db.insert_row(FORTUNE_PRICING.table, dict(FORTUNE_PRICING_SEED))
            except SupabaseClientError as e:
                if e.code != "UNIQUE_VIOLATION":
                    raise
                existing = self.db.fetch_singleton(FORTUNE_PRICING.table)
                if existing is None:
                    raise
            else:
                logger.info(f"Seeded fortune pricing ({inserted['id']}) by {actor.id}")
                return InitializeResponse(
                    id=str(inserted["id"]),
                    created=True,
                    message="Fortune pricing created",
                )

        return InitializeResponse(
            id=str(existing["id"]),
            created=False,
            message="Fortune pricing already exists",
        )

    # -------------------------------------------------------------------------
    # Wallet Settings
    # -------------------------------------------------------------------------

    def get_wallet_settings(self) -> WalletSettings:
        return self.get_singleton(WALLET_SETTINGS)

    def update_wallet_settings(
        self,
        update: WalletSettingsUpdate,
        identity: AuthIdentity | None,
    ) -> str:
        """
        Validate and write wallet settings.

        An authenticated caller without a user row gets NOT_FOUND here
        rather than FORBIDDEN.
        """
        return self.upsert_singleton(
            WALLET_SETTINGS,
            update.model_dump(exclude_none=True),
            identity,
            missing_user_error=True,
        )

    # -------------------------------------------------------------------------
    # Gift Settings
    # -------------------------------------------------------------------------

    def get_gift_settings(self) -> GiftSettings:
        return self.get_singleton(GIFT_SETTINGS)

    def update_gift_settings(
        self,
        update: GiftSettingsUpdate,
        identity: AuthIdentity | None,
    ) -> str:
        return self.upsert_singleton(GIFT_SETTINGS, update.model_dump(), identity)

    # -------------------------------------------------------------------------
    # Premium Settings
    # -------------------------------------------------------------------------

    def get_premium_settings(self) -> PremiumSettings | None:
        """None until an admin configures premium."""
        return self.get_singleton(PREMIUM_SETTINGS)

    def update_premium_settings(
        self,
        update: PremiumSettingsUpdate,
        identity: AuthIdentity | None,
    ) -> str:
        return self.upsert_singleton(PREMIUM_SETTINGS, update.model_dump(), identity)

    # -------------------------------------------------------------------------
    # Token Settings
    # -------------------------------------------------------------------------

    def get_token_settings(self) -> TokenSettings:
        """Token shop packages. Public; defaults when absent."""
        return self.get_singleton(TOKEN_SETTINGS)

    def update_token_settings(
        self,
        update: TokenSettingsUpdate,
        identity: AuthIdentity | None,
    ) -> str:
        """Replace the package list and token value. Admin only."""
        return self.upsert_singleton(
            TOKEN_SETTINGS,
            update.model_dump(exclude_none=True),
            identity,
        )
