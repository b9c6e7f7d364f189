# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the settings models to ensure:
# - camelCase JSON and snake_case attributes both work
# - Invalid data raises ValidationError
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from uuid import uuid4

import pytest
from pydantic import ValidationError

from core.models import (
    FORTUNE_PRICING_DEFAULTS,
    FORTUNE_PRICING_SEED,
    TOKEN_SETTINGS_DEFAULTS,
    ActorIdentity,
    AuthIdentity,
    FortunePricing,
    FortunePricingUpdate,
    SettingRecord,
    TokenSettings,
    TokenSettingsUpdate,
    UserRole,
    WalletSettings,
    WalletSettingsUpdate,
)


# =============================================================================
# Actor Model Tests
# =============================================================================

class TestActorIdentity:

    def test_admin_role(self):
        actor = ActorIdentity(id="u1", token_identifier="t", role="admin")
        assert actor.role == UserRole.ADMIN
        assert actor.is_admin

    def test_missing_role_is_not_admin(self):
        actor = ActorIdentity(id="u1", token_identifier="t")
        assert actor.role is None
        assert not actor.is_admin

    def test_null_super_admin_flag(self):
        actor = ActorIdentity(id="u1", token_identifier="t", role="user", is_super_admin=None)
        assert actor.is_super_admin is False

    def test_unknown_role_is_kept_but_not_admin(self):
        actor = ActorIdentity(id="u1", token_identifier="t", role="moderator")
        assert actor.role == "moderator"
        assert not actor.is_admin

    def test_super_admin_with_unknown_role(self):
        actor = ActorIdentity(id="u1", token_identifier="t", role="owner", is_super_admin=True)
        assert actor.is_admin

    def test_uuid_id_is_stringified(self):
        user_id = uuid4()
        actor = ActorIdentity(id=user_id, token_identifier="t")
        assert actor.id == str(user_id)


class TestAuthIdentity:

    def test_empty_token_rejected(self):
        with pytest.raises(ValidationError):
            AuthIdentity(token_identifier="")


# =============================================================================
# Settings Model Tests
# =============================================================================

class TestSettingRecord:

    def test_from_row(self):
        record = SettingRecord(id=7, key="verification_price", value="4999")
        assert record.id == "7"
        assert record.value == "4999"


class TestFortunePricing:

    def test_serializes_camel_case(self):
        pricing = FortunePricing(**FORTUNE_PRICING_DEFAULTS)
        data = pricing.model_dump(by_alias=True)

        assert data["coffeeFortunePricePerFortune"] == 1000
        assert data["dailyFreeBirthchart"] == 0
        assert data["id"] is None

    def test_seed_differs_only_in_free_palm_and_aura(self):
        changed = {k for k in FORTUNE_PRICING_DEFAULTS if FORTUNE_PRICING_DEFAULTS[k] != FORTUNE_PRICING_SEED[k]}
        assert changed == {"daily_free_palm", "daily_free_aura"}

    def test_update_accepts_camel_case(self):
        update = FortunePricingUpdate.model_validate({"dailyFreeCoffee": 2})
        assert update.model_dump(exclude_none=True) == {"daily_free_coffee": 2}

    def test_update_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            FortunePricingUpdate(coffee_fortune_price_per_fortune=-1)


class TestWalletSettings:

    def test_update_accepts_camel_case(self):
        update = WalletSettingsUpdate.model_validate({
            "minWithdrawalAmount": 30000,
            "levelThreshold": 1000000,
            "maxLevel": 100,
            "level50PlusDiscount": 25,
        })

        assert update.min_withdrawal_amount == 30000
        assert update.recipient_share_percent is None

    def test_update_requires_core_fields(self):
        with pytest.raises(ValidationError):
            WalletSettingsUpdate.model_validate({"minWithdrawalAmount": 30000})

    def test_out_of_range_values_reach_the_service(self):
        # Range checks are the service's job, not the model's
        update = WalletSettingsUpdate(
            min_withdrawal_amount=-1,
            level_threshold=0,
            max_level=5000,
            level50_plus_discount=200,
        )
        assert update.max_level == 5000

    def test_wire_names(self):
        wallet = WalletSettings(
            min_withdrawal_amount=25000,
            level_threshold=1000000,
            max_level=100,
            level50_plus_discount=25,
            recipient_share_percent=50,
        )
        assert set(wallet.model_dump(by_alias=True)) == {
            "id",
            "minWithdrawalAmount",
            "levelThreshold",
            "maxLevel",
            "level50PlusDiscount",
            "recipientSharePercent",
        }


class TestTokenSettings:

    def test_defaults_build_four_packages(self):
        tokens = TokenSettings(**TOKEN_SETTINGS_DEFAULTS)

        assert [p.tokens for p in tokens.packages] == [10, 25, 50, 100]
        assert tokens.token_value == 1000

    def test_update_accepts_camel_case(self):
        update = TokenSettingsUpdate.model_validate({
            "packages": [{"tokens": 5, "price": 5000}],
            "tokenValue": 900,
        })

        assert update.token_value == 900
        assert update.model_dump(exclude_none=True) == {
            "packages": [{"tokens": 5, "price": 5000}],
            "token_value": 900,
        }

    def test_update_requires_token_value(self):
        with pytest.raises(ValidationError):
            TokenSettingsUpdate.model_validate({"packages": []})
