# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .authorization import require_admin, resolve_actor
from .config_store import (
    FORTUNE_PRICING,
    GIFT_SETTINGS,
    PREMIUM_SETTINGS,
    TOKEN_SETTINGS,
    WALLET_SETTINGS,
    ConfigStore,
    SingletonCategory,
)

__all__ = [
    "require_admin",
    "resolve_actor",
    "ConfigStore",
    "SingletonCategory",
    "FORTUNE_PRICING",
    "GIFT_SETTINGS",
    "PREMIUM_SETTINGS",
    "TOKEN_SETTINGS",
    "WALLET_SETTINGS",
]
