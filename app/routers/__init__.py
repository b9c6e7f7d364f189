# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by settings category:
# - health.py: Health check endpoints
# - settings.py: Keyed settings (key -> value), verification price
# - fortune_pricing.py: Fortune prices and daily free allowances
# - wallet_settings.py: Withdrawal and gift level parameters
# - gift_settings.py: Gift revenue split
# - premium_settings.py: Premium subscription configuration
# - token_settings.py: Token shop packages and token value
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import settings
from . import fortune_pricing
from . import wallet_settings
from . import gift_settings
from . import premium_settings
from . import token_settings

__all__ = [
    "health",
    "settings",
    "fortune_pricing",
    "wallet_settings",
    "gift_settings",
    "premium_settings",
    "token_settings",
]
