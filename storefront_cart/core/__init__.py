# Core modules

from .config import settings, get_settings, Settings
from .checkout_state import CheckoutState

__all__ = ["settings", "get_settings", "Settings", "CheckoutState"]
