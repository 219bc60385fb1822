"""Checkout state passed explicitly into cart model preparation"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CheckoutState:
    """
    Typed checkout state.

    Produced by the checkout flow and handed to the aggregator as a
    parameter. Flags left as None keep the related order review options
    at their defaults.
    """
    has_only_one_active_shipping_method: Optional[bool] = None
    has_only_one_active_payment_method: Optional[bool] = None
    is_payment_selection_skipped: bool = False
    payment_summary: Optional[str] = None
