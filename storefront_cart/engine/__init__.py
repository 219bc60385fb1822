# Cart resolution and pricing composition engine

from .selection import AttributeSelection, encode, decode
from .control_types import get_handler, ControlTypeHandler
from .checkout_attributes import (
    CheckoutAttributeResolver,
    CheckoutAttributePresenter,
    format_checkout_attributes,
)
from .tree import CartItemTreeBuilder, ResolvedCartItem
from .money import Currency, Money, format_money
from .pricing import PriceComposer, PriceBreakdown
from .shipping import EstimateShippingBuilder
from .aggregator import CartAggregator, ShoppingCartRequest
from .collaborators import TaxedPrice, ValidationResult
from .errors import CartResolutionError, UnknownCustomerError, UnknownCurrencyError

__all__ = [
    "AttributeSelection",
    "encode",
    "decode",
    "get_handler",
    "ControlTypeHandler",
    "CheckoutAttributeResolver",
    "CheckoutAttributePresenter",
    "format_checkout_attributes",
    "CartItemTreeBuilder",
    "ResolvedCartItem",
    "Currency",
    "Money",
    "format_money",
    "PriceComposer",
    "PriceBreakdown",
    "EstimateShippingBuilder",
    "CartAggregator",
    "ShoppingCartRequest",
    "TaxedPrice",
    "ValidationResult",
    "CartResolutionError",
    "UnknownCustomerError",
    "UnknownCurrencyError",
]
