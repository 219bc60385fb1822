# Storefront Cart Models

from .product import (
    Product,
    ProductType,
    ProductVisibility,
    RecurringPeriod,
    DeliveryTime,
    DeliveryTimesPresentation,
    ProductAttributeValue,
    AttributeCombination,
)
from .cart import CartLineItem, BundleItem, ShoppingCartType
from .customer import Customer, Address, Country, StateProvince, Discount
from .attributes import (
    ControlType,
    CheckoutAttributeDefinition,
    CheckoutAttributeValue,
    RawAttributeValue,
    CheckoutAttributesRequest,
    CheckoutAttributesResponse,
)
from .presentation import (
    ShoppingCartModel,
    ShoppingCartItemModel,
    WishlistModel,
    WishlistItemModel,
    MiniShoppingCartModel,
    MiniCartItemModel,
    CheckoutAttributeModel,
    EstimateShippingModel,
    EstimateShippingState,
)

__all__ = [
    "Product",
    "ProductType",
    "ProductVisibility",
    "RecurringPeriod",
    "DeliveryTime",
    "DeliveryTimesPresentation",
    "ProductAttributeValue",
    "AttributeCombination",
    "CartLineItem",
    "BundleItem",
    "ShoppingCartType",
    "Customer",
    "Address",
    "Country",
    "StateProvince",
    "Discount",
    "ControlType",
    "CheckoutAttributeDefinition",
    "CheckoutAttributeValue",
    "RawAttributeValue",
    "CheckoutAttributesRequest",
    "CheckoutAttributesResponse",
    "ShoppingCartModel",
    "ShoppingCartItemModel",
    "WishlistModel",
    "WishlistItemModel",
    "MiniShoppingCartModel",
    "MiniCartItemModel",
    "CheckoutAttributeModel",
    "EstimateShippingModel",
    "EstimateShippingState",
]
