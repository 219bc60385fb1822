"""Cart models for the storefront cart"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .product import Product


class ShoppingCartType(str, Enum):
    SHOPPING_CART = "cart"
    WISHLIST = "wishlist"


class BundleItem(BaseModel):
    """Link between a bundle child line item and its bundle product"""
    id: int
    bundle_product_id: int
    display_order: int = 0
    hide_thumbnail: bool = False
    name: Optional[str] = None
    short_description: Optional[str] = None
    per_item_pricing: bool = False
    per_item_shopping_cart: bool = False


class CartLineItem(BaseModel):
    """Line item in a shopping cart or wishlist"""
    id: int
    customer_id: int
    product: Product
    quantity: int = Field(gt=0)
    attributes: str = ""
    parent_item_id: Optional[int] = None
    bundle_item: Optional[BundleItem] = None
    shopping_cart_type: ShoppingCartType = ShoppingCartType.SHOPPING_CART
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def product_id(self) -> int:
        return self.product.id
