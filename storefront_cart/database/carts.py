"""Cart line item storage for the storefront cart"""

from typing import Optional

from ..models.cart import BundleItem, CartLineItem, ShoppingCartType
from .products import ProductDatabase, product_db


def _seed_items(products: ProductDatabase) -> list[CartLineItem]:
    """Sample carts: a headphone with attributes, a per-item priced bundle and a wishlist"""
    return [
        CartLineItem(
            id=1,
            customer_id=1,
            product=products.get_product(1),
            quantity=1,
            attributes='[{"id":1,"values":["12"]}]',
        ),
        # Bundle parent references itself, children reference the parent
        CartLineItem(id=2, customer_id=1, product=products.get_product(3), quantity=1, parent_item_id=2),
        CartLineItem(
            id=3,
            customer_id=1,
            product=products.get_product(4),
            quantity=1,
            parent_item_id=2,
            bundle_item=BundleItem(
                id=1,
                bundle_product_id=3,
                display_order=1,
                name="Desk Lamp (Bundle Edition)",
                per_item_pricing=True,
                per_item_shopping_cart=True,
            ),
        ),
        CartLineItem(
            id=4,
            customer_id=1,
            product=products.get_product(5),
            quantity=1,
            parent_item_id=2,
            bundle_item=BundleItem(
                id=2,
                bundle_product_id=3,
                display_order=2,
                hide_thumbnail=True,
                per_item_pricing=True,
                per_item_shopping_cart=True,
            ),
        ),
        CartLineItem(id=5, customer_id=1, product=products.get_product(2), quantity=2),
        CartLineItem(
            id=6,
            customer_id=1,
            product=products.get_product(7),
            quantity=1,
            shopping_cart_type=ShoppingCartType.WISHLIST,
        ),
        CartLineItem(id=7, customer_id=2, product=products.get_product(7), quantity=3),
    ]


class CartDatabase:
    """In-memory cart line item storage"""

    def __init__(self, products: Optional[ProductDatabase] = None):
        self.items: list[CartLineItem] = _seed_items(products or product_db)

    def get_cart_items(
        self,
        customer_id: int,
        cart_type: ShoppingCartType = ShoppingCartType.SHOPPING_CART,
    ) -> list[CartLineItem]:
        """Get a customer's line items of one cart type, in insertion order"""
        return [
            item for item in self.items
            if item.customer_id == customer_id and item.shopping_cart_type == cart_type
        ]


# Singleton instance
cart_db = CartDatabase()
