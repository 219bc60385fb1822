"""In-memory product catalog"""

from decimal import Decimal
from typing import Optional

from ..models.product import (
    AttributeCombination,
    Product,
    ProductAttributeValue,
    ProductType,
    ProductVisibility,
    RecurringPeriod,
)

# Mock product catalog
PRODUCTS: dict[int, Product] = {
    1: Product(
        id=1,
        name="Aurora ANC 700 Over-Ear Headphones",
        short_description="Adaptive noise cancelling, 40 hours of playback, foldable.",
        sku="AUR-ANC700-BLK",
        price=Decimal("349.99"),
        weight=Decimal("0.55"),
        tax_category_id=1,
        delivery_time_id=1,
        media_file_ids=[1001],
    ),
    2: Product(
        id=2,
        name="Pulse Mini Wireless Earbuds",
        short_description="Pocket sized earbuds with a charging case.",
        sku="PLS-MINI-WHT",
        price=Decimal("249.00"),
        discount_amount=Decimal("20.00"),
        weight=Decimal("0.12"),
        tax_category_id=1,
        allowed_quantities="1,2,3",
        delivery_time_id=2,
        media_file_ids=[1002],
    ),
    3: Product(
        id=3,
        name="Home Office Bundle",
        short_description="Desk lamp and keyboard, priced per item.",
        sku="BUNDLE-HOME-OFFICE",
        product_type=ProductType.BUNDLE,
        bundle_per_item_pricing=True,
        bundle_per_item_shopping_cart=True,
        tax_category_id=1,
        media_file_ids=[1003],
    ),
    4: Product(
        id=4,
        name="Ergonomic Desk Lamp",
        sku="LAMP-ERGO-BLK",
        price=Decimal("59.99"),
        weight=Decimal("1.80"),
        tax_category_id=1,
    ),
    5: Product(
        id=5,
        name="Wireless Keyboard",
        sku="KEYB-WL-GRY",
        price=Decimal("89.99"),
        discount_amount=Decimal("10.00"),
        weight=Decimal("0.70"),
        tax_category_id=1,
    ),
    6: Product(
        id=6,
        name="Custom Engraving",
        sku="SERVICE-ENGRAVE",
        call_for_price=True,
        is_shipping_enabled=False,
    ),
    7: Product(
        id=7,
        name="The Patient Gardener (Hardcover)",
        short_description="A year of small, steady work in a kitchen garden.",
        sku="BOOK-GARDEN-HC",
        price=Decimal("24.99"),
        weight=Decimal("0.90"),
        tax_category_id=2,
        quantity_unit_name="piece(s)",
        delivery_time_id=3,
        media_file_ids=[1007],
    ),
    8: Product(
        id=8,
        name="Coffee Subscription",
        sku="SUB-COFFEE-MONTHLY",
        price=Decimal("19.99"),
        weight=Decimal("0.50"),
        tax_category_id=2,
        is_recurring=True,
        recurring_cycle_length=1,
        recurring_cycle_period=RecurringPeriod.MONTHS,
    ),
    9: Product(
        id=9,
        name="Garden Tool Set",
        sku="GARDEN-TOOLS",
        product_type=ProductType.GROUPED,
        media_file_ids=[1009],
    ),
    10: Product(
        id=10,
        name="Bypass Pruning Shears",
        sku="GARDEN-SHEARS",
        visibility=ProductVisibility.HIDDEN,
        parent_grouped_product_id=9,
        price=Decimal("29.90"),
        weight=Decimal("0.30"),
        tax_category_id=1,
        delivery_time_id=2,
    ),
}

# Product variant attribute values, keyed by value id
ATTRIBUTE_VALUES: dict[int, ProductAttributeValue] = {
    11: ProductAttributeValue(id=11, attribute_id=1, attribute_name="Color", name="Black"),
    12: ProductAttributeValue(
        id=12,
        attribute_id=1,
        attribute_name="Color",
        name="Silver",
        price_adjustment=Decimal("10.00"),
        weight_adjustment=Decimal("0.05"),
    ),
    21: ProductAttributeValue(
        id=21,
        attribute_id=2,
        attribute_name="Carrying Case",
        name="Hard Shell",
        price_adjustment=Decimal("29.00"),
        weight_adjustment=Decimal("0.30"),
    ),
}

COMBINATIONS: list[AttributeCombination] = [
    AttributeCombination(
        id=1,
        product_id=1,
        attributes='[{"id":1,"values":["12"]}]',
        sku="AUR-ANC700-SLV",
        media_file_ids=[1012],
    ),
]


class ProductDatabase:
    """In-memory product database"""

    def __init__(self):
        self.products = PRODUCTS.copy()
        self.attribute_values = ATTRIBUTE_VALUES.copy()
        self.combinations = list(COMBINATIONS)

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_attribute_value(self, value_id: int) -> Optional[ProductAttributeValue]:
        """Get a product attribute value by ID"""
        return self.attribute_values.get(value_id)

    def get_combinations(self, product_id: int) -> list[AttributeCombination]:
        """Get all attribute combinations of a product"""
        return [c for c in self.combinations if c.product_id == product_id]


# Singleton instance
product_db = ProductDatabase()
