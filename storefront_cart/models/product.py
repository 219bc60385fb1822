"""Product models for the storefront cart"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductVisibility(str, Enum):
    FULL = "full"
    SEARCH_RESULTS = "search_results"
    PRODUCT_PAGE = "product_page"
    HIDDEN = "hidden"


class ProductType(str, Enum):
    SIMPLE = "simple"
    GROUPED = "grouped"
    BUNDLE = "bundle"


class RecurringPeriod(str, Enum):
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class DeliveryTimesPresentation(str, Enum):
    """How delivery times are shown in the shopping cart"""
    NONE = "none"
    LABEL_ONLY = "label_only"
    DATE_ONLY = "date_only"
    LABEL_AND_DATE = "label_and_date"


class DeliveryTime(BaseModel):
    """Delivery time a product can be assigned to, e.g. "2-3 days" """
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    color_hex_value: Optional[str] = None
    min_days: Optional[int] = Field(default=None, ge=0)
    max_days: Optional[int] = Field(default=None, ge=0)
    display_order: int = 0


class Product(BaseModel):
    """Product referenced by a cart line item"""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    sku: Optional[str] = None
    short_description: Optional[str] = None
    product_type: ProductType = ProductType.SIMPLE
    visibility: ProductVisibility = ProductVisibility.FULL
    parent_grouped_product_id: int = 0

    # Pricing, all amounts in primary currency
    price: Decimal = Field(default=Decimal("0"), ge=0)
    discount_amount: Decimal = Field(default=Decimal("0"), ge=0)
    call_for_price: bool = False
    tax_category_id: Optional[int] = None
    base_price_enabled: bool = False
    base_price_measure_unit: Optional[str] = None
    base_price_amount: Optional[Decimal] = None
    base_price_base_amount: Optional[int] = None

    # Bundle configuration (for bundle products)
    bundle_per_item_pricing: bool = False
    bundle_per_item_shopping_cart: bool = False

    # Shipping and fulfilment
    weight: Decimal = Decimal("0")
    is_shipping_enabled: bool = True
    delivery_time_id: Optional[int] = None
    is_download: bool = False
    is_esd: bool = False
    has_user_agreement: bool = False
    is_recurring: bool = False
    recurring_cycle_length: int = 0
    recurring_cycle_period: RecurringPeriod = RecurringPeriod.DAYS

    # Quantities
    order_minimum_quantity: int = 1
    order_maximum_quantity: int = 10000
    quantity_step: int = 1
    allowed_quantities: Optional[str] = None
    quantity_unit_name: Optional[str] = None
    stock_quantity: int = Field(default=10000, ge=0)
    published: bool = True

    disable_buy_button: bool = False
    disable_wishlist_button: bool = False

    media_file_ids: list[int] = []

    def parse_allowed_quantities(self) -> list[int]:
        """Parse the comma separated allowed quantities, skipping junk"""
        result = []
        for token in (self.allowed_quantities or "").split(","):
            token = token.strip()
            if token.isdigit() and int(token) > 0:
                result.append(int(token))
        return result


class ProductAttributeValue(BaseModel):
    """A materialized product variant attribute value"""
    id: int
    attribute_id: int
    attribute_name: str
    name: str
    price_adjustment: Decimal = Decimal("0")
    weight_adjustment: Decimal = Decimal("0")


class AttributeCombination(BaseModel):
    """Product variant attribute combination with overriding data"""
    id: int
    product_id: int
    attributes: str = ""
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    weight: Optional[Decimal] = None
    media_file_ids: list[int] = []
