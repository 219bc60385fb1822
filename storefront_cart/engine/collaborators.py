"""
Collaborator interfaces consumed by the engine.

The engine never talks to storage, tax tables or exchange rates directly;
everything it needs arrives through these narrow protocols.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..models.attributes import CheckoutAttributeDefinition, CheckoutAttributeValue
from ..models.customer import Country, Customer, Discount, StateProvince
from ..models.product import AttributeCombination, DeliveryTime, Product, ProductAttributeValue
from .money import Currency, Money
from .selection import AttributeSelection
from .tree import ResolvedCartItem


@dataclass(frozen=True)
class TaxedPrice:
    """Price after tax adjustment and the rate that was applied"""
    price: Money
    tax_rate: Decimal


@dataclass
class ValidationResult:
    is_valid: bool
    warnings: list[str] = field(default_factory=list)


class PricingCollaborator(Protocol):
    def unit_price(self, item: ResolvedCartItem, include_discounts: bool) -> Money: ...

    def subtotal(self, item: ResolvedCartItem, include_discounts: bool) -> Money: ...

    def final_price(self, product: Product) -> Money: ...

    def reward_points_to_amount(self, points: int) -> Money: ...

    def base_price_info(
        self, product: Product, currency: Currency, price_adjustment: Decimal
    ) -> Optional[str]: ...


class TaxCollaborator(Protocol):
    def product_price(self, product: Product, price: Money) -> TaxedPrice: ...

    def checkout_attribute_price(self, value: CheckoutAttributeValue) -> TaxedPrice: ...


class CurrencyCollaborator(Protocol):
    def primary_currency(self) -> Currency: ...

    def convert_from_primary(self, amount: Decimal, target: Currency) -> Money: ...

    def convert_to_primary(self, money: Money) -> Money: ...


class ValidationCollaborator(Protocol):
    def validate(
        self,
        items: Sequence[ResolvedCartItem],
        validate_checkout_attributes: bool = False,
        checkout_attributes: Optional[AttributeSelection] = None,
    ) -> ValidationResult: ...


class AttributeMaterializer(Protocol):
    def merge_combination(self, product: Product, selection: AttributeSelection) -> Product: ...

    def materialize_values(self, selection: AttributeSelection) -> list[ProductAttributeValue]: ...

    def find_combination(
        self, product_id: int, selection: AttributeSelection
    ) -> Optional[AttributeCombination]: ...


class CheckoutAttributeProvider(Protocol):
    def valid_attributes_for(
        self, cart: Sequence[ResolvedCartItem]
    ) -> list[CheckoutAttributeDefinition]: ...


class CustomerStore(Protocol):
    def save_checkout_attributes(self, customer_id: int, encoded: str) -> Customer: ...


class DiscountCollaborator(Protocol):
    def find_by_coupon_code(self, coupon_code: str) -> Optional[Discount]: ...

    def is_valid(self, discount: Discount, customer: Customer) -> bool: ...


class ShippingCatalog(Protocol):
    def countries_for_shipping(self) -> list[Country]: ...

    def states_for(self, country_id: int) -> list[StateProvince]: ...


class Localizer(Protocol):
    def get_resource(self, key: str, *args) -> str: ...


class ProductCatalog(Protocol):
    def get_product(self, product_id: int) -> Optional[Product]: ...

    def get_delivery_time(self, delivery_time_id: Optional[int]) -> Optional[DeliveryTime]: ...

    def formatted_delivery_date(self, delivery_time: DeliveryTime) -> Optional[str]: ...
