"""Tax adjustment of primary currency prices"""

from decimal import Decimal
from typing import Optional

from ..core.config import Settings
from ..database.checkout_attributes import CheckoutAttributeDatabase
from ..engine.collaborators import TaxedPrice
from ..engine.money import Money
from ..models.attributes import CheckoutAttributeValue
from ..models.product import Product
from .currency import CurrencyService


class TaxService:
    """
    Applies tax category rates to prices.

    Rates are percentages keyed by tax category. Whether an amount gets
    tax added or removed depends on how prices are entered
    (``prices_include_tax``) and how they are shown
    (``display_prices_with_tax``).
    """

    def __init__(
        self,
        settings: Settings,
        currency_service: CurrencyService,
        checkout_attributes: CheckoutAttributeDatabase,
    ):
        self.settings = settings
        self.currency_service = currency_service
        self.checkout_attributes = checkout_attributes

    def product_price(self, product: Product, price: Money) -> TaxedPrice:
        rate = self._tax_rate(product.tax_category_id)
        return TaxedPrice(price=self._adjust(price, rate), tax_rate=rate)

    def checkout_attribute_price(self, value: CheckoutAttributeValue) -> TaxedPrice:
        attribute = self.checkout_attributes.get_attribute_of_value(value.id)
        rate = self._tax_rate(attribute.tax_category_id if attribute else None)
        price = Money(value.price_adjustment, self.currency_service.primary_currency())
        return TaxedPrice(price=self._adjust(price, rate), tax_rate=rate)

    def _tax_rate(self, tax_category_id: Optional[int]) -> Decimal:
        category_id = tax_category_id or self.settings.default_tax_category_id
        if category_id is None:
            return Decimal("0")
        return Decimal(self.settings.tax_rates.get(category_id, Decimal("0")))

    def _adjust(self, price: Money, rate: Decimal) -> Money:
        factor = 1 + rate / 100
        if self.settings.prices_include_tax and not self.settings.display_prices_with_tax:
            return Money(price.amount / factor, price.currency)
        if not self.settings.prices_include_tax and self.settings.display_prices_with_tax:
            return Money(price.amount * factor, price.currency)
        return price
