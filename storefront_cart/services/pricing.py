"""Product and cart item price calculation"""

from decimal import Decimal
from typing import Optional

from ..core.config import Settings
from ..engine.money import Currency, Money
from ..engine.selection import decode
from ..engine.tree import ResolvedCartItem
from ..models.product import Product, ProductType
from .attributes import ProductAttributeMaterializer
from .currency import CurrencyService
from .tax import TaxService


class PriceCalculationService:
    """
    Calculates untaxed primary currency prices of cart items.

    The unit price of a simple item is the product price (or the price of a
    matching attribute combination) plus the price adjustments of the
    selected attribute values. Bundles priced per item cost the sum of
    their child items.
    """

    def __init__(
        self,
        settings: Settings,
        currency_service: CurrencyService,
        tax_service: TaxService,
        materializer: ProductAttributeMaterializer,
    ):
        self.settings = settings
        self.currency_service = currency_service
        self.tax_service = tax_service
        self.materializer = materializer

    def unit_price(self, item: ResolvedCartItem, include_discounts: bool) -> Money:
        product = item.item.product
        primary = self.currency_service.primary_currency()

        if product.product_type == ProductType.BUNDLE and product.bundle_per_item_pricing:
            amount = sum(
                (self.subtotal(child, include_discounts).amount for child in item.children),
                Decimal("0"),
            )
            return Money(amount, primary)

        selection = decode(item.item.attributes)
        merged = self.materializer.merge_combination(product, selection)
        amount = merged.price + sum(
            (value.price_adjustment for value in self.materializer.materialize_values(selection)),
            Decimal("0"),
        )
        if include_discounts:
            amount = max(amount - product.discount_amount, Decimal("0"))

        return Money(amount, primary)

    def subtotal(self, item: ResolvedCartItem, include_discounts: bool) -> Money:
        return self.unit_price(item, include_discounts) * item.item.quantity

    def final_price(self, product: Product) -> Money:
        """Catalog price of a product without attributes or discounts"""
        return Money(product.price, self.currency_service.primary_currency())

    def reward_points_to_amount(self, points: int) -> Money:
        primary = self.currency_service.primary_currency()
        if points <= 0:
            return Money(Decimal("0"), primary)
        rate = Decimal(str(self.settings.reward_points.exchange_rate))
        return Money(primary.round(points * rate), primary)

    def base_price_info(
        self, product: Product, currency: Currency, price_adjustment: Decimal
    ) -> Optional[str]:
        """Price per base unit, e.g. "$4.99 / 100 g" """
        if (
            not product.base_price_enabled
            or not product.base_price_amount
            or not product.base_price_base_amount
        ):
            return None

        primary = self.currency_service.primary_currency()
        price = product.price + price_adjustment
        base_amount = price / product.base_price_amount * product.base_price_base_amount
        taxed = self.tax_service.product_price(product, Money(base_amount, primary)).price
        converted = self.currency_service.convert_from_primary(taxed.amount, currency)

        unit = product.base_price_measure_unit or ""
        return f"{converted} / {product.base_price_base_amount} {unit}".rstrip()
