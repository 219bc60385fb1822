"""
Per cart item price composition

Every amount shown for a cart item goes through the same pipeline:
tax adjustment against the product (in primary currency), conversion into
the customer's working currency, then formatting. Tax rates are defined on
primary currency amounts, so the order of these stages is fixed.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..models.product import Product
from .collaborators import (
    AttributeMaterializer,
    CurrencyCollaborator,
    Localizer,
    PricingCollaborator,
    TaxCollaborator,
)
from .money import Currency, Money
from .selection import AttributeSelection, decode
from .tree import ResolvedCartItem


CALL_FOR_PRICE_RESOURCE = "Products.CallForPrice"


@dataclass
class PriceBreakdown:
    """Composed prices of a single cart item"""
    product: Product
    selection: AttributeSelection
    weight: Decimal
    call_for_price: bool = False
    unit_price: Optional[str] = None
    unit_price_value: Optional[Money] = None
    sub_total: Optional[str] = None
    discount: Optional[str] = None
    # Only for bundle children priced per item; belongs to the bundle metadata
    bundle_item_price_with_discount: Optional[str] = None
    base_price_adjustment: Decimal = Decimal("0")
    # Tax adjusted, primary currency, used for cart totals
    sub_total_with_discount_base: Optional[Money] = None
    sub_total_without_discount_base: Optional[Money] = None


class PriceComposer:
    """Computes weight, unit price, subtotal and discount of a cart item"""

    def __init__(
        self,
        pricing: PricingCollaborator,
        tax: TaxCollaborator,
        currency: CurrencyCollaborator,
        materializer: AttributeMaterializer,
        localizer: Localizer,
    ):
        self.pricing = pricing
        self.tax = tax
        self.currency = currency
        self.materializer = materializer
        self.localizer = localizer

    def compose(self, node: ResolvedCartItem, working_currency: Currency) -> PriceBreakdown:
        """
        Compose the prices of one tree node.

        Collaborator errors propagate to the caller.
        """
        item = node.item
        selection = decode(item.attributes)
        product = self.materializer.merge_combination(item.product, selection)

        breakdown = PriceBreakdown(
            product=product,
            selection=selection,
            weight=self._weight(node, product, selection),
        )

        if product.call_for_price:
            call_for_price = self.localizer.get_resource(CALL_FOR_PRICE_RESOURCE)
            breakdown.call_for_price = True
            breakdown.unit_price = call_for_price
            breakdown.sub_total = call_for_price
            return breakdown

        # Unit price
        unit_price_with_discount = self.pricing.unit_price(node, True)
        unit_price_base = self.tax.product_price(product, unit_price_with_discount).price
        unit_price = self.currency.convert_from_primary(unit_price_base.amount, working_currency)
        breakdown.unit_price_value = unit_price
        breakdown.unit_price = str(unit_price)
        breakdown.base_price_adjustment = (
            unit_price_with_discount - self.pricing.final_price(product)
        ).amount

        # Subtotal and discount
        sub_total_with_discount_base = self.tax.product_price(
            product, self.pricing.subtotal(node, True)
        ).price
        sub_total_without_discount_base = self.tax.product_price(
            product, self.pricing.subtotal(node, False)
        ).price
        breakdown.sub_total_with_discount_base = sub_total_with_discount_base
        breakdown.sub_total_without_discount_base = sub_total_without_discount_base
        breakdown.sub_total = str(
            self.currency.convert_from_primary(sub_total_with_discount_base.amount, working_currency)
        )

        discount_base = sub_total_without_discount_base - sub_total_with_discount_base
        if discount_base.amount > 0:
            discount = self.currency.convert_from_primary(discount_base.amount, working_currency)
            if discount.amount > 0:
                breakdown.discount = str(discount)

        bundle_item = item.bundle_item
        if bundle_item and bundle_item.per_item_pricing and bundle_item.per_item_shopping_cart:
            bundle_item_sub_total_base = self.tax.product_price(
                product, self.pricing.subtotal(node, True)
            ).price
            breakdown.bundle_item_price_with_discount = str(
                self.currency.convert_from_primary(bundle_item_sub_total_base.amount, working_currency)
            )

        return breakdown

    def _weight(
        self,
        node: ResolvedCartItem,
        product: Product,
        selection: AttributeSelection,
    ) -> Decimal:
        weight = product.weight
        # Bundle children carry no attribute weight of their own
        if not node.is_bundle_item:
            for value in self.materializer.materialize_values(selection):
                weight += value.weight_adjustment
        return weight
