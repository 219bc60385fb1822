"""Cart validation"""

import logging
from typing import Optional, Sequence

from ..engine.collaborators import CheckoutAttributeProvider, Localizer, ValidationResult
from ..engine.selection import AttributeSelection
from ..engine.tree import ResolvedCartItem
from ..models.cart import CartLineItem

logger = logging.getLogger(__name__)


class CartValidator:
    """
    Validates cart items and, on request, the required checkout attributes.

    Every node of the given trees is validated, children included. Returns
    warnings as display strings rather than raising.
    """

    def __init__(self, attribute_provider: CheckoutAttributeProvider, localizer: Localizer):
        self.attribute_provider = attribute_provider
        self.localizer = localizer

    def validate(
        self,
        items: Sequence[ResolvedCartItem],
        validate_checkout_attributes: bool = False,
        checkout_attributes: Optional[AttributeSelection] = None,
    ) -> ValidationResult:
        warnings = []
        line_items = [node.item for tree in items for node in tree.walk()]

        for item in line_items:
            warnings.extend(self._validate_item(item))

        recurring = [item.product.is_recurring for item in line_items]
        if any(recurring) and not all(recurring):
            warnings.append(self.localizer.get_resource("ShoppingCart.RecurringMixed"))

        if validate_checkout_attributes:
            warnings.extend(
                self._validate_checkout_attributes(items, checkout_attributes or AttributeSelection())
            )

        if warnings:
            logger.debug(f"Cart validation produced {len(warnings)} warning(s)")
        return ValidationResult(is_valid=not warnings, warnings=warnings)

    def _validate_item(self, item: CartLineItem) -> list[str]:
        product = item.product
        warnings = []

        if not product.published:
            warnings.append(self.localizer.get_resource("ShoppingCart.ProductUnpublished", product.name))

        if item.quantity < product.order_minimum_quantity:
            warnings.append(self.localizer.get_resource(
                "ShoppingCart.MinimumQuantity", product.name, product.order_minimum_quantity
            ))
        if item.quantity > product.order_maximum_quantity:
            warnings.append(self.localizer.get_resource(
                "ShoppingCart.MaximumQuantity", product.name, product.order_maximum_quantity
            ))

        allowed = product.parse_allowed_quantities()
        if allowed and item.quantity not in allowed:
            warnings.append(self.localizer.get_resource(
                "ShoppingCart.AllowedQuantities", product.name, ", ".join(str(q) for q in allowed)
            ))

        if product.is_shipping_enabled and not product.is_download and item.quantity > product.stock_quantity:
            warnings.append(self.localizer.get_resource(
                "ShoppingCart.OutOfStock", product.stock_quantity, product.name
            ))

        return warnings

    def _validate_checkout_attributes(
        self,
        cart: Sequence[ResolvedCartItem],
        selection: AttributeSelection,
    ) -> list[str]:
        return [
            self.localizer.get_resource("ShoppingCart.SelectAttribute", attribute.name)
            for attribute in self.attribute_provider.valid_attributes_for(cart)
            if attribute.is_required and not selection.values_for(attribute.id)
        ]
